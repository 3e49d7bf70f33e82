"""Option matcher — binds declared options to tokenized input.

Walks the declared options in setup order.  For each one:

1. take the first remaining pair whose key is the option's short or
   long name (comparison policy is parser-wide);
2. if found, consume the pair and bind the converted value;
3. if missing and required, record an error;
4. if missing and optional, bind the default (if any).

Options that were not found end up in ``unmatched_options`` even when a
default was bound.  Pairs nobody consumed become
``additional_options_found``.  Nothing here raises for bad input; every
problem is collected on the result.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from fluent_clp.lib.culture import Culture
from fluent_clp.lib.parser_registry import ValueParserRegistry
from fluent_clp.model.option import CommandLineOption
from fluent_clp.parser.result import (
    ExpectedOptionNotFoundParseError,
    OptionSyntaxParseError,
    ParseResult,
)
from fluent_clp.parser.tokenizer import TokenPair

logger = logging.getLogger(__name__)


def names_equal(a: str | None, b: str | None, case_sensitive: bool) -> bool:
    """Compare two option names under the parser-wide policy."""
    if a is None or b is None:
        return False
    if case_sensitive:
        return a == b
    return a.casefold() == b.casefold()


class OptionMatcher:
    """Reconciles declared options with token pairs."""

    def __init__(
        self,
        registry: ValueParserRegistry,
        culture: Culture,
        case_sensitive: bool = False,
    ) -> None:
        self.registry = registry
        self.culture = culture
        self.case_sensitive = case_sensitive

    def match(
        self,
        options: Sequence[CommandLineOption],
        pairs: Sequence[TokenPair],
    ) -> ParseResult:
        result = ParseResult()
        remaining = list(pairs)

        for option in options:
            index = self._find(option, remaining)

            if index is None:
                if option.is_required:
                    logger.debug("Required option %r not found", option.short_name)
                    result.errors.append(ExpectedOptionNotFoundParseError(option))
                elif option.has_default:
                    logger.debug(
                        "Option %r not found, binding default %r",
                        option.short_name,
                        option.default_value,
                    )
                    option.bind_default()
                result.unmatched_options.append(option)
                continue

            pair = remaining.pop(index)
            try:
                value = self.registry.parse(option.value_type, pair.value, self.culture)
            except ValueError as exc:
                logger.debug(
                    "Option %r could not convert %r: %s", option.short_name, pair.value, exc
                )
                result.errors.append(
                    OptionSyntaxParseError(option, raw_value=pair.value, reason=str(exc))
                )
                result.unmatched_options.append(option)
                continue

            logger.debug("Option %r matched key %r", option.short_name, pair.key)
            option.bind(value)
            result.matched_options.append(option)

        result.additional_options_found.extend(remaining)
        return result

    def _find(self, option: CommandLineOption, pairs: Sequence[TokenPair]) -> int | None:
        for idx, pair in enumerate(pairs):
            if names_equal(pair.key, option.short_name, self.case_sensitive) or names_equal(
                pair.key, option.long_name, self.case_sensitive
            ):
                return idx
        return None


def match_options(
    options: Sequence[CommandLineOption],
    pairs: Sequence[TokenPair],
    registry: ValueParserRegistry | None = None,
    culture: Culture | None = None,
    case_sensitive: bool = False,
) -> ParseResult:
    """Match *pairs* against *options* with default collaborators."""
    matcher = OptionMatcher(
        registry if registry is not None else ValueParserRegistry(),
        culture if culture is not None else Culture.invariant(),
        case_sensitive=case_sensitive,
    )
    return matcher.match(options, pairs)
