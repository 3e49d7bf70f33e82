"""Fluent command line parser — option setup, parsing and usage text.

Typical use::

    parser = FluentCommandLineParser()
    parser.setup("f", "file").required().with_description("Input file")
    parser.setup("v", "verbose", bool).with_default(False)
    result = parser.parse(["--file=report.txt"])
    if result.has_errors:
        print(result.error_text)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from fluent_clp.errors import (
    InvalidOptionNameError,
    OptionAlreadyExistsError,
    UnsupportedValueTypeError,
)
from fluent_clp.formatter import CommandLineOptionFormatter, OptionFormatter
from fluent_clp.lib.culture import Culture
from fluent_clp.lib.parser_registry import ValueParserRegistry
from fluent_clp.model.option import CommandLineOption, HelpOption
from fluent_clp.parser.matcher import match_options, names_equal
from fluent_clp.parser.result import ParseResult
from fluent_clp.parser.tokenizer import (
    CommandLineTokenizer,
    SpecialCharacters,
    TokenPair,
    Tokenizer,
)

logger = logging.getLogger(__name__)


def ensure_valid_short_name(name: str | None) -> None:
    if name is None or not name.strip():
        raise InvalidOptionNameError(name, "short name must not be empty")
    _ensure_no_reserved_chars(name)


def ensure_valid_long_name(name: str | None) -> None:
    if name is None:
        return
    if not name.strip():
        raise InvalidOptionNameError(name, "long name must not be empty or whitespace")
    _ensure_no_reserved_chars(name)


def _ensure_no_reserved_chars(name: str) -> None:
    bad = sorted({ch for ch in name if SpecialCharacters.is_reserved(ch)})
    if bad:
        raise InvalidOptionNameError(name, f"contains reserved characters {bad!r}")


class FluentCommandLineParser:
    """Declares options and parses argument vectors against them.

    A parser instance rebinds its options on every :meth:`parse` call, so
    one instance must not run two parses at the same time.
    """

    def __init__(
        self,
        case_sensitive: bool = False,
        culture: Culture | None = None,
        registry: ValueParserRegistry | None = None,
        tokenizer: Tokenizer | None = None,
    ) -> None:
        self.is_case_sensitive = case_sensitive
        self.culture = culture if culture is not None else Culture.invariant()
        self._registry = registry
        self._tokenizer = tokenizer
        self._options: list[CommandLineOption] | None = None
        self._default_formatter: OptionFormatter | None = None
        self.help_option: HelpOption | None = None

    # -- collaborators -------------------------------------------------------

    @property
    def options(self) -> list[CommandLineOption]:
        if self._options is None:
            self._options = []
        return self._options

    @property
    def registry(self) -> ValueParserRegistry:
        if self._registry is None:
            self._registry = ValueParserRegistry()
        return self._registry

    @registry.setter
    def registry(self, value: ValueParserRegistry | None) -> None:
        self._registry = value

    @property
    def tokenizer(self) -> Tokenizer:
        if self._tokenizer is None:
            self._tokenizer = CommandLineTokenizer()
        return self._tokenizer

    @tokenizer.setter
    def tokenizer(self, value: Tokenizer | None) -> None:
        self._tokenizer = value

    @property
    def default_formatter(self) -> OptionFormatter:
        if self._default_formatter is None:
            self._default_formatter = CommandLineOptionFormatter()
        return self._default_formatter

    @default_formatter.setter
    def default_formatter(self, value: OptionFormatter | None) -> None:
        self._default_formatter = value

    # -- setup ---------------------------------------------------------------

    def setup(
        self,
        short_name: str,
        long_name: str | None = None,
        value_type: Any = str,
    ) -> CommandLineOption:
        """Declare a new option and return it for further configuration.

        Raises
        ------
        InvalidOptionNameError
            If either name is empty, contains ``=``, ``:`` or whitespace, or
            would be tokenized as a value (``1``, ``a/b``, ``-x``).
        OptionAlreadyExistsError
            If another option already uses *short_name* or *long_name*.
        UnsupportedValueTypeError
            If no value parser handles *value_type*.
        """
        ensure_valid_short_name(short_name)
        ensure_valid_long_name(long_name)
        self._ensure_readable_as_key(short_name)
        if long_name is not None:
            self._ensure_readable_as_key(long_name)
        self._ensure_unique(short_name, long_name)

        if not self.registry.supports(value_type):
            raise UnsupportedValueTypeError(value_type)

        option = CommandLineOption(short_name, long_name, value_type)
        self.options.append(option)
        logger.debug("Set up %r", option)
        return option

    def setup_help(self, *names: str) -> HelpOption:
        """Declare the names that trigger help, e.g. ``setup_help("?", "help")``."""
        if not names:
            raise InvalidOptionNameError(None, "at least one help name is required")
        for name in names:
            ensure_valid_short_name(name)
            self._ensure_readable_as_key(name)
        self.help_option = HelpOption(tuple(names))
        return self.help_option

    def _ensure_readable_as_key(self, name: str) -> None:
        accepts_name = getattr(self.tokenizer, "accepts_name", None)
        if accepts_name is not None and not accepts_name(name):
            raise InvalidOptionNameError(
                name, "would be read as a value (number, path or prefixed name)"
            )

    def _ensure_unique(self, short_name: str, long_name: str | None) -> None:
        for option in self.options:
            if names_equal(short_name, option.short_name, self.is_case_sensitive):
                raise OptionAlreadyExistsError(short_name)
            if names_equal(long_name, option.long_name, self.is_case_sensitive):
                raise OptionAlreadyExistsError(long_name)

    def find_option(self, name: str) -> CommandLineOption | None:
        """Look up a declared option by short or long name."""
        for option in self.options:
            if names_equal(name, option.short_name, self.is_case_sensitive) or names_equal(
                name, option.long_name, self.is_case_sensitive
            ):
                return option
        return None

    # -- parsing -------------------------------------------------------------

    def parse(self, args: Sequence[str] | None) -> ParseResult:
        """Parse *args* against the declared options.

        Never raises for bad input; inspect ``result.errors``,
        ``result.unmatched_options`` and ``result.additional_options_found``.
        """
        for option in self.options:
            option.reset()

        pairs = self.tokenizer.tokenize(args)
        empty_args = not args

        help_option = self.help_option
        if help_option is not None and self._help_requested(help_option, pairs, empty_args):
            logger.debug("Help requested")
            help_option.show(self.create_show_usage_text())
            return ParseResult(help_called=True, empty_args=empty_args)

        result = match_options(
            self.options, pairs, self.registry, self.culture, self.is_case_sensitive
        )
        result.empty_args = empty_args
        logger.debug(
            "Parsed %d pairs: %d matched, %d unmatched, %d additional, %d errors",
            len(pairs),
            len(result.matched_options),
            len(result.unmatched_options),
            len(result.additional_options_found),
            len(result.errors),
        )
        return result

    def _help_requested(
        self, help_option: HelpOption, pairs: Sequence[TokenPair], empty_args: bool
    ) -> bool:
        if empty_args:
            return help_option.show_on_empty_args
        return any(
            names_equal(pair.key, name, self.is_case_sensitive)
            for pair in pairs
            for name in help_option.names
        )

    # -- usage ---------------------------------------------------------------

    def create_show_usage_text(self, formatter: OptionFormatter | None = None) -> str:
        """Describe every declared option; *formatter* defaults to :attr:`default_formatter`."""
        if formatter is None:
            formatter = self.default_formatter
        if not callable(getattr(formatter, "format", None)):
            raise TypeError(f"{formatter!r} has no format() method")
        return formatter.format(self.options)
