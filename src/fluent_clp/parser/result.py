"""Parse results and the error records collected while matching."""

from __future__ import annotations

from dataclasses import dataclass, field

from fluent_clp.formatter import ErrorFormatter
from fluent_clp.model.option import CommandLineOption
from fluent_clp.parser.tokenizer import TokenPair


def _display_name(option: CommandLineOption) -> str:
    if option.long_name:
        return f"{option.short_name}:{option.long_name}"
    return option.short_name


@dataclass
class ParseError:
    """Base record for a problem with one declared option."""

    option: CommandLineOption

    @property
    def message(self) -> str:
        return f"Option '{_display_name(self.option)}' is invalid"


@dataclass
class ExpectedOptionNotFoundParseError(ParseError):
    """A required option did not appear in the input."""

    @property
    def message(self) -> str:
        return f"Option '{_display_name(self.option)}' is required but was not found"


@dataclass
class OptionSyntaxParseError(ParseError):
    """An option was found but its value could not be converted."""

    raw_value: str | None = None
    reason: str = ""

    @property
    def message(self) -> str:
        name = _display_name(self.option)
        if self.raw_value is None:
            return f"Option '{name}' has no value: {self.reason}"
        return f"Option '{name}' has an invalid value {self.raw_value!r}: {self.reason}"


@dataclass
class ParseResult:
    """Outcome of one ``parse`` call.

    Every declared option is in exactly one of ``matched_options`` and
    ``unmatched_options``.  An optional option bound to its default is
    still unmatched, since nothing in the input named it.
    """

    matched_options: list[CommandLineOption] = field(default_factory=list)
    unmatched_options: list[CommandLineOption] = field(default_factory=list)
    additional_options_found: list[TokenPair] = field(default_factory=list)
    errors: list[ParseError] = field(default_factory=list)
    help_called: bool = False
    empty_args: bool = False

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def error_text(self) -> str:
        return ErrorFormatter().format(self)
