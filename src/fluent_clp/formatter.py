"""Text formatting for usage (help) output and parse errors."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

from fluent_clp.model.option import CommandLineOption

if TYPE_CHECKING:
    from fluent_clp.parser.result import ParseResult

NO_OPTIONS_TEXT = "No options have been setup"


class OptionFormatter(Protocol):
    def format(self, options: Sequence[CommandLineOption]) -> str: ...


def format_option_names(option: CommandLineOption) -> str:
    """``-f, --file`` style name column for one option."""
    names = f"-{option.short_name}"
    if option.long_name:
        names += f", --{option.long_name}"
    return names


def format_option_details(option: CommandLineOption) -> str:
    """Description plus required/default markers."""
    parts: list[str] = []
    if option.description:
        parts.append(option.description)
    if option.is_required:
        parts.append("(required)")
    elif option.has_default:
        parts.append(f"(default: {option.default_value})")
    return " ".join(parts)


class CommandLineOptionFormatter:
    """Renders options as an aligned two-column listing.

    Options are listed alphabetically by short name::

        Options:
          -f, --file     Input file (required)
          -v, --verbose  Chatty output (default: False)
    """

    def __init__(self, header: str | None = "Options:", indent: int = 2, gap: int = 2) -> None:
        self.header = header
        self.indent = indent
        self.gap = gap

    def format(self, options: Sequence[CommandLineOption]) -> str:
        if options is None:
            raise TypeError("options must not be None")
        if not options:
            return NO_OPTIONS_TEXT

        ordered = sorted(options, key=lambda o: o.short_name.casefold())
        rows = [(format_option_names(o), format_option_details(o)) for o in ordered]
        width = max(len(names) for names, _ in rows)

        lines: list[str] = []
        if self.header:
            lines.append(self.header)
        pad = " " * self.indent
        for names, details in rows:
            if details:
                lines.append(f"{pad}{names.ljust(width)}{' ' * self.gap}{details}")
            else:
                lines.append(f"{pad}{names}")
        return "\n".join(lines)


class ErrorFormatter:
    """One line per parse error; empty string when there are none."""

    def format(self, result: ParseResult) -> str:
        return "\n".join(error.message for error in result.errors)
