"""Custom exception hierarchy for fluent-clp.

Only setup-time misuse is raised.  Problems found while parsing user
input are collected on :class:`~fluent_clp.parser.result.ParseResult`
instead.
"""

from __future__ import annotations


class FclpError(Exception):
    """Base exception for all fluent-clp errors."""


class OptionSetupError(FclpError, ValueError):
    """An option could not be set up on a parser.

    Subclasses both FclpError and ValueError so callers can treat bad
    option definitions like any other bad argument value.
    """


class InvalidOptionNameError(OptionSetupError):
    """Option name is empty, whitespace-only or contains reserved characters."""

    def __init__(self, name: str | None, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid option name {name!r}: {reason}")


class OptionAlreadyExistsError(OptionSetupError):
    """An option with the same short or long name is already set up."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Option {name!r} already exists")


class UnsupportedValueTypeError(OptionSetupError):
    """No value parser is registered for the requested type."""

    def __init__(self, value_type: object) -> None:
        self.value_type = value_type
        super().__init__(f"No value parser registered for type {value_type!r}")
