"""Declared options and the help trigger.

Options are configured through chained setters before parsing, then
bound once per parse pass by the matcher.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class CommandLineOption:
    """A named option with a value type, default and required flag."""

    def __init__(
        self,
        short_name: str,
        long_name: str | None = None,
        value_type: Any = str,
    ) -> None:
        self.short_name = short_name
        self.long_name = long_name
        self.value_type = value_type
        self.description: str | None = None
        self.is_required = False
        self.has_default = False
        self.default_value: Any = None
        self._callbacks: list[Callable[[Any], None]] = []
        self._value: Any = None
        self._has_value = False

    # -- fluent setup --------------------------------------------------------

    def required(self) -> CommandLineOption:
        """Mark the option as required; a missing option becomes a parse error."""
        self.is_required = True
        return self

    def with_default(self, value: Any) -> CommandLineOption:
        """Value bound when the option is optional and absent from input."""
        self.has_default = True
        self.default_value = value
        return self

    def with_description(self, description: str) -> CommandLineOption:
        self.description = description
        return self

    def callback(self, fn: Callable[[Any], None]) -> CommandLineOption:
        """Call *fn* with the value every time the option is bound.

        Callbacks accumulate and run in the order they were added.
        """
        if not callable(fn):
            raise TypeError(f"callback must be callable, got {fn!r}")
        self._callbacks.append(fn)
        return self

    # -- binding -------------------------------------------------------------

    @property
    def value(self) -> Any:
        return self._value

    @property
    def has_value(self) -> bool:
        return self._has_value

    @property
    def has_callback(self) -> bool:
        return bool(self._callbacks)

    @property
    def names(self) -> tuple[str, ...]:
        if self.long_name:
            return (self.short_name, self.long_name)
        return (self.short_name,)

    def reset(self) -> None:
        """Forget the value bound by a previous parse."""
        self._value = None
        self._has_value = False

    def bind(self, value: Any) -> None:
        """Store an already converted *value* and notify the callback."""
        self._value = value
        self._has_value = True
        self._notify(value)

    def bind_default(self) -> None:
        if not self.has_default:
            return
        self.bind(self.default_value)

    def _notify(self, value: Any) -> None:
        for fn in self._callbacks:
            try:
                fn(value)
            except Exception:
                logger.warning("Callback for option %r raised", self.short_name)
                raise

    def __repr__(self) -> str:
        long_part = f", long_name={self.long_name!r}" if self.long_name else ""
        return (
            f"CommandLineOption(short_name={self.short_name!r}{long_part}, "
            f"value_type={getattr(self.value_type, '__name__', self.value_type)})"
        )


class HelpOption:
    """Names that, when present in input, show usage text instead of parsing."""

    def __init__(self, names: tuple[str, ...]) -> None:
        self.names = names
        self.header: str | None = None
        self.show_on_empty_args = False
        self._callback: Callable[[str], None] | None = None

    def callback(self, fn: Callable[[str], None]) -> HelpOption:
        """Call *fn* with the formatted usage text when help is requested."""
        if not callable(fn):
            raise TypeError(f"callback must be callable, got {fn!r}")
        self._callback = fn
        return self

    def with_header(self, header: str) -> HelpOption:
        self.header = header
        return self

    def use_for_empty_args(self) -> HelpOption:
        """Also show help when the argument list is empty."""
        self.show_on_empty_args = True
        return self

    def show(self, usage_text: str) -> None:
        text = f"{self.header}\n{usage_text}" if self.header else usage_text
        if self._callback is not None:
            self._callback(text)
