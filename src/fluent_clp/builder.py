"""Builds and populates a caller-owned object from command line arguments.

Each option is wired to an explicit setter closure; the parsing engine
never sees the target object.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any, Generic, TypeVar

from fluent_clp.fluent import FluentCommandLineParser
from fluent_clp.model.option import CommandLineOption, HelpOption
from fluent_clp.parser.result import ParseResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FluentCommandLineBuilder(Generic[T]):
    """Parser wrapper that writes parsed values into :attr:`object`.

    Examples
    --------
    >>> from dataclasses import dataclass
    >>> @dataclass
    ... class Settings:
    ...     file: str = ""
    ...     retries: int = 0
    >>> builder = FluentCommandLineBuilder(Settings)
    >>> _ = builder.setup_attribute("file", "f", "file").required()
    >>> _ = builder.setup_attribute("retries", "r", value_type=int).with_default(3)
    >>> result = builder.parse(["-f", "a.txt"])
    >>> builder.object
    Settings(file='a.txt', retries=3)
    """

    def __init__(
        self,
        factory: Callable[[], T],
        parser: FluentCommandLineParser | None = None,
    ) -> None:
        self.object: T = factory()
        self.parser = parser if parser is not None else FluentCommandLineParser()

    @property
    def is_case_sensitive(self) -> bool:
        return self.parser.is_case_sensitive

    @is_case_sensitive.setter
    def is_case_sensitive(self, value: bool) -> None:
        self.parser.is_case_sensitive = value

    def setup(
        self,
        setter: Callable[[Any], None],
        short_name: str,
        long_name: str | None = None,
        value_type: Any = str,
    ) -> CommandLineOption:
        """Declare an option whose bound value is passed to *setter*.

        Callbacks added later with ``.callback(fn)`` run after *setter*.
        """
        if not callable(setter):
            raise TypeError(f"setter must be callable, got {setter!r}")
        return self.parser.setup(short_name, long_name, value_type).callback(setter)

    def setup_attribute(
        self,
        attribute: str,
        short_name: str,
        long_name: str | None = None,
        value_type: Any = str,
    ) -> CommandLineOption:
        """Declare an option that assigns ``self.object.<attribute>``."""
        if not hasattr(self.object, attribute):
            raise AttributeError(
                f"{type(self.object).__name__!r} object has no attribute {attribute!r}"
            )
        target = self.object

        def _assign(value: Any) -> None:
            logger.debug("Setting %s.%s", type(target).__name__, attribute)
            setattr(target, attribute, value)

        return self.setup(_assign, short_name, long_name, value_type)

    def setup_help(self, *names: str) -> HelpOption:
        return self.parser.setup_help(*names)

    def parse(self, args: Sequence[str] | None) -> ParseResult:
        return self.parser.parse(args)
