"""Lookup from option value type to the parser that converts it.

The registry is the single source of truth for which types an option
may declare.  Plain types resolve by exact match, ``enum.Enum``
subclasses get an :class:`EnumParser`, and ``list[T]`` wraps the parser
for ``T`` in a :class:`ListParser`.
"""

from __future__ import annotations

import enum
import logging
import typing
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from fluent_clp.errors import UnsupportedValueTypeError
from fluent_clp.lib.culture import Culture
from fluent_clp.lib.value_parsers import (
    BoolParser,
    DateParser,
    DateTimeParser,
    DecimalParser,
    EnumParser,
    FloatParser,
    IntParser,
    ListParser,
    StringParser,
    ValueParseError,
    ValueParser,
)

logger = logging.getLogger(__name__)


class ValueParserRegistry:
    """Resolves value types to :class:`ValueParser` instances."""

    def __init__(self) -> None:
        self._parsers: dict[Any, ValueParser] = {}
        self._load_builtin()

    def _load_builtin(self) -> None:
        """Pre-populate with the scalar types every parser understands."""
        self._parsers[str] = StringParser()
        self._parsers[int] = IntParser()
        self._parsers[float] = FloatParser()
        self._parsers[Decimal] = DecimalParser()
        self._parsers[bool] = BoolParser()
        self._parsers[datetime] = DateTimeParser()
        self._parsers[date] = DateParser()

    def register(self, value_type: Any, parser: ValueParser) -> None:
        """Register (or replace) the parser used for *value_type*."""
        if not callable(getattr(parser, "parse", None)) or not callable(
            getattr(parser, "can_parse", None)
        ):
            raise TypeError(f"{parser!r} must provide parse() and can_parse()")
        if value_type in self._parsers:
            logger.debug("Replacing value parser for %r", value_type)
        self._parsers[value_type] = parser

    def resolve(self, value_type: Any) -> ValueParser | None:
        """Return the parser for *value_type*, or ``None`` if unsupported."""
        parser = self._parsers.get(value_type)
        if parser is not None:
            return parser

        if isinstance(value_type, type) and issubclass(value_type, enum.Enum):
            parser = EnumParser(value_type)
            self._parsers[value_type] = parser
            return parser

        origin = typing.get_origin(value_type)
        if origin is list:
            args = typing.get_args(value_type)
            item_parser = self.resolve(args[0] if args else str)
            if item_parser is None:
                return None
            parser = ListParser(item_parser)
            self._parsers[value_type] = parser
            return parser

        return None

    def get(self, value_type: Any) -> ValueParser:
        """Like :meth:`resolve` but raise for unsupported types."""
        parser = self.resolve(value_type)
        if parser is None:
            raise UnsupportedValueTypeError(value_type)
        return parser

    def supports(self, value_type: Any) -> bool:
        return self.resolve(value_type) is not None

    def parse(self, value_type: Any, raw: str | None, culture: Culture) -> Any:
        """Convert *raw* to *value_type* under *culture*.

        Any failure inside the parser, including one from a registered
        custom parser that raises something other than ``ValueError``,
        surfaces as :class:`ValueParseError`.
        """
        parser = self.get(value_type)
        try:
            return parser.parse(raw, culture)
        except ValueError:
            raise
        except Exception as exc:
            logger.debug("Parser for %r raised %r on %r", value_type, exc, raw)
            raise ValueParseError(
                f"cannot convert {raw!r}: {type(exc).__name__}: {exc}"
            ) from exc

    def can_parse(self, value_type: Any, raw: str | None, culture: Culture) -> bool:
        parser = self.resolve(value_type)
        return parser is not None and parser.can_parse(raw, culture)
