"""Value parsers — convert raw option strings into typed values.

Each parser implements ``parse(raw, culture)`` and
``can_parse(raw, culture)``.  ``raw`` is ``None`` when the option was
given flag-style (``-v`` with no value); only :class:`BoolParser`
accepts that.
"""

from __future__ import annotations

import enum
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Protocol

from fluent_clp.lib.culture import Culture


class ValueParseError(ValueError):
    """Raised when a raw string cannot be converted to the target type."""


class ValueParser(Protocol):
    """Capability consumed by the matcher for one value type."""

    def parse(self, raw: str | None, culture: Culture) -> Any: ...

    def can_parse(self, raw: str | None, culture: Culture) -> bool: ...


class BaseValueParser:
    """Shared ``can_parse`` in terms of ``parse``."""

    type_name = "value"

    def parse(self, raw: str | None, culture: Culture) -> Any:
        raise NotImplementedError

    def can_parse(self, raw: str | None, culture: Culture) -> bool:
        try:
            self.parse(raw, culture)
        except ValueError:
            return False
        return True

    def _require(self, raw: str | None) -> str:
        if raw is None:
            raise ValueParseError(f"a value is required ({self.type_name})")
        return raw

    def _number_text(self, raw: str | None, culture: Culture) -> str:
        text = self._require(raw)
        try:
            return culture.normalize_number(text)
        except ValueError as exc:
            raise ValueParseError(f"invalid {self.type_name}: {raw!r} ({exc})") from None


class StringParser(BaseValueParser):
    type_name = "string"

    def parse(self, raw: str | None, culture: Culture) -> str:
        return self._require(raw)


# Optional sign and digits, after group separators are stripped
_INT_RE = re.compile(r"^[+-]?\d+$")


class IntParser(BaseValueParser):
    type_name = "integer"

    def parse(self, raw: str | None, culture: Culture) -> int:
        text = self._number_text(raw, culture)
        if not _INT_RE.match(text):
            raise ValueParseError(f"invalid integer: {raw!r}")
        return int(text)


class FloatParser(BaseValueParser):
    type_name = "number"

    def parse(self, raw: str | None, culture: Culture) -> float:
        text = self._number_text(raw, culture)
        try:
            return float(text)
        except ValueError:
            raise ValueParseError(f"invalid number: {raw!r}") from None


class DecimalParser(BaseValueParser):
    type_name = "decimal"

    def parse(self, raw: str | None, culture: Culture) -> Decimal:
        text = self._number_text(raw, culture)
        try:
            value = Decimal(text)
        except InvalidOperation:
            raise ValueParseError(f"invalid decimal: {raw!r}") from None
        if not value.is_finite():
            raise ValueParseError(f"invalid decimal: {raw!r}")
        return value


class BoolParser(BaseValueParser):
    """Booleans; a missing value means the flag was switched on."""

    type_name = "boolean"

    def parse(self, raw: str | None, culture: Culture) -> bool:
        if raw is None:
            return True
        text = raw.strip().lower()
        if text in culture.true_values:
            return True
        if text in culture.false_values:
            return False
        raise ValueParseError(f"invalid boolean: {raw!r}")


class DateTimeParser(BaseValueParser):
    """ISO 8601 first, then the culture's ``date_formats`` in order."""

    type_name = "date/time"

    def parse(self, raw: str | None, culture: Culture) -> datetime:
        text = self._require(raw).strip()
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            pass
        for fmt in culture.date_formats:
            try:
                return datetime.strptime(text, fmt)
            except ValueError:
                continue
        raise ValueParseError(f"invalid date/time for {culture.name}: {raw!r}")


class DateParser(DateTimeParser):
    type_name = "date"

    def parse(self, raw: str | None, culture: Culture) -> date:
        return super().parse(raw, culture).date()


class EnumParser(BaseValueParser):
    """Enum members by name (case-insensitive) or by value."""

    type_name = "choice"

    def __init__(self, enum_type: type[enum.Enum]) -> None:
        self.enum_type = enum_type

    def parse(self, raw: str | None, culture: Culture) -> enum.Enum:
        text = self._require(raw).strip()
        for member in self.enum_type:
            if member.name.lower() == text.lower():
                return member
        for member in self.enum_type:
            if str(member.value) == text:
                return member
        choices = ", ".join(m.name for m in self.enum_type)
        raise ValueParseError(f"invalid choice: {raw!r} (choose from {choices})")


class ListParser(BaseValueParser):
    """Whitespace-separated items, each converted by *item_parser*.

    ``-n 1 2 3`` reaches this parser as ``"1 2 3"``.
    """

    type_name = "list"

    def __init__(self, item_parser: ValueParser) -> None:
        self.item_parser = item_parser

    def parse(self, raw: str | None, culture: Culture) -> list[Any]:
        items = self._require(raw).split()
        if not items:
            raise ValueParseError("at least one list item is required")
        return [self.item_parser.parse(item, culture) for item in items]
