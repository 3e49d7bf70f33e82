"""Number, date and boolean conventions used when converting option values.

A :class:`Culture` is always handed to value parsers explicitly; nothing
reads the process locale.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from functools import lru_cache

# Accepted after ISO 8601, in order
_ISO_DATE_FORMATS: tuple[str, ...] = (
    "%Y-%m-%d",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d %H:%M:%S",
    "%Y%m%d",
)

_TRUE_VALUES: frozenset[str] = frozenset({"true", "1", "yes", "y", "on"})
_FALSE_VALUES: frozenset[str] = frozenset({"false", "0", "no", "n", "off"})


@lru_cache(maxsize=None)
def _grouped_pattern(sep: str) -> re.Pattern[str]:
    return re.compile(rf"^\d{{1,3}}(?:{re.escape(sep)}\d{{3}})+$")


@dataclass(frozen=True)
class Culture:
    """Conventions for one locale."""

    name: str
    decimal_separator: str = "."
    group_separator: str = ","
    date_formats: tuple[str, ...] = _ISO_DATE_FORMATS
    true_values: frozenset[str] = _TRUE_VALUES
    false_values: frozenset[str] = _FALSE_VALUES

    @classmethod
    def invariant(cls) -> Culture:
        """Culture-neutral conventions (ISO dates, ``.`` decimals)."""
        return _PRESETS["invariant"]

    @classmethod
    def named(cls, name: str) -> Culture:
        """Return a built-in preset such as ``"en-US"`` or ``"de-DE"``.

        Lookup is case-insensitive; unknown names raise ``KeyError``.
        """
        try:
            return _PRESETS[name.lower()]
        except KeyError:
            known = ", ".join(sorted(p.name for p in _PRESETS.values()))
            raise KeyError(f"Unknown culture {name!r} (known: {known})") from None

    def with_date_formats(self, *formats: str) -> Culture:
        """Return a copy that tries *formats* before the existing ones."""
        return replace(self, date_formats=tuple(formats) + self.date_formats)

    def normalize_number(self, raw: str) -> str:
        """Rewrite a localized number into the form ``float()`` accepts.

        Group separators are removed and the decimal separator becomes
        ``.``.  Plain spaces count as group separators when the culture
        uses a space-like one.  A group separator is only accepted between
        groups of three digits in the integer part, so ``"1,5"`` or
        ``"1,2,3"`` under the invariant culture raise ``ValueError``
        instead of silently becoming ``15`` or ``123``.
        """
        text = raw.strip()
        sep = self.group_separator
        if sep:
            if sep.isspace():
                text = text.replace(" ", sep)
            if sep in text:
                whole, _, fraction = text.partition(self.decimal_separator)
                digits = whole.lstrip("+-")
                if sep in fraction or not _grouped_pattern(sep).match(digits):
                    raise ValueError(f"misplaced group separator in {raw!r}")
                text = text.replace(sep, "")
        if self.decimal_separator != ".":
            text = text.replace(self.decimal_separator, ".")
        return text


_PRESETS: dict[str, Culture] = {
    "invariant": Culture(name="invariant"),
    "en-us": Culture(
        name="en-US",
        date_formats=("%m/%d/%Y", "%m/%d/%Y %H:%M", "%m/%d/%Y %H:%M:%S")
        + _ISO_DATE_FORMATS,
    ),
    "en-gb": Culture(
        name="en-GB",
        date_formats=("%d/%m/%Y", "%d/%m/%Y %H:%M", "%d/%m/%Y %H:%M:%S")
        + _ISO_DATE_FORMATS,
    ),
    "de-de": Culture(
        name="de-DE",
        decimal_separator=",",
        group_separator=".",
        date_formats=("%d.%m.%Y", "%d.%m.%Y %H:%M", "%d.%m.%Y %H:%M:%S")
        + _ISO_DATE_FORMATS,
        true_values=_TRUE_VALUES | {"ja", "j"},
        false_values=_FALSE_VALUES | {"nein"},
    ),
    "fr-fr": Culture(
        name="fr-FR",
        decimal_separator=",",
        group_separator=" ",
        date_formats=("%d/%m/%Y", "%d/%m/%Y %H:%M", "%d/%m/%Y %H:%M:%S")
        + _ISO_DATE_FORMATS,
        true_values=_TRUE_VALUES | {"oui", "vrai"},
        false_values=_FALSE_VALUES | {"non", "faux"},
    ),
}
