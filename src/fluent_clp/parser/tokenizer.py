"""Argument tokenizer — turns a raw argument vector into key/value pairs.

Recognized conventions
----------------------
- Key prefixes: ``--``, ``-``, ``/`` (longest match wins)
- Inline values: ``--key=value``, ``-k:value``, ``/k:value``
- Separate values: ``-k value`` (bare values join with a space until the
  next key)
- Flags: ``-v`` with no value produces ``value=None``

A prefixed argument that is a number (``-5``, ``-2.5``) is a value.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)


class SpecialCharacters:
    """Characters that define the argument syntax."""

    KEY_PREFIXES: tuple[str, ...] = ("--", "-", "/")
    VALUE_ASSIGNMENTS: tuple[str, ...] = ("=", ":")

    @staticmethod
    def is_reserved(ch: str) -> bool:
        """Characters that may never appear in an option name."""
        return ch in SpecialCharacters.VALUE_ASSIGNMENTS or ch.isspace()


@dataclass(frozen=True)
class TokenPair:
    """A key and its optional value, in input order."""

    key: str
    value: str | None = None


class Tokenizer(Protocol):
    def tokenize(self, args: Sequence[str] | None) -> list[TokenPair]: ...


_NUMBER_RE = re.compile(r"^[+-]?(\d+([.,]\d*)?|[.,]\d+)([eE][+-]?\d+)?$")


class CommandLineTokenizer:
    """Default :class:`Tokenizer` implementation."""

    def __init__(
        self,
        prefixes: Iterable[str] = SpecialCharacters.KEY_PREFIXES,
        assignments: Iterable[str] = SpecialCharacters.VALUE_ASSIGNMENTS,
    ) -> None:
        # Longest prefix first so "--" is not read as "-" + "-key"
        self.prefixes = tuple(sorted(prefixes, key=len, reverse=True))
        self.assignments = tuple(assignments)

    def tokenize(self, args: Sequence[str] | None) -> list[TokenPair]:
        """Split *args* into :class:`TokenPair` objects.

        Examples
        --------
        >>> CommandLineTokenizer().tokenize(["-n", "value", "--long=value2"])
        [TokenPair(key='n', value='value'), TokenPair(key='long', value='value2')]
        """
        if not args:
            return []

        pairs: list[TokenPair] = []
        key: str | None = None
        inline: str | None = None
        values: list[str] = []

        def _flush() -> None:
            if key is None:
                return
            if inline is not None:
                pairs.append(TokenPair(key, inline))
            elif values:
                pairs.append(TokenPair(key, " ".join(values)))
            else:
                pairs.append(TokenPair(key, None))

        for arg in args:
            body = self._strip_prefix(arg)
            if body is None:
                if key is None:
                    logger.debug("Dropping value %r with no preceding key", arg)
                elif inline is not None:
                    logger.debug("Dropping value %r after inline value for %r", arg, key)
                else:
                    values.append(arg)
                continue

            _flush()
            key, inline = self._split_assignment(body)
            values = []

        _flush()
        return pairs

    def is_key(self, arg: str) -> bool:
        return self._strip_prefix(arg) is not None

    def accepts_name(self, name: str) -> bool:
        """True if ``<prefix><name>`` reads back as key *name* for every prefix.

        Rejects names this tokenizer would treat as a value or split
        differently: ``1`` (``-1`` is a number), ``a/b`` (a path), or
        ``-x`` (``---x`` is a bare value).

        >>> CommandLineTokenizer().accepts_name("1")
        False
        """
        for prefix in self.prefixes:
            arg = prefix + name
            if not self.is_key(arg) or self._split_assignment(self._strip_prefix(arg)) != (
                name,
                None,
            ):
                return False
        return True

    def _strip_prefix(self, arg: str) -> str | None:
        """Return *arg* without its key prefix, or ``None`` if it is a value.

        Numbers, bare prefixes (``-``, ``--``) and paths such as
        ``/tmp/out.txt`` are values.
        """
        if _NUMBER_RE.match(arg):
            return None
        for prefix in self.prefixes:
            if not arg.startswith(prefix):
                continue
            body = arg[len(prefix):]
            if not body or body.startswith(self.prefixes):
                return None
            name, _ = self._split_assignment(body)
            if "/" in name or "\\" in name:
                return None
            return body
        return None

    def _split_assignment(self, body: str) -> tuple[str, str | None]:
        """Split on the first assignment marker found in *body*."""
        best: tuple[int, str] | None = None
        for marker in self.assignments:
            idx = body.find(marker)
            if idx > 0 and (best is None or idx < best[0]):
                best = (idx, marker)
        if best is None:
            return body, None
        idx, marker = best
        return body[:idx], body[idx + len(marker):]


_default_tokenizer = CommandLineTokenizer()


def tokenize(args: Sequence[str] | None) -> list[TokenPair]:
    """Tokenize *args* with the default conventions."""
    return _default_tokenizer.tokenize(args)
