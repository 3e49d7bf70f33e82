"""Shared test fixtures for fluent-clp tests."""

from __future__ import annotations

import pytest

from fluent_clp.fluent import FluentCommandLineParser
from fluent_clp.lib.culture import Culture
from fluent_clp.lib.parser_registry import ValueParserRegistry


@pytest.fixture
def parser() -> FluentCommandLineParser:
    """Provide a fresh case-insensitive parser."""
    return FluentCommandLineParser()


@pytest.fixture
def file_parser(parser: FluentCommandLineParser) -> FluentCommandLineParser:
    """Provide a parser with a required --file and an optional --verbose flag."""
    parser.setup("f", "file").required().with_description("Input file")
    parser.setup("v", "verbose", bool).with_default(False)
    return parser


@pytest.fixture
def registry() -> ValueParserRegistry:
    return ValueParserRegistry()


@pytest.fixture
def invariant() -> Culture:
    return Culture.invariant()
