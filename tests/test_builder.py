"""Tests for FluentCommandLineBuilder."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from fluent_clp.builder import FluentCommandLineBuilder
from fluent_clp.fluent import FluentCommandLineParser


@dataclass
class Settings:
    file: str = ""
    retries: int = 0
    verbose: bool = False
    tags: list[str] = field(default_factory=list)


@pytest.fixture
def builder() -> FluentCommandLineBuilder[Settings]:
    b = FluentCommandLineBuilder(Settings)
    b.setup_attribute("file", "f", "file").required()
    b.setup_attribute("retries", "r", "retries", int).with_default(3)
    b.setup_attribute("verbose", "v", "verbose", bool)
    return b


class TestBuilder:
    def test_object_is_created(self, builder):
        assert isinstance(builder.object, Settings)

    def test_parsed_values_are_assigned(self, builder):
        result = builder.parse(["-f", "in.csv", "--verbose", "-r", "5"])
        assert result.errors == []
        assert builder.object == Settings(file="in.csv", retries=5, verbose=True)

    def test_default_is_assigned(self, builder):
        builder.parse(["--file=in.csv"])
        assert builder.object.retries == 3
        assert builder.object.verbose is False

    def test_missing_required_leaves_attribute(self, builder):
        result = builder.parse([])
        assert result.has_errors
        assert builder.object.file == ""

    def test_explicit_setter(self):
        captured = {}
        builder = FluentCommandLineBuilder(dict)
        builder.setup(lambda v: captured.update(tags=v), "t", "tags", list[str])
        builder.parse(["-t", "a", "b"])
        assert captured == {"tags": ["a", "b"]}

    def test_unknown_attribute(self, builder):
        with pytest.raises(AttributeError):
            builder.setup_attribute("missing", "m")

    def test_setter_must_be_callable(self, builder):
        with pytest.raises(TypeError):
            builder.setup(None, "x")

    def test_case_sensitivity_passthrough(self):
        builder = FluentCommandLineBuilder(Settings, FluentCommandLineParser())
        builder.is_case_sensitive = True
        assert builder.parser.is_case_sensitive is True

    def test_help(self, builder):
        shown = []
        builder.setup_help("?").callback(shown.append)
        result = builder.parse(["-?"])
        assert result.help_called
        assert "--retries" in shown[0]

    def test_later_callback_runs_after_setter(self, builder):
        seen = []
        builder.setup_attribute("tags", "t", "tags", list[str]).callback(seen.append)
        builder.parse(["--file=in.csv", "-t", "a", "b"])
        assert builder.object.tags == ["a", "b"]
        assert seen == [["a", "b"]]
