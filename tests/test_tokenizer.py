"""Tests for fluent_clp.parser.tokenizer."""

from __future__ import annotations

import pytest

from fluent_clp.parser.tokenizer import (
    CommandLineTokenizer,
    SpecialCharacters,
    TokenPair,
    tokenize,
)


class TestTokenize:
    def test_empty_list(self):
        assert tokenize([]) == []

    def test_none(self):
        assert tokenize(None) == []

    def test_mixed_conventions(self):
        assert tokenize(["-n", "value", "--long=value2"]) == [
            TokenPair("n", "value"),
            TokenPair("long", "value2"),
        ]

    def test_colon_assignment(self):
        assert tokenize(["-k:v"]) == [TokenPair("k", "v")]

    def test_slash_prefix(self):
        assert tokenize(["/out:report.txt"]) == [TokenPair("out", "report.txt")]

    def test_flag_has_no_value(self):
        assert tokenize(["-v"]) == [TokenPair("v", None)]

    def test_consecutive_keys(self):
        assert tokenize(["-a", "-b", "--c"]) == [
            TokenPair("a", None),
            TokenPair("b", None),
            TokenPair("c", None),
        ]

    def test_empty_inline_value(self):
        assert tokenize(["--name="]) == [TokenPair("name", "")]

    def test_values_join_until_next_key(self):
        assert tokenize(["-f", "a", "b", "c", "-g"]) == [
            TokenPair("f", "a b c"),
            TokenPair("g", None),
        ]

    def test_splits_on_first_assignment_only(self):
        assert tokenize(["--url=http://example.com"]) == [
            TokenPair("url", "http://example.com")
        ]

    def test_colon_before_equals(self):
        assert tokenize(["-d:a=b"]) == [TokenPair("d", "a=b")]

    def test_duplicates_are_kept_in_order(self):
        assert tokenize(["-a", "1", "-a", "2"]) == [
            TokenPair("a", "1"),
            TokenPair("a", "2"),
        ]

    def test_unknown_keys_are_tolerated(self):
        assert tokenize(["--anything-goes", "x"]) == [TokenPair("anything-goes", "x")]


class TestValueDetection:
    def test_negative_integer_is_value(self):
        assert tokenize(["-n", "-5"]) == [TokenPair("n", "-5")]

    def test_negative_float_is_value(self):
        assert tokenize(["--offset", "-2.5"]) == [TokenPair("offset", "-2.5")]

    def test_unix_path_is_value(self):
        assert tokenize(["-o", "/tmp/out.txt"]) == [TokenPair("o", "/tmp/out.txt")]

    def test_bare_dashes_are_values(self):
        assert tokenize(["-x", "-", "--"]) == [TokenPair("x", "- --")]

    def test_leading_values_are_dropped(self):
        assert tokenize(["stray", "-a", "1"]) == [TokenPair("a", "1")]

    def test_value_after_inline_value_is_dropped(self):
        assert tokenize(["--a=1", "stray"]) == [TokenPair("a", "1")]

    def test_is_key(self):
        tokenizer = CommandLineTokenizer()
        assert tokenizer.is_key("--file") is True
        assert tokenizer.is_key("-f") is True
        assert tokenizer.is_key("file") is False
        assert tokenizer.is_key("-5") is False

    @pytest.mark.parametrize("name", ["f", "file", "?", "dry-run", "x2"])
    def test_accepts_name(self, name):
        assert CommandLineTokenizer().accepts_name(name) is True

    @pytest.mark.parametrize("name", ["1", "2.5", "a/b", "a\\b", "-x", "/x"])
    def test_rejects_names_read_as_values(self, name):
        assert CommandLineTokenizer().accepts_name(name) is False



class TestCustomConventions:
    def test_plus_prefix(self):
        tokenizer = CommandLineTokenizer(prefixes=["+"], assignments=["="])
        assert tokenizer.tokenize(["+x=1", "-y"]) == [TokenPair("x", "1")]

    def test_default_constants(self):
        assert SpecialCharacters.KEY_PREFIXES == ("--", "-", "/")
        assert SpecialCharacters.VALUE_ASSIGNMENTS == ("=", ":")

    def test_reserved_characters(self):
        assert SpecialCharacters.is_reserved("=")
        assert SpecialCharacters.is_reserved(":")
        assert SpecialCharacters.is_reserved(" ")
        assert SpecialCharacters.is_reserved("\t")
        assert not SpecialCharacters.is_reserved("a")
