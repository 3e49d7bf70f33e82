"""fluent-clp — declarative command line option parsing."""

from fluent_clp.builder import FluentCommandLineBuilder
from fluent_clp.errors import (
    FclpError,
    InvalidOptionNameError,
    OptionAlreadyExistsError,
    OptionSetupError,
    UnsupportedValueTypeError,
)
from fluent_clp.fluent import FluentCommandLineParser
from fluent_clp.formatter import CommandLineOptionFormatter, ErrorFormatter
from fluent_clp.lib.culture import Culture
from fluent_clp.lib.parser_registry import ValueParserRegistry
from fluent_clp.model.option import CommandLineOption, HelpOption
from fluent_clp.parser import (
    CommandLineTokenizer,
    ExpectedOptionNotFoundParseError,
    OptionSyntaxParseError,
    ParseError,
    ParseResult,
    TokenPair,
)

__all__ = [
    "CommandLineOption",
    "CommandLineOptionFormatter",
    "CommandLineTokenizer",
    "Culture",
    "ErrorFormatter",
    "ExpectedOptionNotFoundParseError",
    "FclpError",
    "FluentCommandLineBuilder",
    "FluentCommandLineParser",
    "HelpOption",
    "InvalidOptionNameError",
    "OptionAlreadyExistsError",
    "OptionSetupError",
    "OptionSyntaxParseError",
    "ParseError",
    "ParseResult",
    "TokenPair",
    "UnsupportedValueTypeError",
    "ValueParserRegistry",
]
