"""Parser package — tokenize argument vectors and match them to options.

``tokenize`` and ``match_options`` are the two steps
:meth:`FluentCommandLineParser.parse` runs, exposed for callers that
want a step on its own.  ``CommandLineTokenizer.is_key`` and
``accepts_name`` answer whether an argument or a declared name reads
as a key.
"""

from fluent_clp.parser.matcher import OptionMatcher, match_options, names_equal
from fluent_clp.parser.result import (
    ExpectedOptionNotFoundParseError,
    OptionSyntaxParseError,
    ParseError,
    ParseResult,
)
from fluent_clp.parser.tokenizer import (
    CommandLineTokenizer,
    SpecialCharacters,
    TokenPair,
    Tokenizer,
    tokenize,
)

__all__ = [
    "tokenize",
    "match_options",
    "names_equal",
    "CommandLineTokenizer",
    "ExpectedOptionNotFoundParseError",
    "OptionMatcher",
    "OptionSyntaxParseError",
    "ParseError",
    "ParseResult",
    "SpecialCharacters",
    "TokenPair",
    "Tokenizer",
]
