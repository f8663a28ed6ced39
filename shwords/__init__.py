"""Split a line into shell words, honoring quotes and backslash escapes."""

from .shlex_parser import (
    InputTooLong,
    ParseError,
    QuoteKind,
    ShwordsException,
    TrailingEscape,
    UnterminatedQuote,
    iter_split,
    split,
)

__version__ = "0.1.0"

__all__ = [
    "InputTooLong",
    "ParseError",
    "QuoteKind",
    "ShwordsException",
    "TrailingEscape",
    "UnterminatedQuote",
    "iter_split",
    "split",
]
