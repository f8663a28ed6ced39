"""Shell-like lexer for splitting a line into words."""

import enum
from typing import Iterator


# Custom exceptions
class ShwordsException(Exception):
    """Base exception for shwords errors."""

    pass


class ParseError(ShwordsException, ValueError):
    """Raised when a line cannot be split into words."""

    def __init__(self, message: str, position: int):
        self.position = position
        super().__init__(message)

    @property
    def column(self) -> int:
        """One-based column of the offending character."""
        return self.position + 1

    def _key(self) -> tuple:
        return (self.position,)

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self), self._key()))


class QuoteKind(enum.Enum):
    """Which quote character opened a span."""

    SINGLE = "'"
    DOUBLE = '"'


class UnterminatedQuote(ParseError):
    """Raised when a quote is not terminated."""

    def __init__(self, kind: QuoteKind, opened_at: int):
        self.kind = kind
        self.opened_at = opened_at
        super().__init__(
            f"unterminated {kind.name.lower()} quote "
            f"opened at column {opened_at + 1}",
            opened_at,
        )

    def _key(self) -> tuple:
        return (self.kind, self.opened_at)


class TrailingEscape(ParseError):
    """Raised when the escape character is the last character of the line."""

    def __init__(self, at: int):
        self.at = at
        super().__init__(f"trailing escape character at column {at + 1}", at)


class InputTooLong(ShwordsException):
    """Raised when a line exceeds the caller's length limit."""

    def __init__(self, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__(f"input is {length} characters long, limit is {limit}")


ESCAPE = "\\"


class Mode(enum.Enum):
    """Scanner state while walking a line."""

    UNQUOTED = enum.auto()
    SINGLE_QUOTE = enum.auto()
    DOUBLE_QUOTE = enum.auto()
    ESCAPED = enum.auto()


def iter_split(line: str) -> Iterator[str]:
    """
    Yield the words of a line one at a time.

    Each word is produced as soon as the whitespace ending it is seen, so
    words before a defect are still delivered. The parse error, if any, is
    raised once the end of the line is reached.

    Rules:
    - Whitespace separates words; runs of whitespace collapse
    - Single quotes (') make everything up to the closing quote literal
    - Double quotes (") do the same, but honor the escape character
    - Backslash (\\) outside single quotes takes the next character
      literally; the backslash stays in the word
    - Quotes are removed from words; adjacent segments concatenate

    Args:
        line: The line to split

    Yields:
        Parsed words, left to right

    Raises:
        UnterminatedQuote: If a quote is opened and never closed
        TrailingEscape: If the line ends right after a backslash
    """
    mode = Mode.UNQUOTED
    resume = Mode.UNQUOTED
    token_chars = []
    token_open = False
    quote_at = 0
    escape_at = 0

    for i, c in enumerate(line):
        if mode is Mode.ESCAPED:
            token_chars.append(c)
            mode = resume
        elif mode is Mode.UNQUOTED:
            if c.isspace():
                if token_open:
                    yield "".join(token_chars)
                    token_chars = []
                    token_open = False
                continue

            token_open = True
            if c == ESCAPE:
                mode, resume, escape_at = Mode.ESCAPED, Mode.UNQUOTED, i
                token_chars.append(c)
            elif c == "'":
                mode, quote_at = Mode.SINGLE_QUOTE, i
            elif c == '"':
                mode, quote_at = Mode.DOUBLE_QUOTE, i
            else:
                token_chars.append(c)
        elif mode is Mode.SINGLE_QUOTE:
            if c == "'":
                mode = Mode.UNQUOTED
            else:
                token_chars.append(c)
        else:
            if c == '"':
                mode = Mode.UNQUOTED
            elif c == ESCAPE:
                mode, resume, escape_at = Mode.ESCAPED, Mode.DOUBLE_QUOTE, i
                token_chars.append(c)
            else:
                token_chars.append(c)

    if mode is Mode.ESCAPED:
        raise TrailingEscape(escape_at)
    if mode is Mode.SINGLE_QUOTE:
        raise UnterminatedQuote(QuoteKind.SINGLE, quote_at)
    if mode is Mode.DOUBLE_QUOTE:
        raise UnterminatedQuote(QuoteKind.DOUBLE, quote_at)

    if token_open:
        yield "".join(token_chars)


def split(line: str) -> list[str]:
    """
    Split a line into words, handling quotes and escapes.

    See iter_split for the rules. Nothing is returned for a line that fails
    to parse.

    Args:
        line: The line to split

    Returns:
        List of parsed words

    Raises:
        ParseError: If a quote is unterminated or the line ends in an escape
    """
    return list(iter_split(line))
