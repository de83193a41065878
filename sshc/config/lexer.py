"""
Lexer (tokenizer) for the arguments part of ssh_config entries.

Supports:
- Pure (unquoted) values
- Quoted values (double quotes, escape sequences kept verbatim)
- Whitespace runs between values, kept for lossless output

An unquoted '#' is never accepted inside a value, because it cannot be told
apart from a trailing comment. Such arguments are rejected as a whole.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

from ..const import COMMENT_PREFIX, ESCAPE, QUOTE, WHITESPACE
from ..logging import get_logger


logger = get_logger("config.lexer")


class ArgumentTokenType(Enum):
    """Token types of an arguments expression."""

    PURE = auto()          # example.com
    QUOTED = auto()        # "some value"
    WHITESPACE = auto()    # run of spaces/tabs between values


@dataclass
class ArgumentToken:
    """A single token of an arguments expression."""

    type: ArgumentTokenType
    value: str

    @classmethod
    def pure(cls, value: str) -> "ArgumentToken":
        return cls(ArgumentTokenType.PURE, value)

    @classmethod
    def quoted(cls, value: str) -> "ArgumentToken":
        return cls(ArgumentTokenType.QUOTED, value)

    @classmethod
    def whitespace(cls, value: str) -> "ArgumentToken":
        return cls(ArgumentTokenType.WHITESPACE, value)

    @property
    def is_whitespace(self) -> bool:
        return self.type == ArgumentTokenType.WHITESPACE

    def __str__(self) -> str:
        if self.type == ArgumentTokenType.QUOTED:
            return f"{QUOTE}{self.value}{QUOTE}"
        return self.value

    def __repr__(self) -> str:
        return f"ArgumentToken({self.type.name}, {self.value!r})"


class LexerError(Exception):
    """Exception raised when an arguments expression cannot be tokenized."""

    def __init__(self, message: str, column: int):
        self.column = column
        super().__init__(f"Column {column}: {message}")


class ArgumentLexer:
    """
    Tokenizer for ssh_config arguments expressions.

    Example:
        lol!*.com "example.com"  !kek!

    yields PURE, WHITESPACE, QUOTED, WHITESPACE, PURE.
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0

    def _current(self) -> str:
        """Get current character or empty string if at end."""
        if self.pos >= len(self.source):
            return ""
        return self.source[self.pos]

    def _take_while(self, predicate) -> str:
        """Consume characters while predicate holds and return them."""
        start = self.pos
        while self.pos < len(self.source) and predicate(self.source[self.pos]):
            self.pos += 1
        return self.source[start:self.pos]

    def _read_whitespace(self) -> ArgumentToken:
        return ArgumentToken.whitespace(self._take_while(lambda c: c in WHITESPACE))

    def _read_quoted(self) -> ArgumentToken:
        """Read a quoted value, leaving escape sequences untouched."""
        start = self.pos
        self.pos += 1  # skip opening quote

        prev = ""
        while self.pos < len(self.source):
            char = self.source[self.pos]
            if char == QUOTE and prev != ESCAPE:
                value = self.source[start + 1:self.pos]
                self.pos += 1  # skip closing quote
                return ArgumentToken.quoted(value)
            prev = char
            self.pos += 1

        raise LexerError("Unterminated quoted argument", start + 1)

    def _read_pure(self) -> ArgumentToken:
        start = self.pos
        value = self._take_while(lambda c: c not in WHITESPACE)
        if COMMENT_PREFIX in value:
            raise LexerError(f"Unquoted {COMMENT_PREFIX!r} in argument {value!r}", start + 1)
        return ArgumentToken.pure(value)

    def next_token(self) -> ArgumentToken | None:
        """Get the next token, or None at end of input."""
        char = self._current()
        if not char:
            return None
        if char in WHITESPACE:
            return self._read_whitespace()
        if char == QUOTE:
            return self._read_quoted()
        return self._read_pure()

    def tokenize(self) -> Iterator[ArgumentToken]:
        """Generate all tokens from the source."""
        while (token := self.next_token()) is not None:
            yield token

    def __iter__(self) -> Iterator[ArgumentToken]:
        return self.tokenize()


def tokenize_arguments(source: str) -> list[ArgumentToken] | None:
    """
    Tokenize an arguments expression.

    Args:
        source: Arguments text with outer whitespace already removed

    Returns:
        List of tokens, or None if the text is not a valid arguments expression
        (unterminated quote, unquoted '#', or no tokens at all)
    """
    try:
        tokens = list(ArgumentLexer(source))
    except LexerError as e:
        logger.debug(f"Rejected arguments {source!r}: {e}")
        return None

    if not tokens:
        return None
    return tokens


def quote_argument(value: str) -> ArgumentToken:
    """
    Build a token that serializes to the given value.

    Values are taken in the raw form ConfigurationOptions.values returns.
    Values without whitespace or '#' that do not start with '"' stay pure;
    everything else is quoted, escaping only the double quotes that are not
    escaped already.

    Raises:
        ValueError: If the value contains a line break, or needs quoting but
            ends with a backslash, which would escape the closing quote
    """
    if "\n" in value or "\r" in value:
        raise ValueError(f"Argument can not span several lines: {value!r}")

    if (
        value
        and not value.startswith(QUOTE)
        and not any(c in value for c in WHITESPACE + COMMENT_PREFIX)
    ):
        return ArgumentToken.pure(value)

    if value.endswith(ESCAPE):
        raise ValueError(f"Cannot quote value ending with a backslash: {value!r}")

    escaped = []
    prev = ""
    for char in value:
        if char == QUOTE and prev != ESCAPE:
            escaped.append(ESCAPE)
        escaped.append(char)
        prev = char
    return ArgumentToken.quoted("".join(escaped))
