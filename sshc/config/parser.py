"""
Line-oriented parser for ssh_config(5) files.

Each physical line is split into indentation and an expression, and the
expression is classified as an entry, a comment, an empty line, or malformed
text. Parsing never fails on bad input: whatever does not fit the grammar is
kept verbatim as Malformed, so str(parse_ssh_config(text)) == text.

Grammar (per physical line):
    line        := indent expr indent
    indent      := (SP | TAB)*
    expr        := "" | comment | entry | malformed
    comment     := "#" any*
    entry       := keyword separator arguments
    keyword     := ALPHA+
    separator   := (SP|TAB)+ | (SP|TAB)* "=" (SP|TAB)*
    arguments   := token (ws token)*
"""

import string
from pathlib import Path
from typing import Iterator

from ..const import COMMENT_PREFIX, EQUALS, WHITESPACE
from ..logging import get_logger
from .lexer import tokenize_arguments
from .schema import (
    Comment,
    ConfigurationOptions,
    Empty,
    Expression,
    File,
    Line,
    Malformed,
)


logger = get_logger("config.parser")


class MultilineError(ValueError):
    """Raised when text holding several physical lines is parsed as one line."""

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"Multiline string can not be parsed as a single line: {line!r}")


def _take_while(text: str, chars: str) -> str:
    """Longest prefix of text made of the given characters."""
    end = 0
    while end < len(text) and text[end] in chars:
        end += 1
    return text[:end]


def _split_newline(line: str) -> tuple[str, str]:
    """Split a physical line into its content and its terminator."""
    if line.endswith("\r\n"):
        return line[:-2], "\r\n"
    if line.endswith("\n"):
        return line[:-1], "\n"
    return line, ""


def _is_valid_separator(separator: str) -> bool:
    """Separator must be whitespace, optionally with a single '=' inside."""
    if not separator:
        return False
    residual = "".join(c for c in separator if c not in WHITESPACE)
    return residual in ("", EQUALS)


def parse_expression(content: str) -> Expression:
    """
    Classify the content of a line with indentation already removed.

    Args:
        content: Line content without leading/trailing whitespace

    Returns:
        Exactly one of ConfigurationOptions, Comment, Empty or Malformed
    """
    if not content:
        return Empty()

    if content.startswith(COMMENT_PREFIX):
        return Comment(content)

    keyword = _take_while(content, string.ascii_letters)
    if not keyword:
        return Malformed(content)

    separator = _take_while(content[len(keyword):], WHITESPACE + EQUALS)
    if not _is_valid_separator(separator):
        return Malformed(content)

    remainder = content[len(keyword) + len(separator):].strip(WHITESPACE)
    arguments = tokenize_arguments(remainder)
    if arguments is None:
        return Malformed(content)

    return ConfigurationOptions(keyword=keyword, separator=separator, arguments=arguments)


def parse_line(line: str) -> Line:
    """
    Parse a single physical line.

    Args:
        line: Line text, optionally terminated by "\\n" or "\\r\\n"

    Returns:
        Parsed Line remembering indentation and terminator

    Raises:
        MultilineError: If the text holds more than one physical line
    """
    text, newline = _split_newline(line)
    if "\n" in text:
        raise MultilineError(line)

    indent_prefix = _take_while(text, WHITESPACE)
    rest = text[len(indent_prefix):]
    content = rest.rstrip(WHITESPACE)
    indent_suffix = rest[len(content):]

    return Line(
        indent_prefix=indent_prefix,
        expression=parse_expression(content),
        indent_suffix=indent_suffix,
        newline=newline,
    )


def iter_physical_lines(content: str) -> Iterator[str]:
    """Split text on "\\n", keeping terminators; no empty tail after a final newline."""
    start = 0
    while start < len(content):
        end = content.find("\n", start)
        if end == -1:
            yield content[start:]
            return
        yield content[start:end + 1]
        start = end + 1


def parse_ssh_config(content: str, path: str | Path | None = None) -> File:
    """
    Parse ssh_config text.

    Args:
        content: Decoded file content
        path: Where the content came from, if anywhere

    Returns:
        Parsed File; never fails on malformed content
    """
    lines = [parse_line(line) for line in iter_physical_lines(content)]
    file = File(lines=lines, path=Path(path) if path is not None else None)

    logger.debug(f"Parsed {len(lines)} lines from {path or '<string>'}")
    return file


def serialize_ssh_config(file: File) -> str:
    """
    Convert a parsed file back to text.

    Unedited lines come out exactly as they were read.
    """
    return str(file)
