"""
Document model for ssh_config files.

Every node keeps the exact text it was parsed from, and str(node) gives that
text back. Nodes are plain dataclasses: assign to their fields to edit a file,
and only the edited nodes will print differently.

Example:
    # [% sshc 0.1.0 %]

    Include dir/folder/file

    # a simple entry
    Host example.com ssh.example.com
        Port 22
        User root
        Ciphers aes256-cbc,arcfour
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Union

from .lexer import ArgumentToken, quote_argument


# String made of spaces and tabs only
WhitespaceString = str


@dataclass
class ConfigurationOptions:
    """
    A keyword-arguments entry.

    Examples:
        Port 22                  -> keyword="Port", separator=" ", values=["22"]
        Host = "my host" *.net   -> keyword="Host", separator=" = ",
                                    values=["my host", "*.net"]
    """
    keyword: str
    separator: str
    arguments: list[ArgumentToken] = field(default_factory=list)

    def __str__(self) -> str:
        return self.keyword + self.separator + "".join(str(t) for t in self.arguments)

    @property
    def values(self) -> list[str]:
        """Argument values without whitespace tokens; quoted values are unquoted but not unescaped."""
        return [t.value for t in self.arguments if not t.is_whitespace]

    @property
    def value(self) -> str | None:
        """Get single value (first) or None."""
        values = self.values
        return values[0] if values else None

    def set_values(self, values: list[str]) -> None:
        """
        Replace the arguments with the given values separated by single spaces.

        Values are raw, as returned by values. Setting the current values
        again leaves the entry untouched.
        """
        if not values:
            raise ValueError(f"Entry '{self.keyword}' needs at least one argument")
        if list(values) == self.values:
            return

        arguments: list[ArgumentToken] = []
        for value in values:
            if arguments:
                arguments.append(ArgumentToken.whitespace(" "))
            arguments.append(quote_argument(value))
        self.arguments = arguments

    def matches(self, keyword: str) -> bool:
        """Keywords are case-insensitive."""
        return self.keyword.lower() == keyword.lower()


@dataclass
class Comment:
    """A comment, stored with its leading '#'."""
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass
class Empty:
    """Nothing but (optional) whitespace on the line."""

    def __str__(self) -> str:
        return ""


@dataclass
class Malformed:
    """Anything that is not a valid entry, comment or empty line, kept verbatim."""
    text: str

    def __str__(self) -> str:
        return self.text


Expression = Union[ConfigurationOptions, Comment, Empty, Malformed]


@dataclass
class Line:
    """
    One physical line of an ssh_config file.

    indent_prefix is the longest leading run of whitespace, indent_suffix the
    longest trailing run not overlapping it. newline is the terminator the line
    was read with: "\\n", "\\r\\n", or "" for a last line without one.
    """
    indent_prefix: WhitespaceString = ""
    expression: Expression = field(default_factory=Empty)
    indent_suffix: WhitespaceString = ""
    newline: str = "\n"

    def __str__(self) -> str:
        return f"{self.indent_prefix}{self.expression}{self.indent_suffix}{self.newline}"

    @property
    def kind(self) -> str:
        """Expression kind name, e.g. 'comment'."""
        return _KIND_NAMES[type(self.expression)]


_KIND_NAMES = {
    ConfigurationOptions: "entry",
    Comment: "comment",
    Empty: "empty",
    Malformed: "malformed",
}


@dataclass
class File:
    """
    Root document: the lines of an ssh_config file and where it came from.
    """
    lines: list[Line] = field(default_factory=list)
    path: Path | None = None

    def __str__(self) -> str:
        parts = []
        last = len(self.lines) - 1
        for i, line in enumerate(self.lines):
            text = str(line)
            # An unterminated line can only stay that way at the end of the file
            if i != last and not line.newline:
                text += "\n"
            parts.append(text)
        return "".join(parts)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def append(self, line: Line) -> None:
        """Append a line, terminating the current last line if needed."""
        if self.lines and not self.lines[-1].newline:
            self.lines[-1].newline = "\n"
        self.lines.append(line)

    def entries(self) -> list[ConfigurationOptions]:
        """Get all keyword-arguments entries in document order."""
        return [
            line.expression
            for line in self.lines
            if isinstance(line.expression, ConfigurationOptions)
        ]

    def get_entries(self, keyword: str) -> list[ConfigurationOptions]:
        """Get all entries with given keyword (case-insensitive)."""
        return [e for e in self.entries() if e.matches(keyword)]

    def get_entry(self, keyword: str) -> ConfigurationOptions | None:
        """Get first entry with given keyword (case-insensitive)."""
        for entry in self.entries():
            if entry.matches(keyword):
                return entry
        return None

    def malformed(self) -> list[tuple[int, Line]]:
        """Get (1-based line number, line) pairs of all malformed lines."""
        return [
            (number, line)
            for number, line in enumerate(self.lines, start=1)
            if isinstance(line.expression, Malformed)
        ]

    def count_kinds(self) -> dict[str, int]:
        """Count lines per expression kind."""
        counts = {name: 0 for name in _KIND_NAMES.values()}
        for line in self.lines:
            counts[line.kind] += 1
        return counts
