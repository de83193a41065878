"""
Lossless ssh_config parsing and serialization.
"""

from .lexer import ArgumentToken, ArgumentTokenType, tokenize_arguments
from .loader import ConfigLoader, read_ssh_config, write_ssh_config
from .parser import (
    MultilineError,
    parse_expression,
    parse_line,
    parse_ssh_config,
    serialize_ssh_config,
)
from .schema import Comment, ConfigurationOptions, Empty, File, Line, Malformed

__all__ = [
    "ArgumentToken",
    "ArgumentTokenType",
    "tokenize_arguments",
    "ConfigLoader",
    "read_ssh_config",
    "write_ssh_config",
    "MultilineError",
    "parse_expression",
    "parse_line",
    "parse_ssh_config",
    "serialize_ssh_config",
    "Comment",
    "ConfigurationOptions",
    "Empty",
    "File",
    "Line",
    "Malformed",
]
