"""
Reading and writing ssh_config files.

Files are decoded as UTF-8 with newline translation disabled, so "\\r\\n"
endings reach the parser untouched. I/O errors (missing file, permissions,
full disk) are not wrapped: they reach the caller as the original OSError.
"""

from pathlib import Path

from ..const import DEFAULT_ENCODING
from ..logging import get_logger
from .parser import parse_ssh_config, serialize_ssh_config
from .schema import File


logger = get_logger("config.loader")


def read_text(path: str | Path) -> str:
    """Read a whole file without newline translation."""
    with open(path, "r", encoding=DEFAULT_ENCODING, newline="") as f:
        return f.read()


def write_text(path: str | Path, text: str) -> None:
    """Write a whole file without newline translation."""
    with open(path, "w", encoding=DEFAULT_ENCODING, newline="") as f:
        f.write(text)


def read_ssh_config(path: str | Path) -> File:
    """
    Read and parse an ssh_config file.

    Args:
        path: Path to the file

    Returns:
        Parsed File with path set

    Raises:
        OSError: If the file cannot be read
    """
    path = Path(path)
    logger.debug(f"Reading {path}")
    return parse_ssh_config(read_text(path), path)


def write_ssh_config(file: File, path: str | Path | None = None) -> None:
    """
    Serialize a File and write it out.

    Args:
        file: File to write
        path: Destination; defaults to the path the file was read from

    Raises:
        ValueError: If no destination is given and the file has no path
        OSError: If the file cannot be written
    """
    destination = path if path is not None else file.path
    if destination is None:
        raise ValueError("No path given and file has no source path")

    logger.debug(f"Writing {len(file)} lines to {destination}")
    write_text(destination, serialize_ssh_config(file))


class ConfigLoader:
    """
    Loads, checks and saves ssh_config files.

    Usage:
        loader = ConfigLoader()
        file = loader.load_file("~/.ssh/config")
        for warning in loader.validate(file):
            print(warning)
        loader.save_file(file)
    """

    def __init__(self):
        self.last_file: File | None = None

    def load_file(self, path: str | Path) -> File:
        """
        Load an ssh_config file; "~" in the path is expanded.

        Raises:
            OSError: If the file cannot be read
        """
        file = read_ssh_config(Path(path).expanduser())
        self.last_file = file
        return file

    def load_string(self, source: str, path: str | Path | None = None) -> File:
        """Parse ssh_config text; path is only recorded, not read."""
        file = parse_ssh_config(source, path)
        self.last_file = file
        return file

    def save_file(self, file: File, path: str | Path | None = None) -> None:
        """Write a file back, to its own path unless another is given."""
        if path is not None:
            path = Path(path).expanduser()
        write_ssh_config(file, path)

    def validate(self, file: File | None = None) -> list[str]:
        """
        Check a file for lines that did not parse as entries.

        Keywords and values are not checked, only structure.

        Args:
            file: File to check (defaults to the last loaded one)

        Returns:
            List of warning messages (empty if no issues)
        """
        if file is None:
            file = self.last_file
        if file is None:
            return []

        warnings = [
            f"Malformed entry on line {number}: {str(line.expression)!r}"
            for number, line in file.malformed()
        ]

        source = file.path or "<string>"
        if warnings:
            logger.warning(f"{source}: {len(warnings)} malformed line(s)")
        else:
            logger.info(f"{source}: no malformed lines")

        return warnings


def load_config(path: str | Path) -> File:
    """
    Convenience function to load an ssh_config file.

    Args:
        path: Path to the file

    Returns:
        Parsed File
    """
    loader = ConfigLoader()
    return loader.load_file(path)
