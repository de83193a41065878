"""
Tests for reading, writing and checking ssh_config files.
"""

from pathlib import Path

import pytest

from sshc.config.loader import (
    ConfigLoader,
    load_config,
    read_ssh_config,
    write_ssh_config,
)
from sshc.config.schema import Comment


def test_read_matches_parse(config_file: Path) -> None:
    loader = ConfigLoader()

    from_file = read_ssh_config(config_file)
    from_string = loader.load_string(config_file.read_text(), config_file)

    assert from_file == from_string
    assert from_file.path == config_file


def test_crlf_file_is_written_back_unchanged(tmp_path: Path) -> None:
    source = tmp_path / "config"
    target = tmp_path / "copy"
    data = b"Host a\r\n\tPort = 22 \r\n# end"
    source.write_bytes(data)

    write_ssh_config(read_ssh_config(source), target)

    assert target.read_bytes() == data


def test_write_defaults_to_source_path(config_file: Path, sample_config: str) -> None:
    file = read_ssh_config(config_file)
    file.lines[0].expression = Comment("# edited")

    write_ssh_config(file)

    assert config_file.read_text() == sample_config.replace("# a comment", "# edited", 1)


def test_write_without_any_path(sample_config: str) -> None:
    file = ConfigLoader().load_string(sample_config)

    with pytest.raises(ValueError):
        write_ssh_config(file)


def test_missing_file_error_is_not_wrapped(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing")


def test_save_file(tmp_path: Path, sample_config: str) -> None:
    loader = ConfigLoader()
    file = loader.load_string(sample_config)

    loader.save_file(file, tmp_path / "out")

    assert (tmp_path / "out").read_text() == sample_config


def test_validate_reports_malformed_lines(config_file: Path) -> None:
    loader = ConfigLoader()
    loader.load_file(config_file)

    warnings = loader.validate()

    assert warnings == ["Malformed entry on line 8: 'Host # kek'"]


def test_validate_clean_file() -> None:
    loader = ConfigLoader()
    file = loader.load_string("Host a\n  Port 22\n")

    assert loader.validate(file) == []


def test_validate_without_file() -> None:
    assert ConfigLoader().validate() == []
