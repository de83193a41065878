"""
Tests for the command line interface.
"""

from pathlib import Path

import pytest

from sshc.__main__ import main


def test_validate_prints_summary(config_file: Path, capsys) -> None:
    assert main([str(config_file), "--no-color"]) == 0

    out = capsys.readouterr().out
    assert "Malformed entry on line 8" in out
    assert "Entries: 4" in out
    assert "Malformed lines: 1" in out


def test_strict_validate_fails_on_malformed(config_file: Path) -> None:
    assert main([str(config_file), "--validate", "--strict"]) == 1


def test_strict_validate_passes_clean_file(tmp_path: Path) -> None:
    path = tmp_path / "config"
    path.write_text("Host a\n  Port 22\n")

    assert main([str(path), "--strict"]) == 0


def test_check_round_trip(tmp_path: Path, capsys) -> None:
    path = tmp_path / "config"
    path.write_bytes(b"Host a\r\n  Port 22\r\nbroken line")

    assert main([str(path), "--check"]) == 0
    assert "Round trip OK" in capsys.readouterr().out


def test_print_reproduces_file(config_file: Path, sample_config: str, capsys) -> None:
    assert main([str(config_file), "--print"]) == 0
    assert capsys.readouterr().out == sample_config


def test_dump_lists_every_line(config_file: Path, capsys) -> None:
    assert main([str(config_file), "--dump"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 8
    assert "malformed" in lines[-1]
    assert "Port" in lines[4]


def test_missing_config(tmp_path: Path, capsys) -> None:
    assert main([str(tmp_path / "missing")]) == 1
    assert "not found" in capsys.readouterr().err


def test_modes_are_exclusive(config_file: Path) -> None:
    with pytest.raises(SystemExit):
        main([str(config_file), "--check", "--dump"])


def test_version(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])

    assert exc_info.value.code == 0
    assert "sshc" in capsys.readouterr().out
