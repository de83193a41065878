"""
Pytest configuration and fixtures.
"""

from pathlib import Path

import pytest


SAMPLE_CONFIG = (
    "# a comment\n"
    "\t # one more comment \t\n"
    "\n"
    "Host example.com ssh.example.com\n"
    "    Port 22\n"
    "    user=root\n"
    '    IdentityFile "~/.ssh/id key"\n'
    "    Host # kek\n"
)


@pytest.fixture
def sample_config() -> str:
    """ssh_config text with every kind of line."""
    return SAMPLE_CONFIG


@pytest.fixture
def config_file(tmp_path: Path, sample_config: str) -> Path:
    """Sample config written to a temporary file."""
    path = tmp_path / "config"
    path.write_bytes(sample_config.encode("utf-8"))
    return path
