"""
Tests for logging setup.
"""

import logging
from pathlib import Path

from sshc.logging import (
    COMPONENT_COLORS,
    Colors,
    ColoredFormatter,
    LogConfig,
    PlainFormatter,
    get_log_level,
    get_logger,
    setup_logging,
)


def test_get_logger_prefixes_component() -> None:
    assert get_logger("config.parser").name == "sshc.config.parser"
    assert get_logger("sshc.main").name == "sshc.main"


def test_get_log_level() -> None:
    assert get_log_level("debug") == logging.DEBUG
    assert get_log_level("WARN") == logging.WARNING
    assert get_log_level("bogus") == logging.INFO


def test_file_logging(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "sshc.log"
    setup_logging(LogConfig(file_enabled=True, file_path=str(log_path), console_colors=False))

    get_logger("loader").debug("reading something")
    for handler in logging.getLogger("sshc").handlers:
        handler.flush()

    assert "reading something" in log_path.read_text()

    setup_logging(LogConfig())


def test_module_levels() -> None:
    setup_logging(LogConfig(module_levels={"config.lexer": "error"}))

    assert get_logger("config.lexer").level == logging.ERROR

    get_logger("config.lexer").setLevel(logging.NOTSET)
    setup_logging(LogConfig())


def _record(name: str = "sshc.config.loader") -> logging.LogRecord:
    return logging.LogRecord(name, logging.WARNING, __file__, 1, "careful", None, None)


def test_plain_formatter_restores_levelname() -> None:
    record = _record()

    text = PlainFormatter(fmt="[%(levelname)s] %(message)s").format(record)

    assert text == "[WARNING ] careful"
    assert record.levelname == "WARNING"


def test_colored_formatter_uses_component_color() -> None:
    record = _record()

    text = ColoredFormatter(fmt="%(name)s", use_colors=True).format(record)

    assert text == f"{COMPONENT_COLORS['sshc.config.loader']}sshc.config.loader{Colors.RESET}"
    assert record.name == "sshc.config.loader"


def test_component_colors_match_project_loggers() -> None:
    for name in ("config.lexer", "config.parser", "config.loader", "main"):
        assert get_logger(name).name in COMPONENT_COLORS
