"""
Tests for constants.
"""

from sshc import __version__
from sshc.const import APP_NAME, APP_VERSION, DEFAULT_CONFIG_PATH, WHITESPACE


def test_constants():
    """Test that constants are defined."""
    assert APP_NAME == "sshc"
    assert APP_VERSION == __version__
    assert DEFAULT_CONFIG_PATH == "~/.ssh/config"


def test_whitespace_is_space_and_tab_only():
    assert set(WHITESPACE) == {" ", "\t"}


def test_constant_names():
    from sshc import const

    names = {name for name in dir(const) if name.isupper()}

    assert names == {
        "APP_NAME",
        "APP_VERSION",
        "DEFAULT_CONFIG_PATH",
        "DEFAULT_ENCODING",
        "WHITESPACE",
        "COMMENT_PREFIX",
        "QUOTE",
        "ESCAPE",
        "EQUALS",
    }
