"""
Application constants and metadata.
"""

# Application info
APP_NAME = "sshc"
APP_VERSION = "0.1.0"

# Default values
DEFAULT_CONFIG_PATH = "~/.ssh/config"
DEFAULT_ENCODING = "utf-8"

# ssh_config(5) lexical elements
WHITESPACE = " \t"
COMMENT_PREFIX = "#"
QUOTE = '"'
ESCAPE = "\\"
EQUALS = "="
