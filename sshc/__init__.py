"""
sshc - lossless reader and writer for ssh_config(5) files.
"""

from .const import APP_VERSION

__version__ = APP_VERSION
