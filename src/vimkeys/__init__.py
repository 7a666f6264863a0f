"""
vimkeys - key mapping extraction for vim-style configuration files.

Reads an init.vim / .vimrc source and extracts its mapping commands into
structured, validated records ready for storage.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.converter import to_external
from .core.errors import ConfigError, ParseError, StoreError, VimkeysError
from .core.parser import parse_config

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "parse_config",
    "to_external",
    "VimkeysError",
    "ParseError",
    "ConfigError",
    "StoreError",
]
