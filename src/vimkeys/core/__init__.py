"""Core vimkeys functionality: lexer, statement parser, IR, conversion, storage, configuration."""

from . import ir
from .converter import to_external, to_storage_records
from .errors import (
    ConfigError,
    ErrorContext,
    ParseError,
    StoreError,
    VimkeysError,
)
from .importer import ImportReport, import_config
from .lexer import Token, TokenType, tokenize
from .manifest import VimkeysManifest, load_manifest, load_manifest_or_default
from .parser import parse_config, parse_config_file
from .parser_impl import KeymapParser, parse_tokens
from .store import KeymapStore

__all__ = [
    "ir",
    # Lexing and parsing
    "Token",
    "TokenType",
    "tokenize",
    "KeymapParser",
    "parse_tokens",
    "parse_config",
    "parse_config_file",
    # Conversion and storage
    "to_external",
    "to_storage_records",
    "KeymapStore",
    "ImportReport",
    "import_config",
    # Configuration
    "VimkeysManifest",
    "load_manifest",
    "load_manifest_or_default",
    # Errors
    "VimkeysError",
    "ParseError",
    "ConfigError",
    "StoreError",
    "ErrorContext",
]
