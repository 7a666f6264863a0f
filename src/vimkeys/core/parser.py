import logging
from pathlib import Path

from . import ir
from .lexer import tokenize
from .parser_impl import parse_tokens

logger = logging.getLogger(__name__)


def parse_config(text: str) -> ir.ParseOutcome:
    """
    Extract key mappings from vim configuration text.

    Never raises for malformed input: problems with individual statements
    are reported as diagnostics on the returned outcome.

    Args:
        text: Full init.vim-style source

    Returns:
        ParseOutcome with mappings, leader and diagnostics
    """
    return parse_tokens(tokenize(text))


def parse_config_file(path: Path) -> ir.ParseOutcome:
    """
    Read and parse a configuration file.

    Args:
        path: Path to an init.vim / .vimrc file (read as UTF-8)

    Returns:
        ParseOutcome for the file contents
    """
    text = path.read_text(encoding="utf-8")
    outcome = parse_config(text)
    for diagnostic in outcome.diagnostics:
        logger.info("%s:%s", path, diagnostic)
    return outcome
