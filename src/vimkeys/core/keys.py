"""
Special key notation handling.

Rewrites <...> key notations into one canonical spelling and substitutes
the <leader> placeholder. Both operate on arbitrary text, so notations
embedded inside a larger word (``:w<cr>``) are rewritten as well.
"""

import re

# Applied in order; later rules see the output of earlier ones.
KEY_REWRITES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"<CR>", re.IGNORECASE), "<CR>"),
    (re.compile(r"<Enter>", re.IGNORECASE), "<CR>"),
    (re.compile(r"<Return>", re.IGNORECASE), "<CR>"),
    (re.compile(r"<Esc>", re.IGNORECASE), "<Esc>"),
    (re.compile(r"<Escape>", re.IGNORECASE), "<Esc>"),
    (re.compile(r"<BS>", re.IGNORECASE), "<BS>"),
    (re.compile(r"<Backspace>", re.IGNORECASE), "<BS>"),
    (re.compile(r"<Tab>", re.IGNORECASE), "<Tab>"),
    (re.compile(r"<Space>", re.IGNORECASE), " "),
    (re.compile(r"<Bar>", re.IGNORECASE), "|"),
    (re.compile(r"<Bslash>", re.IGNORECASE), "\\\\"),
    (re.compile(r"<lt>", re.IGNORECASE), "<"),
]

CTRL_CHORD_RE = re.compile(r"<C-([A-Za-z0-9_])>", re.IGNORECASE)

LEADER_RE = re.compile(r"<leader>", re.IGNORECASE)

SILENT_MARKER = "<silent>"


def normalize_key(text: str) -> str:
    """
    Rewrite special key notations in text to their canonical form.

    ``<Enter>`` becomes ``<CR>``, ``<Space>`` a literal space, ``<C-A>``
    becomes ``<C-a>`` and so on. Unknown notations pass through unchanged.

    Args:
        text: Token text, typically a SPECIAL_KEY such as ``<esc>``

    Returns:
        Normalized text
    """
    for pattern, replacement in KEY_REWRITES:
        text = pattern.sub(replacement, text)
    return CTRL_CHORD_RE.sub(lambda m: f"<C-{m.group(1).lower()}>", text)


def is_silent_marker(text: str) -> bool:
    """Check whether a special key is the <silent> map argument."""
    return normalize_key(text).lower() == SILENT_MARKER


def substitute_leader(text: str, leader: str) -> str:
    """Replace every <leader> placeholder (any case) with the leader string."""
    return LEADER_RE.sub(lambda _: leader, text)
