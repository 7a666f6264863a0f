"""Shared pytest fixtures for vimkeys tests."""

from pathlib import Path

import pytest

SAMPLE_VIMRC = """\
" General settings
set number
set relativenumber

let mapleader = ","

" Navigation
nnoremap H ^
nnoremap L $
nmap <leader>w :w<CR>
nnoremap <silent> <leader>f :Find<CR>

inoremap jj <Esc>
vnoremap <C-C> "+y
"""


@pytest.fixture
def sample_vimrc() -> str:
    """Return a small init.vim with comments, settings and mappings."""
    return SAMPLE_VIMRC


@pytest.fixture
def sample_vimrc_file(tmp_path: Path, sample_vimrc: str) -> Path:
    """Write the sample init.vim to a temporary file."""
    path = tmp_path / "init.vim"
    path.write_text(sample_vimrc, encoding="utf-8")
    return path
