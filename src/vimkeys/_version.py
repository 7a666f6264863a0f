"""Version lookup for vimkeys."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    """
    Return the vimkeys version.

    A source checkout reads ``[project] version`` from pyproject.toml so an
    editable install never reports a stale number; otherwise the installed
    distribution metadata is used.
    """
    if _PYPROJECT.is_file():
        with _PYPROJECT.open("rb") as f:
            project = tomllib.load(f).get("project", {})
        if project.get("name") == "vimkeys" and "version" in project:
            return str(project["version"])
    try:
        return _metadata_version("vimkeys")
    except PackageNotFoundError:
        return "0.0.0"
