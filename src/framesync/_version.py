"""Package version lookup."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    """
    Return the framesync version.

    A source checkout reads ``[project] version`` from its pyproject.toml so
    the value tracks edits without reinstalling; an installed package falls
    back to its distribution metadata.
    """
    if _PYPROJECT.is_file():
        with _PYPROJECT.open("rb") as f:
            project = tomllib.load(f).get("project", {})
        if "version" in project:
            return str(project["version"])
    try:
        return _metadata_version("framesync")
    except PackageNotFoundError:
        return "0.0.0"
