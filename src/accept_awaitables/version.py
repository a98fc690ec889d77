"""Report which release of accept-awaitables is running.

An installed wheel answers from its distribution metadata. A source
checkout that was never installed falls back to the ``pyproject.toml``
sitting two directories above this module.
"""

from __future__ import annotations

from importlib import metadata
from pathlib import Path

import tomllib

_DISTRIBUTION = "accept-awaitables"
_PYPROJECT_PATH = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version_from_metadata(distribution: str = _DISTRIBUTION) -> str:
    """Look ``distribution`` up among the installed packages."""

    return metadata.version(distribution)


def get_version_from_pyproject(path: Path = _PYPROJECT_PATH) -> str:
    """Read ``[project] version`` out of the checkout's build file."""

    project = tomllib.loads(path.read_text("utf-8"))["project"]
    return str(project["version"])


def get_version(path: Path = _PYPROJECT_PATH) -> str:
    """Installed metadata first, the checkout second, ``"unknown"`` last."""

    try:
        return get_version_from_metadata()
    except metadata.PackageNotFoundError:
        pass
    try:
        return get_version_from_pyproject(path)
    except (FileNotFoundError, KeyError):
        return "unknown"


__version__ = get_version()
