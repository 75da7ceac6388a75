"""Expose the installed project version."""

from __future__ import annotations

import re
from functools import lru_cache
from importlib import metadata
from pathlib import Path
from typing import Final

DISTRIBUTION_NAME: Final = "universal-translator"

PYPROJECT_PATH = Path(__file__).resolve().parents[3] / "pyproject.toml"
_VERSION_LINE = re.compile(r'^version\s*=\s*"([^"]+)"')


@lru_cache(maxsize=1)
def get_project_version() -> str:
    """Return the distribution version, or the checkout's when not installed."""

    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return _read_version_from_pyproject(PYPROJECT_PATH)


def _read_version_from_pyproject(path: Path) -> str:
    """Return ``[project].version`` from ``path``."""

    if not path.exists():  # pragma: no cover - repository invariant
        raise RuntimeError(f"Unable to locate project metadata at {path}")

    in_project = False
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if line.startswith("["):
            in_project = line == "[project]"
            continue
        if in_project:
            match = _VERSION_LINE.match(line)
            if match:
                return match.group(1)

    raise RuntimeError("Unable to determine project version from pyproject.toml")


__all__ = ["DISTRIBUTION_NAME", "get_project_version"]
