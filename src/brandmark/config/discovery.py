"""Config file discovery and raw TOML loading.

A directory provides configuration through either ``brandmark.toml`` or a
``[tool.brandmark]`` table in ``pyproject.toml``; the dedicated file wins
when both exist. Discovery walks up from the start directory, and the
BRANDMARK_CONFIG env var short-circuits the walk.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "brandmark.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "BRANDMARK_CONFIG"


def _pyproject_has_section(path: Path) -> bool:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError):
        return False
    return isinstance(data.get("tool", {}).get("brandmark"), dict)


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest config file above *start* (default: cwd), or None."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        dedicated = directory / CONFIG_FILENAME
        if dedicated.is_file():
            return dedicated
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and _pyproject_has_section(pyproject):
            return pyproject
    return None


def load_toml(path: Path) -> dict[str, Any]:
    """Read settings data from *path*.

    Raises:
        tomllib.TOMLDecodeError: The file is not valid TOML.
    """
    data = tomllib.loads(path.read_text(encoding="utf-8"))
    if path.name == PYPROJECT_FILENAME:
        section = data.get("tool", {}).get("brandmark", {})
        return section if isinstance(section, dict) else {}
    return data
