"""Config file discovery and loading.

Walking up from the working directory, the first directory holding either
``fieldrules.toml`` or a ``pyproject.toml`` with a ``[tool.fieldrules]``
table wins; ``fieldrules.toml`` takes precedence within one directory.
The FIELDRULES_CONFIG env var and the --config CLI flag bypass the walk.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from fieldrules.config.models import FieldrulesConfig

CONFIG_FILENAME = "fieldrules.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "FIELDRULES_CONFIG"


def _has_tool_table(pyproject: Path) -> bool:
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError:
        return False
    return "fieldrules" in data.get("tool", {})


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for a config source.

    Returns the path to the config file, or None if not found.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and _has_tool_table(pyproject):
            return pyproject
    return None


def read_config_data(path: Path) -> dict[str, Any]:
    """Return the raw config table stored in *path*.

    For ``pyproject.toml`` that is the ``[tool.fieldrules]`` table.
    """
    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    if path.name == PYPROJECT_FILENAME:
        return data.get("tool", {}).get("fieldrules", {})
    return data


def load_config(path: Path | None = None, cwd: Path | None = None) -> FieldrulesConfig:
    """Load and validate config without env-var merging.

    If *path* is None, uses find_config(*cwd*) to discover the file.
    Returns the default config if no file is found.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return FieldrulesConfig()
    return FieldrulesConfig.model_validate(read_config_data(path))
