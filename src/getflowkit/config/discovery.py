"""Locate and read the getflowkit configuration table.

Settings live either in a dedicated ``getflowkit.toml`` or in the
``[tool.getflowkit]`` table of a project's ``pyproject.toml``. The
``GETFLOWKIT_CONFIG`` env var and the ``--config`` flag name a file
directly.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "getflowkit.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "GETFLOWKIT_CONFIG"


def read_config(path: Path) -> dict[str, Any]:
    """Return the getflowkit settings stored in *path*.

    A ``pyproject.toml`` contributes only its ``[tool.getflowkit]`` table;
    any other file is read whole. Raises :class:`tomllib.TOMLDecodeError`
    for malformed TOML.
    """
    data = tomllib.loads(path.read_text(encoding="utf-8"))
    if path.name == PYPROJECT_FILENAME:
        table: dict[str, Any] = data.get("tool", {}).get("getflowkit", {})
        return table
    return data


def _declares_tool_table(pyproject: Path) -> bool:
    data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    return "getflowkit" in data.get("tool", {})


def find_config(start: Path | None = None) -> Path | None:
    """Find the config file governing *start* (default: cwd).

    ``GETFLOWKIT_CONFIG`` wins when set, even if it names a missing file.
    Otherwise each directory from *start* up to the filesystem root is
    tried in turn. Within one directory ``getflowkit.toml`` beats a
    ``pyproject.toml``, and a ``pyproject.toml`` without a
    ``[tool.getflowkit]`` table is skipped.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        dedicated = directory / CONFIG_FILENAME
        if dedicated.is_file():
            return dedicated
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and _declares_tool_table(pyproject):
            return pyproject
    return None
