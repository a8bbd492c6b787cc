"""Locating and reading the symtax configuration.

Configuration lives either in a ``symtax.toml`` file or in the
``[tool.symtax]`` table of a ``pyproject.toml``. The search walks up from
the working directory and stops at the first directory holding either;
when both sit side by side, ``symtax.toml`` wins. ``SYMTAX_CONFIG``
short-circuits the search.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from symtax.config.models import SymtaxConfig

CONFIG_FILENAME = "symtax.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "SYMTAX_CONFIG"


class ConfigFileError(ValueError):
    """Raised when a configuration file is not valid TOML."""


def _ancestors(start: Path) -> Iterator[Path]:
    current = start.resolve()
    yield current
    yield from current.parents


def _declares_symtax(pyproject: Path) -> bool:
    # A broken pyproject.toml belongs to someone else; skip it.
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError):
        return False
    return isinstance(data.get("tool", {}).get("symtax"), dict)


def find_config(start: Path | None = None) -> Path | None:
    """Return the configuration file governing *start* (default: cwd), if any."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    for directory in _ancestors(start or Path.cwd()):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and _declares_symtax(pyproject):
            return pyproject
    return None


def read_config_table(path: Path) -> dict[str, Any]:
    """Parse *path* and return the symtax table it carries.

    Raises:
        ConfigFileError: If the file is not valid TOML.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigFileError(msg) from exc
    if path.name == PYPROJECT_FILENAME:
        return dict(data.get("tool", {}).get("symtax", {}))
    return data


def load_config(path: Path | None = None, cwd: Path | None = None) -> SymtaxConfig:
    """Validate the configuration at *path*, or the one found from *cwd*.

    Without any configuration file the code defaults are returned.
    """
    path = path or find_config(cwd)
    if path is None:
        return SymtaxConfig()
    return SymtaxConfig.model_validate(read_config_table(path))
