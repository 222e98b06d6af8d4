"""
Config file loading for heading-numberer.

Searches for `.heading-numberer.toml`, `heading-numberer.toml`, or
`pyproject.toml [tool.heading-numberer]` walking up from the current directory.
Command-line flags take precedence over the config file, which takes precedence
over the built-in defaults.

Example `heading-numberer.toml`:

    only-last-level = false

    [levels.h1]
    format = "chapter-chinese"
    separator = ""

    [levels.h2]
    format = "decimal"
    separator = ". "

A `.json` settings blob (`{"onlyLastLevel": false, "level1": {...}}`) can also be
loaded explicitly, and `save_config` writes that same shape.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

from strif import atomic_output_file

from heading_numberer.settings import ConfigError, NumberingSettings

if sys.version_info >= (3, 11):
    import tomllib  # pyright: ignore[reportUnreachable]
else:
    import tomli as tomllib  # type: ignore[no-redef]  # pyright: ignore[reportUnreachable]

log = logging.getLogger(__name__)

TOOL_NAME = "heading-numberer"

# Config file search order (first match wins within each directory level)
_CONFIG_FILENAMES = [f".{TOOL_NAME}.toml", f"{TOOL_NAME}.toml", "pyproject.toml"]


def find_config_file(start_dir: Path) -> Path | None:
    """
    Walk up from `start_dir` looking for a config file. Returns the first
    found, or `None`. Search order per directory: `.heading-numberer.toml` >
    `heading-numberer.toml` > `pyproject.toml` (only if it has the tool section).
    """
    current = start_dir.resolve()
    while True:
        for filename in _CONFIG_FILENAMES:
            candidate = current / filename
            if candidate.is_file():
                if filename == "pyproject.toml":
                    if _pyproject_has_tool_section(candidate):
                        return candidate
                else:
                    return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def _pyproject_has_tool_section(path: Path) -> bool:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
        return TOOL_NAME in data.get("tool", {})
    except (tomllib.TOMLDecodeError, OSError):
        return False


def _read_data(config_path: Path) -> dict[str, Any]:
    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Could not read config file {config_path}: {e}") from e

    if config_path.suffix == ".json":
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {config_path}: {e}") from e
    else:
        try:
            data = tomllib.loads(raw)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e
        if config_path.name == "pyproject.toml":
            data = data.get("tool", {}).get(TOOL_NAME, {})

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a table of settings")
    return data


def load_config(config_path: Path) -> NumberingSettings:
    """
    Load `NumberingSettings` from a TOML file (standalone or `pyproject.toml`)
    or a JSON settings blob. Levels not mentioned keep their defaults.
    """
    log.debug("Loading numbering settings from %s", config_path)
    return NumberingSettings.from_dict(_read_data(config_path))


def save_config(settings: NumberingSettings, config_path: Path) -> None:
    """
    Write settings as a JSON blob (`onlyLastLevel`, `level1`..`level6`), the
    shape editor plugins persist. The file is replaced atomically.
    """
    data = settings.to_dict()
    with atomic_output_file(config_path, make_parents=True) as temp_path:
        Path(temp_path).write_text(
            json.dumps(data, ensure_ascii=False, indent=2) + "\n", encoding="utf-8"
        )
    log.debug("Saved numbering settings to %s", config_path)
