"""
TOML-based config file loading for Relist.

Searches for `.relist.toml`, `relist.toml`, or `pyproject.toml [tool.relist]`
walking up from the current directory. Config values are merged with CLI flags
using three-way precedence: explicit CLI flags > config file > built-in defaults.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, TypeVar, cast

if sys.version_info >= (3, 11):
    import tomllib  # pyright: ignore[reportUnreachable]
else:
    import tomli as tomllib  # type: ignore[no-redef]  # pyright: ignore[reportUnreachable]

log = logging.getLogger(__name__)

LOG_LEVELS = ("debug", "info", "warning", "error")


@dataclass
class RelistConfig:
    """
    Parsed config from a TOML file. Fields are `None` when not set in the config,
    allowing the merge logic to distinguish "not configured" from "explicitly set
    to default value".
    """

    log_level: str | None = None
    strict: bool | None = None
    nobackup: bool | None = None


# Config file search order (first match wins within each directory level)
_CONFIG_FILENAMES = [".relist.toml", "relist.toml", "pyproject.toml"]

_VALID_FIELDS = {f.name for f in fields(RelistConfig)}

_BOOL_FIELDS = ("strict", "nobackup")


def find_config_file(start_dir: Path) -> Path | None:
    """
    Walk up from `start_dir` looking for a config file. Returns the first
    found, or `None`. Search order per directory: `.relist.toml` >
    `relist.toml` > `pyproject.toml` (only if it has `[tool.relist]`).
    """
    current = start_dir.resolve()
    while True:
        for filename in _CONFIG_FILENAMES:
            candidate = current / filename
            if candidate.is_file():
                if filename == "pyproject.toml":
                    if _pyproject_has_relist_section(candidate):
                        return candidate
                else:
                    return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def _pyproject_has_relist_section(path: Path) -> bool:
    try:
        data = tomllib.loads(path.read_text())
        return "relist" in data.get("tool", {})
    except (tomllib.TOMLDecodeError, OSError):
        return False


def load_config(config_path: Path) -> RelistConfig:
    """
    Load a `RelistConfig` from a TOML file. Supports both standalone
    `relist.toml` / `.relist.toml` and `pyproject.toml` (extracts
    `[tool.relist]`). A file that isn't valid TOML is reported and ignored.
    """
    try:
        data = tomllib.loads(config_path.read_text())
    except tomllib.TOMLDecodeError as e:
        log.warning(f"Ignoring malformed config file {config_path}: {e}")
        return RelistConfig()

    if config_path.name == "pyproject.toml":
        data = data.get("tool", {}).get("relist", {})

    return _parse_config_data(data)


def _parse_config_data(data: dict[str, Any]) -> RelistConfig:
    """Parse a flat or sectioned TOML dict into RelistConfig."""
    flat: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, dict):
            for sub_key, sub_value in cast(dict[str, Any], value).items():
                flat[sub_key] = sub_value
        else:
            flat[key] = value

    mapped: dict[str, Any] = {}
    for key, value in flat.items():
        snake_key = key.replace("-", "_")
        if snake_key in _VALID_FIELDS:
            mapped[snake_key] = value
        else:
            log.warning(f"Ignoring unrecognized config key: {key}")

    log_level = mapped.get("log_level")
    if log_level is not None and str(log_level).lower() not in LOG_LEVELS:
        log.warning(f"Ignoring invalid log-level in config: {log_level!r}")
        del mapped["log_level"]
    elif log_level is not None:
        mapped["log_level"] = str(log_level).lower()

    for name in _BOOL_FIELDS:
        value = mapped.get(name)
        if value is not None and not isinstance(value, bool):
            log.warning(f"Ignoring {name.replace('_', '-')} in config, expected true or false: {value!r}")
            del mapped[name]

    return RelistConfig(**mapped)


_T = TypeVar("_T")


def merge_cli_with_config(
    cli_opts: _T,
    config: RelistConfig | None,
    explicit_flags: set[str],
) -> _T:
    """
    Merge CLI options with config file settings.

    Precedence: explicit CLI flags > config file > built-in defaults.
    """
    if config is None:
        return cli_opts

    for cfg_field in fields(RelistConfig):
        cfg_value = getattr(config, cfg_field.name)
        if cfg_value is None:
            continue  # Not set in config

        if cfg_field.name in explicit_flags:
            continue

        if hasattr(cli_opts, cfg_field.name):
            setattr(cli_opts, cfg_field.name, cfg_value)

    return cli_opts
