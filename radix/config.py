"""Settings for the command-line front end, read from a TOML file."""
from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .number import DEFAULT_BASE, MAX_BASE, MIN_BASE

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    default_base: int = DEFAULT_BASE
    log_level: str = "WARNING"
    show_fraction: bool = False

    def validate(self) -> "Settings":
        if isinstance(self.default_base, bool) or not isinstance(self.default_base, int):
            raise ValueError(f"default_base must be an integer, got {self.default_base!r}")
        if not MIN_BASE <= self.default_base <= MAX_BASE:
            raise ValueError(
                f"default_base must be in [{MIN_BASE}, {MAX_BASE}], got {self.default_base}"
            )
        level = str(self.log_level).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        self.log_level = level
        if not isinstance(self.show_fraction, bool):
            raise ValueError("show_fraction must be true or false")
        return self

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)


def settings_from_mapping(data: Dict[str, Any]) -> Settings:
    """Build :class:`Settings` from a parsed mapping, rejecting unknown keys."""
    section = data.get("radix", data)
    known = {field.name for field in fields(Settings)}
    unknown = sorted(set(section) - known)
    if unknown:
        raise ValueError(f"Unknown settings: {', '.join(unknown)}")
    return Settings(**section).validate()


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    """Read settings from *path*; defaults when *path* is ``None``.

    Keys may sit at the top level or under a ``[radix]`` table.
    """
    if path is None:
        return Settings()
    config_path = Path(path).expanduser().resolve()
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with config_path.open("rb") as fh:
        data = tomllib.load(fh)
    return settings_from_mapping(data)


__all__ = ["Settings", "load_settings", "settings_from_mapping"]
