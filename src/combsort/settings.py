"""
Server settings.

Resolution order (later wins):
    1. dataclass defaults
    2. an optional YAML file (flat mapping of the field names below)
    3. environment variables

Environment variables:
    COMBSORT_HOST              bind address
    PORT / COMBSORT_PORT       bind port (COMBSORT_PORT wins when both are set)
    COMBSORT_LOG_LEVEL         DEBUG | INFO | WARNING | ERROR
    COMBSORT_LOG_FILE          optional path of a plain-text log file
    COMBSORT_MAX_ARRAY_LENGTH  largest array accepted by POST /api/sort

Example YAML:
    host: 127.0.0.1
    port: 5247
    log_level: DEBUG
    log_file: ./logs/server.log
    max_array_length: 50000
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

__all__ = ["Settings", "load_settings", "LOG_LEVELS"]


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 5247
    log_level: str = "INFO"
    log_file: Optional[str] = None
    max_array_length: int = 100_000

    def __post_init__(self) -> None:
        if isinstance(self.log_level, str):
            object.__setattr__(self, "log_level", self.log_level.upper())
        if not isinstance(self.host, str) or not self.host:
            raise ValueError(f"host must be a non-empty string; got {self.host!r}")
        if isinstance(self.port, bool) or not isinstance(self.port, int) or not 0 < self.port < 65536:
            raise ValueError(f"port must be an integer in [1, 65535]; got {self.port!r}")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {list(LOG_LEVELS)}; got {self.log_level!r}")
        if self.log_file is not None and not isinstance(self.log_file, str):
            raise ValueError(f"log_file must be a string path; got {self.log_file!r}")
        if (
            isinstance(self.max_array_length, bool)
            or not isinstance(self.max_array_length, int)
            or self.max_array_length < 1
        ):
            raise ValueError(
                f"max_array_length must be a positive integer; got {self.max_array_length!r}"
            )


_ENV_KEYS = (
    ("host", "COMBSORT_HOST", str),
    ("port", "PORT", int),
    ("port", "COMBSORT_PORT", int),
    ("log_level", "COMBSORT_LOG_LEVEL", str),
    ("log_file", "COMBSORT_LOG_FILE", str),
    ("max_array_length", "COMBSORT_MAX_ARRAY_LENGTH", int),
)


def _from_file(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file must contain a YAML mapping: {path}")
    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown settings keys in {path}: {unknown}")
    return data


def _from_env(env: Mapping[str, str]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field_name, var, convert in _ENV_KEYS:
        raw = env.get(var)
        if raw is None or raw == "":
            continue
        try:
            out[field_name] = convert(raw)
        except ValueError as e:
            raise ValueError(f"Environment variable {var} is invalid: {raw!r}") from e
    return out


def load_settings(
    path: Optional[Union[str, Path]] = None,
    env: Optional[Mapping[str, str]] = None,
    **overrides: Any,
) -> Settings:
    """
    Build `Settings` from defaults, an optional YAML file, the environment and
    explicit keyword overrides (e.g. CLI flags). `None` overrides are ignored.
    """
    values: Dict[str, Any] = {}
    if path is not None:
        values.update(_from_file(Path(path)))
    values.update(_from_env(os.environ if env is None else env))
    values.update({k: v for k, v in overrides.items() if v is not None})
    return replace(Settings(), **values)
