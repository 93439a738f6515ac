"""
Processor configuration.

ProcessorConfig can be built in code, from a mapping, or from a YAML file,
with CLIPROC_* environment variables applied on top.

Example YAML:
    prog: bakery
    description: Bake things from the command line
    version: 1.2.0
    logging:
      level: info
      colors: false
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from .constants import ENV_PREFIX
from .errors import ConfigurationError
from .log import InvalidLogLevelError, LogConfig

_BOOL_TRUE = {"1", "true", "yes", "on"}
_BOOL_FALSE = {"0", "false", "no", "off"}


def _to_bool(key: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _BOOL_TRUE:
        return True
    if lowered in _BOOL_FALSE:
        return False
    raise ConfigurationError(f"{key} expects a boolean, got '{value}'")


@dataclass
class ProcessorConfig:
    """Settings for a CommandProcessor."""

    prog: str | None = None
    description: str = ""
    version: str | None = None  # adds a root --version flag when set
    log_level: str | int | bool = "warning"
    log_colors: bool = True
    defaults_in_help: bool = True

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ProcessorConfig:
        """
        Build config from a mapping.

        A nested "logging" section (level, colors) is accepted alongside the
        flat log_level/log_colors keys. Unknown keys are rejected.
        """
        data = dict(data)
        logging_section = data.pop("logging", None) or {}
        if not isinstance(logging_section, Mapping):
            raise ConfigurationError("'logging' section must be a mapping")
        if "level" in logging_section:
            data.setdefault("log_level", logging_section["level"])
        if "colors" in logging_section:
            data.setdefault("log_colors", logging_section["colors"])

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"unknown keys: {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: str | Path) -> ProcessorConfig:
        """
        Load config from a YAML file.

        Raises:
            ConfigurationError: If the file is missing, malformed, or its
                root is not a mapping
        """
        path = Path(path)
        try:
            with path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(f"config file not found: {path}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"invalid YAML in {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ConfigurationError(f"{path} must contain a mapping at the top level")
        return cls.from_dict(data)

    def apply_env_overrides(
        self, environ: Mapping[str, str] | None = None, prefix: str = ENV_PREFIX
    ) -> ProcessorConfig:
        """
        Return a copy with CLIPROC_<FIELD> environment variables applied.

        For example CLIPROC_LOG_LEVEL=debug sets log_level.
        """
        environ = os.environ if environ is None else environ
        changes: dict[str, Any] = {}
        for f in fields(self):
            key = prefix + f.name.upper()
            if key not in environ:
                continue
            raw = environ[key]
            if f.name in ("log_colors", "defaults_in_help"):
                changes[f.name] = _to_bool(key, raw)
            else:
                changes[f.name] = raw
        return replace(self, **changes) if changes else self

    def log_config(self) -> LogConfig:
        """
        LogConfig for the processor's root logger.

        Raises:
            ConfigurationError: If log_level is not a valid level
        """
        try:
            return LogConfig.from_params(self.log_level, colors=self.log_colors)
        except InvalidLogLevelError as e:
            raise ConfigurationError(str(e)) from e
