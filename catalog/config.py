"""
Catalog configuration management with YAML support.

This module provides the CatalogConfig dataclass and utilities for loading
it from YAML files and environment variables.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

ENV_CONFIG_PATH = "CATALOG_CONFIG"
ENV_LOG_LEVEL = "CATALOG_LOG_LEVEL"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class CatalogConfig:
    """Configuration for the catalog runner and CLI.

    Attributes:
        log_level: Minimum log level name (DEBUG, INFO, WARNING, ...)
        json_logs: Whether console logs are emitted as JSON
        use_colors: Whether human-readable logs use ANSI colors
        log_file: Optional path for JSON log output
        inputs: Per-pattern default inputs {pattern_name: {key: value}}
    """

    log_level: str = "WARNING"
    json_logs: bool = False
    use_colors: bool = True
    log_file: Optional[str] = None
    inputs: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def from_yaml(cls, path: Path | str) -> "CatalogConfig":
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            CatalogConfig instance with values from the file

        Raises:
            FileNotFoundError: If the YAML file doesn't exist
            yaml.YAMLError: If the YAML is malformed
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Catalog config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data: Dict[str, Any] = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CatalogConfig":
        """Create configuration from a dictionary.

        Raises:
            ValueError: If 'inputs' is not a mapping of mappings
        """
        inputs = data.get("inputs") or {}
        if not isinstance(inputs, Mapping) or not all(
            isinstance(value, Mapping) for value in inputs.values()
        ):
            raise ValueError("'inputs' must map pattern names to mappings")

        config = cls(
            log_level=str(data.get("log_level", "WARNING")).upper(),
            json_logs=bool(data.get("json_logs", False)),
            use_colors=bool(data.get("use_colors", True)),
            log_file=data.get("log_file"),
            inputs={name: dict(values) for name, values in inputs.items()},
        )
        config.validate()
        return config

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CatalogConfig":
        """Load configuration named by the environment.

        CATALOG_CONFIG points to a YAML file; CATALOG_LOG_LEVEL overrides
        the log level from that file.
        """
        environ = os.environ if environ is None else environ
        config_path = environ.get(ENV_CONFIG_PATH)
        config = cls.from_yaml(config_path) if config_path else cls()

        level = environ.get(ENV_LOG_LEVEL)
        if level:
            config.log_level = level.upper()
        return config

    def validate(self) -> None:
        """Check field values.

        Raises:
            ValueError: If the log level is not a known level name
        """
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level {self.log_level!r}; expected one of {VALID_LOG_LEVELS}"
            )

    def inputs_for(self, pattern: str) -> Dict[str, Any]:
        """Return a copy of the configured inputs for one pattern."""
        return dict(self.inputs.get(pattern, {}))

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "log_level": self.log_level,
            "json_logs": self.json_logs,
            "use_colors": self.use_colors,
            "log_file": self.log_file,
            "inputs": {name: dict(values) for name, values in self.inputs.items()},
        }

    def to_yaml(self, path: Path | str) -> None:
        """Save configuration to a YAML file.

        Args:
            path: Path where the YAML file will be saved
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)
