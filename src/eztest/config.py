"""
Configuration module for eztest.

Provides strongly-typed configuration with pydantic, supporting both
file-based and environment variable configuration.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from eztest.errors import ConfigurationError


class OutputConfig(BaseModel):
    """How a TestContext reports failures."""

    max_reported_failures: int = Field(
        default=5,
        ge=0,
        le=1000,
        description="Failed expectations per test printed individually; the rest are only counted",
    )
    sequence_style: Literal["python", "braces"] = Field(
        default="python",
        description="Render lists and tuples in diagnostics as Python text or as {a,b,c}",
    )


class DemoConfig(BaseModel):
    """Settings for the demonstration run."""

    slow_iterations: int = Field(
        default=2000,
        ge=0,
        description="Loop bound (per axis) of the slow demonstration test",
    )


class Config(BaseSettings):
    """
    Main eztest configuration.

    Can be configured via:
    1. Configuration file (eztest.toml, eztest.yaml or JSON)
    2. Environment variables with EZTEST_ prefix
    3. Programmatic overrides
    """

    model_config = SettingsConfigDict(
        env_prefix="EZTEST_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging level",
    )

    output: OutputConfig = Field(default_factory=OutputConfig)
    demo: DemoConfig = Field(default_factory=DemoConfig)

    @classmethod
    def from_file(cls, path: Path) -> "Config":
        """Load configuration from a TOML, YAML or JSON file."""
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        suffix = path.suffix.lower()
        content = path.read_text()

        if suffix == ".toml":
            import tomllib

            data = tomllib.loads(content)
        elif suffix in (".yaml", ".yml"):
            import yaml

            data = yaml.safe_load(content) or {}
        elif suffix == ".json":
            data = json.loads(content)
        else:
            raise ConfigurationError(f"Unsupported config format: {suffix}")

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file must hold a mapping: {path}")

        return cls(**data)

    def to_dict(self) -> dict:
        """Convert configuration to dictionary."""
        return self.model_dump()


def get_default_config() -> Config:
    """Get default configuration instance."""
    return Config()


def load_config(
    config_path: Path | None = None,
    project_root: Path | None = None,
) -> Config:
    """
    Load configuration with automatic discovery.

    Priority:
    1. Explicit config_path if provided
    2. eztest.toml in project_root
    3. .eztest/config.toml in project_root
    4. eztest.yaml / .eztest/config.yaml in project_root
    5. Default configuration
    """
    if config_path is not None:
        return Config.from_file(config_path)

    root = project_root or Path.cwd()
    candidates = [
        root / "eztest.toml",
        root / ".eztest" / "config.toml",
        root / "eztest.yaml",
        root / ".eztest" / "config.yaml",
    ]

    for candidate in candidates:
        if candidate.exists():
            return Config.from_file(candidate)

    return Config()
