"""Configuration management for emby2openlist."""

import os
import re
from pathlib import Path
from typing import Any, List, Optional, Tuple

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator


class PathMapping(BaseModel):
    """Explicit Emby to Openlist path override."""

    emby: str = Field(..., description="Path prefix after the Emby mount path is removed")
    openlist: str = Field(..., description="Openlist path replacing the prefix")

    @model_validator(mode="before")
    @classmethod
    def parse_compact(cls, data: Any) -> Any:
        """Accept the compact ``"<emby>:<openlist>"`` form."""
        if isinstance(data, str):
            emby, sep, openlist = data.partition(":")
            if not sep:
                raise ValueError(f"Path mapping must look like '<emby>:<openlist>': {data}")
            return {"emby": emby, "openlist": openlist}
        return data


class EmbyConfig(BaseModel):
    """Emby server configuration."""

    mount_path: str = Field(default="", description="Library mount prefix to strip")


class OpenlistConfig(BaseModel):
    """Openlist listing service configuration."""

    host: str = Field(default="http://localhost:5244", description="Openlist base URL")
    token: Optional[str] = Field(default=None, description="Openlist API token")
    timeout_seconds: float = Field(default=10.0, description="HTTP timeout")

    @field_validator("host")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize host so endpoints can be appended."""
        return v.rstrip("/")


class PathConfig(BaseModel):
    """Path translation configuration."""

    follow_symlink: bool = Field(default=False, description="Resolve local symlinks first")
    emby2openlist: List[PathMapping] = Field(
        default_factory=list, description="Ordered explicit path overrides"
    )

    def map_emby2openlist(self, path: str) -> Tuple[str, bool]:
        """Apply the first override whose prefix matches.

        Args:
            path: Path with the Emby mount prefix already removed

        Returns:
            Tuple of (mapped path, whether a mapping was hit)
        """
        for mapping in self.emby2openlist:
            if path.startswith(mapping.emby):
                return mapping.openlist + path[len(mapping.emby):], True
        return path, False


class LoggingConfig(BaseModel):
    """Logging configuration."""

    format: str = Field(default="json", description="Log format (json or text)")
    level: str = Field(default="info", description="Log level")
    output: Optional[str] = Field(default=None, description="Log file path (stderr only when unset)")

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate log format."""
        if v not in ("json", "text"):
            raise ValueError("Log format must be 'json' or 'text'")
        return v

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        if v.lower() not in ("debug", "info", "warning", "error", "critical"):
            raise ValueError("Invalid log level")
        return v.lower()


class Config(BaseModel):
    """Main configuration model."""

    emby: EmbyConfig = Field(default_factory=EmbyConfig, description="Emby configuration")
    openlist: OpenlistConfig = Field(
        default_factory=OpenlistConfig, description="Openlist configuration"
    )
    path: PathConfig = Field(default_factory=PathConfig, description="Path translation")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging configuration")

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path, encoding="utf-8") as f:
            raw_config = yaml.safe_load(f)

        if raw_config is None:
            raw_config = {}

        raw_config = cls._substitute_env_vars(raw_config)

        return cls(**raw_config)

    @staticmethod
    def _substitute_env_vars(obj: Any) -> Any:
        """Recursively replace ${VAR_NAME} with os.environ['VAR_NAME']."""
        if isinstance(obj, dict):
            return {key: Config._substitute_env_vars(value) for key, value in obj.items()}
        elif isinstance(obj, list):
            return [Config._substitute_env_vars(item) for item in obj]
        elif isinstance(obj, str):
            pattern = r"\$\{([^}]+)\}"

            def replace_var(match):
                var_name = match.group(1)
                value = os.environ.get(var_name)
                if value is None:
                    raise ValueError(
                        f"Environment variable '{var_name}' not found "
                        f"(referenced in configuration)"
                    )
                return value

            return re.sub(pattern, replace_var, obj)
        else:
            return obj

    @classmethod
    def from_defaults(cls) -> "Config":
        """Create configuration with default values."""
        return cls()


def load_config(path: Optional[str | Path] = None) -> Config:
    """Load configuration from file or use defaults.

    Args:
        path: Optional path to configuration file. If None, uses defaults.

    Returns:
        Config instance
    """
    if path is None:
        return Config.from_defaults()

    return Config.from_yaml(path)
