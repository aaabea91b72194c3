"""Configuration management for the font resolution system."""

from pathlib import Path

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

DEFAULT_FONT_NAME = "Arial"


class ResolverConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FONTRESOLVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    """Font discovery and resolution configuration."""

    return_null_if_missing: bool = Field(
        False, description="Return None instead of a fallback font for unknown families"
    )
    default_font_name: str = Field(DEFAULT_FONT_NAME, description="Canonical fallback family")
    extra_font_dirs: list[Path] = Field(
        default_factory=list, description="Additional directories scanned before system fonts"
    )
    use_fontconfig: bool = Field(True, description="Query fc-list on Unix-like systems")
    include_system_fonts: bool = Field(True, description="Scan platform font directories")
    system: str | None = Field(None, description="Override detected platform name")

    @field_validator("default_font_name")
    @classmethod
    def validate_default_font_name(cls, v):
        if not v.strip():
            raise ValueError("default_font_name must not be empty")
        return v.strip()

    @field_validator("extra_font_dirs")
    @classmethod
    def expand_extra_font_dirs(cls, v):
        return [Path(d).expanduser() for d in v]

    @field_validator("system")
    @classmethod
    def normalize_system(cls, v):
        return v.strip().lower() if v else None

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "ResolverConfig":
        """Load configuration from YAML file."""
        return load_config_from_yaml(config_path, cls)

    @classmethod
    def from_env_and_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str = ".env"
    ) -> "ResolverConfig":
        """Load configuration from environment variables and optionally override with YAML."""
        if yaml_path and Path(yaml_path).exists():
            return cls.from_yaml(yaml_path)
        # Load from environment variables/.env file
        return cls(_env_file=env_file if Path(env_file).exists() else None)


def load_config_from_yaml(config_path: str | Path, config_class: type) -> BaseSettings:
    """Load configuration from YAML file."""
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if config_data is None:
        raise ConfigurationError(f"Empty configuration file: {config_path}")
    if not isinstance(config_data, dict):
        raise ConfigurationError(f"Configuration must be a mapping: {config_path}")

    # YAML values take precedence; skip the .env file for this instance
    class YamlConfig(config_class):
        model_config = SettingsConfigDict(
            env_prefix=config_class.model_config.get("env_prefix", ""),
            env_file=None,
            case_sensitive=False,
            extra="ignore",
        )

    try:
        loaded = YamlConfig(**config_data)
    except ValueError as e:
        raise ConfigurationError(f"Invalid configuration in {config_path}: {e}") from e

    return config_class.model_validate(loaded.model_dump())
