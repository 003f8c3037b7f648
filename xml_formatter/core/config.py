"""
Settings for the XML formatter.

Values come from, in increasing priority: defaults, ``XML_FORMATTER_*``
environment variables (or a ``.env`` file), then an optional YAML file.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import structlog
import yaml
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from xml_formatter.formatting.types import FormattingOptions, XMLError

logger = structlog.get_logger(__name__)


class ConfigurationError(XMLError):
    """Invalid or unreadable configuration."""
    pass


class Settings(BaseSettings):
    # Formatting
    indent_size: int = Field(default=2, ge=0)
    line_separator: Literal["\n", "\r\n"] = "\n"

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_format: Literal["console", "json"] = "console"

    # Download artifacts
    input_filename: str = "input.xml"
    output_filename: str = "formatted.xml"
    media_type: str = "application/xml"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    def formatting_options(self) -> FormattingOptions:
        """Build formatter options from these settings."""
        return FormattingOptions(
            indent_size=self.indent_size,
            line_separator=self.line_separator,
        )

    class Config:
        env_prefix = "XML_FORMATTER_"
        env_file = ".env"
        case_sensitive = False


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    """Load configuration from YAML file."""
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to read configuration {config_path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigurationError(f"Configuration must be a mapping: {config_path}")

    return config


def load_settings(config_path: Optional[Path] = None) -> Settings:
    """
    Build settings, overlaying a YAML file when one is given.

    Args:
        config_path: Optional YAML file with settings keys at the top level

    Returns:
        Validated settings

    Raises:
        ConfigurationError: If the file is unreadable or a value is invalid
    """
    overrides: Dict[str, Any] = {}
    if config_path is not None:
        overrides = _load_yaml_config(Path(config_path))
        logger.debug("Loaded settings file", path=str(config_path), keys=sorted(overrides))

    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


@lru_cache()
def get_settings() -> Settings:
    return load_settings()
