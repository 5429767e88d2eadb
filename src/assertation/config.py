"""
Configuration management for the assertation engine.

This module provides centralized configuration, supporting:
- Default configuration values
- Environment variable overrides
- Custom configuration
- Configuration validation
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from assertation.exceptions import InvalidConfigurationException
from assertation.utils.constants import Defaults, EnvVars

LOGGING_LEVELS = ("debug", "info", "warning", "error")
LOGGING_FORMATS = ("text", "json")


@dataclass
class AssertConfig:
    """
    Configuration for an Assert validation context.

    throw_early switches every chain created by the context from
    accumulate mode to fail-fast mode.
    """

    throw_early: bool = False

    # Message catalog (YAML) and the locale section to read from it
    messages_file: Optional[str] = None
    locale: Optional[str] = None

    logging_level: str = Defaults.LOGGING_LEVEL
    logging_format: str = Defaults.LOGGING_FORMAT

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_config()

    def _validate_config(self) -> None:
        """
        Validate configuration values.

        Raises:
            InvalidConfigurationException: If configuration is invalid
        """
        if not isinstance(self.throw_early, bool):
            raise InvalidConfigurationException(
                "throw_early must be a boolean",
                context={"config_key": "throw_early", "value": self.throw_early},
            )

        if self.logging_level.lower() not in LOGGING_LEVELS:
            raise InvalidConfigurationException(
                f"logging_level must be one of {', '.join(LOGGING_LEVELS)}",
                context={"config_key": "logging_level", "value": self.logging_level},
            )

        if self.logging_format.lower() not in LOGGING_FORMATS:
            raise InvalidConfigurationException(
                f"logging_format must be one of {', '.join(LOGGING_FORMATS)}",
                context={"config_key": "logging_format", "value": self.logging_format},
            )

    @classmethod
    def from_env(cls) -> "AssertConfig":
        """
        Create configuration from environment variables.

        Environment variables:
        - ASSERTATION_THROW_EARLY: Raise on the first failing check (true/false)
        - ASSERTATION_MESSAGES_FILE: Path to a YAML message catalog
        - ASSERTATION_LOCALE: Locale section of the message catalog
        - ASSERTATION_LOGGING_LEVEL: debug, info, warning or error
        - ASSERTATION_LOGGING_FORMAT: text or json

        Returns:
            AssertConfig with values from environment
        """
        config_dict: Dict[str, Any] = {}

        if EnvVars.THROW_EARLY in os.environ:
            value = os.environ[EnvVars.THROW_EARLY].lower()
            if value in ("true", "1", "yes", "on"):
                config_dict["throw_early"] = True
            elif value in ("false", "0", "no", "off"):
                config_dict["throw_early"] = False
            else:
                raise InvalidConfigurationException(
                    f"{EnvVars.THROW_EARLY} must be a boolean value (true/false)",
                    context={"value": os.environ[EnvVars.THROW_EARLY]},
                )

        str_env_vars = {
            EnvVars.MESSAGES_FILE: "messages_file",
            EnvVars.LOCALE: "locale",
            EnvVars.LOGGING_LEVEL: "logging_level",
            EnvVars.LOGGING_FORMAT: "logging_format",
        }

        for env_var, config_key in str_env_vars.items():
            if os.environ.get(env_var):
                config_dict[config_key] = os.environ[env_var]

        return cls(**config_dict)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert configuration to dictionary.

        Returns:
            Dictionary representation of configuration
        """
        return {
            "throw_early": self.throw_early,
            "messages_file": self.messages_file,
            "locale": self.locale,
            "logging_level": self.logging_level,
            "logging_format": self.logging_format,
        }

    def merge(self, other: "AssertConfig") -> "AssertConfig":
        """
        Merge this configuration with another, other takes precedence.

        Args:
            other: Configuration to merge with

        Returns:
            New AssertConfig with merged values
        """
        merged_dict = self.to_dict()
        merged_dict.update(
            {key: value for key, value in other.to_dict().items() if value is not None}
        )
        return AssertConfig(**merged_dict)


def get_logging_config(config: Optional[AssertConfig] = None):
    config = config or AssertConfig.from_env()

    return dict(
        logging_level=config.logging_level, logging_format=config.logging_format
    )
