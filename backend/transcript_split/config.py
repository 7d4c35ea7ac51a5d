"""
Configuration Management Module
===============================
Centralized configuration system for the transcript splitting service.

This module provides:
- Type-safe configuration via dataclasses
- Environment variable overrides
- JSON configuration files
- Default values with documentation

Usage:
    from transcript_split.config import get_config
    config = get_config()

    # Access configuration
    max_duration = config.splitting.max_duration
    port = config.flask.port

To run with a saved configuration:
    config = load_config_file("configs/captions.json")
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import os
import json
import logging

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION DATACLASSES
# =============================================================================

@dataclass
class SplitConfig:
    """
    Default options for transcript splitting.

    These values are used whenever a caller does not supply an option.
    They mirror the documented per-option defaults.

    min_characters is None by default so each strategy keeps its own floor:
    20 for character batching, 5 for sentence splitting. Setting it applies
    one floor to every mode.
    """

    # Options: 'sentence', 'time', 'character', 'semantic'
    mode: str = "semantic"

    # Batch ceilings
    max_duration: float = 30.0
    max_characters: int = 100

    # Batch cut floor / sentence split floor
    min_characters: Optional[int] = None

    # Force a new batch on speaker change
    preserve_speaker: bool = True


@dataclass
class FlaskConfig:
    """Configuration for Flask web server."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 5000
    debug: bool = False

    # CORS
    cors_origins: list = field(default_factory=lambda: ["*"])

    # Request limits
    max_content_length_bytes: int = 16 * 1024 * 1024
    max_segments_per_request: int = 50000


@dataclass
class LoggingConfig:
    """Configuration for logging and decision tracking."""

    log_level: str = "INFO"
    log_decisions: bool = True

    # JSONL file logging (console logging is always on)
    log_to_file: bool = False
    logs_dir: str = field(default_factory=lambda: str(Path.cwd() / "logs"))
    run_name: str = "default"

    @property
    def logs(self) -> Path:
        return Path(self.logs_dir)


@dataclass
class AppConfig:
    """
    Master configuration class that aggregates all configuration sections.

    This is the main configuration object used throughout the application.
    """

    splitting: SplitConfig = field(default_factory=SplitConfig)
    flask: FlaskConfig = field(default_factory=FlaskConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> dict:
        """Convert configuration to dictionary for serialization."""
        def convert(obj):
            if hasattr(obj, '__dataclass_fields__'):
                return {k: convert(v) for k, v in obj.__dict__.items()}
            elif isinstance(obj, Path):
                return str(obj)
            return obj
        return convert(self)

    def save(self, filepath: str) -> None:
        """Save configuration to JSON file."""
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Configuration saved to {filepath}")

    @classmethod
    def from_dict(cls, data: dict) -> "AppConfig":
        """Create configuration from dictionary."""
        return cls(
            splitting=SplitConfig(**data.get('splitting', {})),
            flask=FlaskConfig(**data.get('flask', {})),
            logging=LoggingConfig(**data.get('logging', {})),
        )

    @classmethod
    def load(cls, filepath: str) -> "AppConfig":
        """Load configuration from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)
        logger.info(f"Configuration loaded from {filepath}")
        return cls.from_dict(data)


# =============================================================================
# GLOBAL CONFIGURATION SINGLETON
# =============================================================================

_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Get the global application configuration.

    Creates a default configuration on first access.

    Returns:
        The global AppConfig instance
    """
    global _config
    if _config is None:
        _config = AppConfig()
        logger.info("Initialized default application configuration")
    return _config


def set_config(config: AppConfig) -> None:
    """
    Set the global application configuration.

    Args:
        config: The AppConfig instance to use globally
    """
    global _config
    _config = config
    logger.info(f"Set global configuration (run: {config.logging.run_name})")


def reset_config() -> None:
    """Reset the global configuration to None (forces reload on next get_config)."""
    global _config
    _config = None
    logger.info("Reset global configuration")


def load_config_file(filepath: str) -> AppConfig:
    """
    Load a configuration file and set it as global.

    Convenience function that combines load() and set_config().

    Args:
        filepath: Path to the configuration JSON file

    Returns:
        The loaded AppConfig instance
    """
    config = AppConfig.load(filepath)
    set_config(config)
    return config


# =============================================================================
# ENVIRONMENT VARIABLE OVERRIDES
# =============================================================================

ENV_PREFIX = "TRANSCRIPT_SPLIT_"

SECTION_MAP = {
    'splitting': 'splitting',
    'flask': 'flask',
    'logging': 'logging',
}


def _coerce(current_value, value: str):
    """Convert an environment string to the type of the current field value."""
    if isinstance(current_value, bool):
        return value.lower() in ('true', '1', 'yes')
    elif isinstance(current_value, int):
        return int(value)
    elif isinstance(current_value, float):
        return float(value)
    elif isinstance(current_value, list):
        return [item.strip() for item in value.split(',') if item.strip()]
    elif current_value is None:
        # Optional numeric fields (min_characters)
        return int(value) if value else None
    return value


def apply_environment_overrides(config: AppConfig) -> AppConfig:
    """
    Apply environment variable overrides to configuration.

    Environment variables follow the pattern:
    TRANSCRIPT_SPLIT_{SECTION}_{KEY}

    Examples:
        TRANSCRIPT_SPLIT_SPLITTING_MAX_DURATION=20
        TRANSCRIPT_SPLIT_FLASK_PORT=8080
        TRANSCRIPT_SPLIT_LOGGING_LOG_LEVEL=DEBUG

    Also supports common simplified environment variables:
        SPLIT_MODE=time (maps to splitting.mode)
        PORT=8080 (maps to flask.port)

    Args:
        config: Base configuration to override

    Returns:
        Configuration with environment overrides applied
    """
    # Handle common simplified environment variables first
    if os.getenv("SPLIT_MODE"):
        config.splitting.mode = os.getenv("SPLIT_MODE")
        logger.info(f"Environment override: splitting.mode = {config.splitting.mode}")

    if os.getenv("PORT"):
        try:
            config.flask.port = int(os.getenv("PORT"))
            logger.info(f"Environment override: flask.port = {config.flask.port}")
        except ValueError:
            logger.warning(f"Ignoring non-numeric PORT: {os.getenv('PORT')}")

    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue

        parts = key[len(ENV_PREFIX):].lower().split('_', 1)
        if len(parts) != 2:
            continue

        section, attr = parts

        if section not in SECTION_MAP:
            continue

        section_config = getattr(config, SECTION_MAP[section], None)
        if section_config is None or not hasattr(section_config, attr):
            continue

        current_value = getattr(section_config, attr)
        try:
            typed_value = _coerce(current_value, value)
            setattr(section_config, attr, typed_value)
            logger.info(f"Environment override: {section}.{attr} = {typed_value}")

        except (ValueError, TypeError) as e:
            logger.warning(f"Failed to apply environment override {key}: {e}")

    return config


# =============================================================================
# PRESET CONFIGURATIONS FOR COMMON SCENARIOS
# =============================================================================

def get_development_config() -> AppConfig:
    """Get configuration optimized for development."""
    config = AppConfig()
    config.flask.debug = True
    config.logging.log_level = "DEBUG"
    return config


def get_production_config() -> AppConfig:
    """Get configuration optimized for production."""
    config = AppConfig()
    config.flask.debug = False
    config.logging.log_level = "INFO"
    config.logging.log_to_file = True
    return config


def get_caption_config() -> AppConfig:
    """Get configuration tuned for short on-screen captions."""
    config = AppConfig()
    config.splitting.mode = "character"
    config.splitting.max_characters = 42
    config.splitting.min_characters = 10
    return config
