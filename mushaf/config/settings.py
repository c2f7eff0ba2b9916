"""Environment-driven settings for mushaf."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ..exceptions import ConfigurationError
from .constants import ENV_VAR_DEFINITIONS, MUSHAF_CONFIG_DIR


@dataclass(frozen=True)
class ProviderSettings:
    """Connection settings for the data provider."""

    api_url: str
    timeout: float
    retries: int
    detail_cache_size: int


def get_config_dir() -> Path:
    """Get the config directory, respecting MUSHAF_CONFIG_DIR.

    When running tests, point MUSHAF_CONFIG_DIR at a temp directory so
    preferences and logs never touch the real home directory.
    """
    override = os.environ.get("MUSHAF_CONFIG_DIR")
    if override:
        return Path(override)
    return MUSHAF_CONFIG_DIR


def validate_env_var(name: str, value: Optional[str]) -> Tuple[bool, Optional[str]]:
    """Validate a single environment variable value.

    Args:
        name: The environment variable name.
        value: The current value (or None if not set).

    Returns:
        Tuple of (is_valid, error_message).
    """
    if name not in ENV_VAR_DEFINITIONS:
        return True, None

    if value is None:
        return True, None

    definition = ENV_VAR_DEFINITIONS[name]

    cast = definition.get("type")
    if cast is not None:
        try:
            number = cast(value)
        except ValueError:
            return False, f"Invalid value '{value}' for {name}. Expected {cast.__name__}"
        if number < 0:
            return False, f"Invalid value '{value}' for {name}. Must not be negative"

    valid_values = definition.get("valid_values")
    if valid_values is None:
        return True, None

    if value.lower() not in [v.lower() for v in valid_values]:
        return False, f"Invalid value '{value}' for {name}. Valid values: {valid_values}"

    return True, None


def validate_all_env_vars() -> List[str]:
    """Validate all MUSHAF environment variables.

    Returns:
        List of error messages (empty if all valid).
    """
    errors = []
    for name in ENV_VAR_DEFINITIONS:
        is_valid, error = validate_env_var(name, os.environ.get(name))
        if not is_valid:
            errors.append(error)
    return errors


def get_env_var(name: str, validate: bool = True) -> Optional[str]:
    """Get an environment variable with optional validation.

    Raises:
        ConfigurationError: If validate=True and the value is invalid.
    """
    value = os.environ.get(name)

    if validate and value is not None:
        is_valid, error = validate_env_var(name, value)
        if not is_valid:
            raise ConfigurationError(error, setting=name)

    if value is None and name in ENV_VAR_DEFINITIONS:
        return ENV_VAR_DEFINITIONS[name].get("default")

    return value


def get_env_info() -> Dict[str, Dict]:
    """Get information about all MUSHAF environment variables.

    Returns:
        Dictionary mapping env var names to description, value, validity and default.
    """
    info = {}
    for name, definition in ENV_VAR_DEFINITIONS.items():
        value = os.environ.get(name)
        is_valid, _ = validate_env_var(name, value)
        info[name] = {
            "description": definition.get("description", ""),
            "value": value,
            "is_set": value is not None,
            "valid": is_valid,
            "default": definition.get("default"),
        }
    return info


def get_provider_settings() -> ProviderSettings:
    """Build provider settings from the environment.

    Raises:
        ConfigurationError: If any provider variable is invalid.
    """
    return ProviderSettings(
        api_url=str(get_env_var("MUSHAF_API_URL")).rstrip("/"),
        timeout=float(get_env_var("MUSHAF_API_TIMEOUT")),
        retries=int(get_env_var("MUSHAF_API_RETRIES")),
        detail_cache_size=int(get_env_var("MUSHAF_DETAIL_CACHE_SIZE")),
    )


def get_log_level() -> str:
    """Get the configured log level name."""
    return str(get_env_var("MUSHAF_LOG_LEVEL")).upper()
