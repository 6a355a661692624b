"""
Configuration management module.

This module provides the runtime settings for the Babysquares server. Values
come from environment variables (a .env file is loaded by main.py through
python-dotenv) layered over built-in defaults.
"""

import os
from typing import Any, Dict, Mapping, Optional

TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

# environment variable -> config key
ENV_KEYS = {
    "HOST": "host",
    "PORT": "port",
    "LOG_LEVEL": "log_level",
}


def get_default_config() -> Dict[str, Any]:
    """Get default configuration structure.

    Returns:
        Default configuration dictionary.
    """
    return {
        "host": DEFAULT_HOST,
        "port": DEFAULT_PORT,
        "log_level": DEFAULT_LOG_LEVEL,
    }


def load_config(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Load configuration from the environment.

    Args:
        environ: Mapping to read variables from. Defaults to os.environ.

    Returns:
        Configuration dictionary with all fields validated.

    Raises:
        ValueError: If PORT or LOG_LEVEL holds an invalid value.
    """
    if environ is None:
        environ = os.environ

    config = get_default_config()
    for env_name, key in ENV_KEYS.items():
        value = environ.get(env_name)
        if value:
            config[key] = value

    return ensure_config_fields(config)


def ensure_config_fields(config: Dict[str, Any]) -> Dict[str, Any]:
    """Fill in missing fields and normalise the types of present ones.

    Args:
        config: Configuration dictionary to update.

    Returns:
        Updated configuration dictionary.

    Raises:
        ValueError: If a field cannot be normalised.
    """
    for key, default in get_default_config().items():
        config.setdefault(key, default)

    config["host"] = str(config["host"]).strip() or DEFAULT_HOST
    config["port"] = sanitise_port(config["port"])

    level = str(config["log_level"]).strip().upper()
    if level not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Invalid log level: {config['log_level']}. Must be one of {sorted(VALID_LOG_LEVELS)}"
        )
    config["log_level"] = level

    return config


def sanitise_port(value: Any) -> int:
    """Convert a port setting to an int in the valid TCP range.

    Raises:
        ValueError: If the value is not an integer between 1 and 65535.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid port: {value!r}")
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid port: {value!r}")
    if not 1 <= port <= 65535:
        raise ValueError(f"Port out of range: {port}")
    return port
