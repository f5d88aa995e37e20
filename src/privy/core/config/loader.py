"""Configuration loader module.

This module provides functions for loading configuration from a YAML file and
environment variables and transforming it into a validated PrivyConfig object.
"""

import os
import re
import threading
from typing import Any, Dict, List, Optional

from .exceptions import ConfigError
from .schema import PrivyConfig

_ENV_PATTERN = re.compile(r"\${([^}]+)}")

_config: Optional[PrivyConfig] = None
_config_lock = threading.Lock()


def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge dictionaries.

    Args:
        base: Base dictionary
        override: Dictionary with values that override the base

    Returns:
        Merged dictionary where override values take precedence
    """
    result = base.copy()

    for key, value in override.items():
        if (key in result and
                isinstance(result[key], dict) and
                isinstance(value, dict)):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value

    return result


def _substitute(value: str) -> str:
    return _ENV_PATTERN.sub(lambda match: os.environ.get(match.group(1), ""), value)


def resolve_env_vars(config: Any) -> Any:
    """Replace ${VAR} patterns with environment variables.

    Unset variables resolve to an empty string.

    Args:
        config: Configuration value (dict, list or scalar)

    Returns:
        Configuration with environment variables resolved
    """
    if isinstance(config, dict):
        return {key: resolve_env_vars(value) for key, value in config.items()}
    if isinstance(config, list):
        return [resolve_env_vars(item) for item in config]
    if isinstance(config, str) and "${" in config:
        return _substitute(config)
    return config


def load_yaml_file(path: str) -> Dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Dictionary containing configuration from YAML

    Raises:
        ConfigError: If file cannot be read or parsed
    """
    try:
        import yaml
    except ImportError:
        raise ConfigError("PyYAML is required for YAML configuration")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}")
    except OSError as e:
        raise ConfigError(f"Error reading {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {path}, got {type(data).__name__}")
    return data


def _normalize_env_key(env_key: str) -> List[str]:
    """Normalize environment variable key to configuration path.

    Args:
        env_key: Environment variable key without prefix (e.g., "ENSURE_FLOAT_TOLERANCE")

    Returns:
        List of path segments (e.g., ["ensure", "float_tolerance"])
    """
    path = env_key.lower().split("_")

    # Handle compound words that should stay together
    compound_words = ["float_tolerance", "decimal_tolerance"]

    i = 0
    while i < len(path) - 1:
        combined = f"{path[i]}_{path[i+1]}"
        if combined in compound_words:
            path[i] = combined
            path.pop(i + 1)
        else:
            i += 1

    return path


def _coerce(value: str) -> Any:
    lowered = value.lower()
    if lowered in ("true", "yes"):
        return True
    if lowered in ("false", "no"):
        return False
    if value.isdigit():
        return int(value)
    if value.replace(".", "", 1).isdigit():
        return float(value)
    return value


def load_from_env(prefix: str = "PRIVY") -> Dict[str, Any]:
    """Load configuration from environment variables with given prefix.

    ``PRIVY_CONFIG`` names the configuration file and is not a setting.

    Args:
        prefix: Prefix for environment variables to consider

    Returns:
        Dictionary containing configuration from environment
    """
    result: Dict[str, Any] = {}
    prefix_upper = prefix.upper()

    for key, value in os.environ.items():
        if not key.startswith(f"{prefix_upper}_") or key == f"{prefix_upper}_CONFIG":
            continue
        path = _normalize_env_key(key[len(prefix_upper) + 1:])

        current = result
        for part in path[:-1]:
            current = current.setdefault(part, {})
        current[path[-1]] = _coerce(value)

    return result


def load_config(
    file_path: Optional[str] = None,
    env_prefix: str = "PRIVY",
) -> PrivyConfig:
    """Load PrivyConfig from file and environment.

    Args:
        file_path: Path to config file (defaults to PRIVY_CONFIG from env or "privy.yaml")
        env_prefix: Prefix for environment variables

    Returns:
        Validated PrivyConfig instance

    Raises:
        ConfigError: On loading or validation failure
    """
    path = file_path or os.environ.get(f"{env_prefix}_CONFIG", "privy.yaml")

    config_data: Dict[str, Any] = {}
    if os.path.exists(path):
        config_data = merge_dicts(config_data, load_yaml_file(path))

    # Environment overrides file
    env_config = load_from_env(env_prefix)
    if env_config:
        config_data = merge_dicts(config_data, env_config)

    config_data = resolve_env_vars(config_data)

    try:
        return PrivyConfig.model_validate(config_data)
    except ValueError as e:
        raise ConfigError(f"Failed to load configuration: {e}") from e


def get_config() -> PrivyConfig:
    """Return the active configuration, loading it on first use."""
    global _config
    with _config_lock:
        if _config is None:
            _config = load_config()
        return _config


def set_config(config: PrivyConfig) -> None:
    """Replace the active configuration."""
    global _config
    with _config_lock:
        _config = config


def reset_config() -> None:
    """Forget the active configuration so the next access reloads it."""
    global _config
    with _config_lock:
        _config = None
