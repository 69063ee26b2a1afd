"""User configuration for lazycommit.

Handles the YAML file stored at ~/.lazycommit.yaml. The file is a flat
mapping of string keys to string values; only ``openai_api_key`` is read.
"""

import os
import stat
from pathlib import Path
from typing import Any, Dict, Optional

import typer
import yaml

from lazycommit.config import API_KEY_CONFIG_KEY, API_KEY_ENV_VAR, CONFIG_FILE_NAME


class GlobalConfigError(Exception):
    """Raised when there's an error with the user configuration file."""

    pass


# None means ~/.lazycommit.yaml, resolved on each call
_CONFIG_FILE: Optional[Path] = None


def get_config_file_path() -> Path:
    """Get path to the user configuration file.

    Returns:
        Path to ~/.lazycommit.yaml

    Raises:
        GlobalConfigError: If the home directory cannot be determined.
    """
    if _CONFIG_FILE is not None:
        return _CONFIG_FILE
    try:
        return Path.home() / CONFIG_FILE_NAME
    except RuntimeError as e:
        raise GlobalConfigError(f"Error getting home directory: {e}")


def load_global_config() -> Dict[str, Any]:
    """Load configuration from ~/.lazycommit.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        GlobalConfigError: If the file cannot be read or is not a YAML mapping.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            content = f.read()
    except OSError as e:
        raise GlobalConfigError(f"Error reading config file: {e}")

    try:
        # BaseLoader keeps every scalar a string
        config = yaml.load(content, Loader=yaml.BaseLoader) or {}
    except yaml.YAMLError as e:
        raise GlobalConfigError(f"Error parsing config file: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(
            f"Error parsing config file: expected a mapping in {config_file}"
        )
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Save configuration to ~/.lazycommit.yaml.

    The file holds a credential, so it is restricted to owner read/write.

    Args:
        config: Configuration dictionary to save.
    """
    config_file = get_config_file_path()

    try:
        with open(config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
        os.chmod(config_file, stat.S_IRUSR | stat.S_IWUSR)
    except OSError as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def save_api_key(api_key: str) -> None:
    """Store the OpenAI API key, keeping any other keys in the file.

    Args:
        api_key: The API key value.
    """
    config = load_global_config()
    config[API_KEY_CONFIG_KEY] = api_key
    save_global_config(config)


def get_api_key() -> str:
    """Resolve the OpenAI API key.

    The OPENAI_TOKEN environment variable takes precedence. Otherwise the key
    is read from ~/.lazycommit.yaml. Problems with the file are reported and
    treated as "not found".

    Returns:
        The API key, or an empty string if none was found.
    """
    api_key = os.environ.get(API_KEY_ENV_VAR)
    if api_key:
        return api_key

    try:
        config = load_global_config()
    except GlobalConfigError as e:
        typer.echo(str(e))
        return ""

    value = config.get(API_KEY_CONFIG_KEY, "")
    if not isinstance(value, str):
        typer.echo(
            f"Error parsing config file: {API_KEY_CONFIG_KEY} must be a string"
        )
        return ""
    return value


def is_configured() -> bool:
    """Check if lazycommit has been configured.

    Returns:
        True if ~/.lazycommit.yaml exists, False otherwise.
    """
    return get_config_file_path().exists()
