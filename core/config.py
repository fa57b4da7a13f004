"""Configuration defaults and the user configuration file.

This module handles:
- Device and command defaults
- Loading/saving the user configuration file (~/.keylight/config.json)
"""

import json
from pathlib import Path

from core.errors import ConfigError

# Fallback device address when --ip-address is omitted and nothing is configured
DEFAULT_IP_ADDRESS = '192.168.0.16'
DEFAULT_PORT = 9123

# Seconds to wait for each HTTP round trip
REQUEST_TIMEOUT = 5

DEFAULT_BRIGHTNESS = 10
DEFAULT_TEMPERATURE = 3000

# Range the light accepts, in Kelvin and in device units
MIN_TEMPERATURE_KELVIN = 2900
MAX_TEMPERATURE_KELVIN = 7000
MIN_TEMPERATURE_DEVICE = 143
MAX_TEMPERATURE_DEVICE = 344

USER_CONFIG_FILE = Path.home() / '.keylight' / 'config.json'


def load_config() -> dict:
    """Load the user configuration file.

    Returns:
        Configuration dict, empty if the file doesn't exist

    Raises:
        ConfigError: If the file can't be read or isn't a JSON object
    """
    if not USER_CONFIG_FILE.exists():
        return {}

    try:
        with open(USER_CONFIG_FILE, 'r') as f:
            config = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Can't read {USER_CONFIG_FILE}: {e}", USER_CONFIG_FILE) from e

    if not isinstance(config, dict):
        raise ConfigError(f"{USER_CONFIG_FILE} must contain a JSON object", USER_CONFIG_FILE)
    return config


def save_config(config: dict):
    """Save configuration to the user configuration file.

    Args:
        config: Configuration dict to save
    """
    USER_CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)

    with open(USER_CONFIG_FILE, 'w') as f:
        json.dump(config, f, indent=2)


def get_default_ip_address() -> str:
    """Return the configured device address, or DEFAULT_IP_ADDRESS."""
    return load_config().get('ip_address') or DEFAULT_IP_ADDRESS
