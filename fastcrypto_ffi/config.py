import json

from fastcrypto_ffi.crypto.errors import GenericError
from fastcrypto_ffi.utils.logger import LEVELS

DEFAULT_CONFIG = {
    "log_level": "warning",
    "log_file": None,
    "default_hash": "sha256",
    "default_scheme": "ed25519",
}


def load_config(config_file=None):
    """Load configuration from file, merge lên DEFAULT_CONFIG"""
    config = dict(DEFAULT_CONFIG)
    if config_file is None:
        return config

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise GenericError(f"Config file not found: {config_file}") from None
    except json.JSONDecodeError as e:
        raise GenericError(f"Invalid config file {config_file}: {e}") from e

    if not isinstance(data, dict):
        raise GenericError(f"Invalid config file {config_file}: expected a JSON object")

    for key in DEFAULT_CONFIG:
        if key in data:
            config[key] = data[key]

    if str(config["log_level"]).lower() not in LEVELS:
        raise GenericError(f"Invalid log_level: {config['log_level']}")
    return config
