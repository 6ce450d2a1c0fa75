# File: src/walletcore/config/wallet_config.py

import copy
import os
from typing import Any, Dict, Optional

import yaml

from ..exceptions import ConfigurationError
from ..utils.config import Config

DEFAULT_CONFIG: Dict[str, Any] = {
    "crypto": {
        "key_size": Config.RSA_KEY_SIZE,
        "public_exponent": Config.RSA_PUBLIC_EXPONENT,
    },
    "address": {
        "length_bytes": Config.ADDRESS_LENGTH_BYTES,
    },
    "logging": {
        "level": Config.LOG_LEVEL,
        "log_dir": None,
    },
}

def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base

class WalletConfig:
    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path
        self.config = self._load_config()
        self.validate()

    def _load_config(self) -> Dict[str, Any]:
        config = copy.deepcopy(DEFAULT_CONFIG)
        if not self.config_path or not os.path.exists(self.config_path):
            return config

        try:
            with open(self.config_path, 'r') as f:
                loaded = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {self.config_path}: {e}") from e

        if not isinstance(loaded, dict):
            raise ConfigurationError(f"{self.config_path} must contain a mapping")
        return _merge(config, loaded)

    def validate(self):
        """Check the loaded values against the security floors."""
        key_size = self.get("crypto.key_size")
        if not isinstance(key_size, int) or key_size < Config.MIN_RSA_KEY_SIZE:
            raise ConfigurationError(
                f"crypto.key_size must be an integer >= {Config.MIN_RSA_KEY_SIZE}, got {key_size!r}"
            )

        length = self.get("address.length_bytes")
        if (not isinstance(length, int) or
                not Config.MIN_ADDRESS_LENGTH_BYTES <= length <= Config.MAX_ADDRESS_LENGTH_BYTES):
            raise ConfigurationError(
                f"address.length_bytes must be between {Config.MIN_ADDRESS_LENGTH_BYTES} "
                f"and {Config.MAX_ADDRESS_LENGTH_BYTES}, got {length!r}"
            )

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        try:
            keys = key.split('.')
            value = self.config
            for k in keys:
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def update(self, key: str, value: Any):
        """Update configuration value."""
        keys = key.split('.')
        config = self.config
        for k in keys[:-1]:
            config = config.setdefault(k, {})
        config[keys[-1]] = value
        self.validate()

    def save(self, path: Optional[str] = None):
        path = path or self.config_path
        if not path:
            raise ConfigurationError("No configuration path to save to")
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, 'w') as f:
            yaml.safe_dump(self.config, f)

    @property
    def key_size(self) -> int:
        return self.get("crypto.key_size")

    @property
    def public_exponent(self) -> int:
        return self.get("crypto.public_exponent")

    @property
    def address_length(self) -> int:
        return self.get("address.length_bytes")

    @property
    def log_level(self) -> str:
        return self.get("logging.level")

    @property
    def log_dir(self) -> Optional[str]:
        return self.get("logging.log_dir")
