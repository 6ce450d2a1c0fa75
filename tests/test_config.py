# tests/test_config.py
import logging
import os

import pytest
import yaml

from walletcore.config.wallet_config import DEFAULT_CONFIG, WalletConfig
from walletcore.exceptions import ConfigurationError
from walletcore.utils.config import Config
from walletcore.utils.logger import get_logger, setup_logging

class TestWalletConfig:
    @pytest.fixture
    def config_path(self, tmp_path):
        return str(tmp_path / "wallet.yaml")

    def test_defaults_without_file(self):
        config = WalletConfig()
        assert config.key_size == Config.RSA_KEY_SIZE
        assert config.public_exponent == Config.RSA_PUBLIC_EXPONENT
        assert config.address_length == Config.ADDRESS_LENGTH_BYTES
        assert config.log_level == "INFO"
        assert config.log_dir is None

    def test_missing_file_uses_defaults(self, config_path):
        config = WalletConfig(config_path)
        assert config.config == DEFAULT_CONFIG
        assert not os.path.exists(config_path)

    def test_file_overrides_defaults(self, config_path):
        with open(config_path, "w") as f:
            yaml.safe_dump({"crypto": {"key_size": 3072}, "logging": {"level": "DEBUG"}}, f)

        config = WalletConfig(config_path)
        assert config.key_size == 3072
        assert config.public_exponent == Config.RSA_PUBLIC_EXPONENT
        assert config.log_level == "DEBUG"

    def test_defaults_are_not_shared(self):
        WalletConfig().update("crypto.key_size", 4096)
        assert WalletConfig().key_size == Config.RSA_KEY_SIZE

    def test_empty_file(self, config_path):
        open(config_path, "w").close()
        assert WalletConfig(config_path).key_size == Config.RSA_KEY_SIZE

    def test_invalid_yaml(self, config_path):
        with open(config_path, "w") as f:
            f.write("crypto: [unclosed")
        with pytest.raises(ConfigurationError):
            WalletConfig(config_path)

    def test_non_mapping(self, config_path):
        with open(config_path, "w") as f:
            f.write("- a\n- b\n")
        with pytest.raises(ConfigurationError):
            WalletConfig(config_path)

    @pytest.mark.parametrize("key,value", [
        ("crypto.key_size", 1024),
        ("crypto.key_size", "2048"),
        ("address.length_bytes", 8),
        ("address.length_bytes", 33),
    ])
    def test_validation(self, key, value):
        with pytest.raises(ConfigurationError):
            WalletConfig().update(key, value)

    def test_get(self):
        config = WalletConfig()
        assert config.get("crypto.key_size") == 2048
        assert config.get("crypto.missing", "fallback") == "fallback"
        assert config.get("logging.level.deeper") is None

    def test_save_and_reload(self, config_path):
        config = WalletConfig(config_path)
        config.update("address.length_bytes", 24)
        config.save()

        assert WalletConfig(config_path).address_length == 24

    def test_save_without_path(self):
        with pytest.raises(ConfigurationError):
            WalletConfig().save()

class TestLogging:
    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers = handlers
        root.setLevel(level)

    def test_get_logger_adds_single_handler(self):
        logger = get_logger("walletcore.test.single")
        get_logger("walletcore.test.single")
        assert len(logger.handlers) == 1
        assert logger.level == logging.INFO

    def test_get_logger_level(self):
        logger = get_logger("walletcore.test.level", logging.DEBUG)
        assert logger.level == logging.DEBUG

    def test_setup_logging_writes_file(self, tmp_path):
        setup_logging("DEBUG", str(tmp_path / "logs"))
        logging.getLogger("walletcore.test").debug("hello")

        files = os.listdir(tmp_path / "logs")
        assert len(files) == 1
        assert files[0].startswith("walletcore_")
        for handler in logging.getLogger().handlers:
            handler.flush()
        with open(tmp_path / "logs" / files[0]) as f:
            assert "hello" in f.read()

    def test_setup_logging_unknown_level(self):
        with pytest.raises(ConfigurationError):
            setup_logging("LOUD")
