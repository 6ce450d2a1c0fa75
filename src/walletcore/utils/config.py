# src/walletcore/utils/config.py

class Config:
    # Key configuration
    RSA_KEY_SIZE = 2048
    MIN_RSA_KEY_SIZE = 2048  # 112-bit security floor
    RSA_PUBLIC_EXPONENT = 65537

    # Address configuration
    ADDRESS_LENGTH_BYTES = 20  # 40 hex characters
    MIN_ADDRESS_LENGTH_BYTES = 16
    MAX_ADDRESS_LENGTH_BYTES = 32  # full SHA-256 digest

    # Transaction configuration
    TRANSACTION_VERSION = 1
    GENESIS_SENDER = "0" * (ADDRESS_LENGTH_BYTES * 2)

    # Logging configuration
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    CONSOLE_LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
    LOG_LEVEL = "INFO"
    LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
    LOG_BACKUP_COUNT = 5

    @staticmethod
    def genesis_sender(length_bytes: int = ADDRESS_LENGTH_BYTES) -> str:
        """All-zero issuer address sized to match wallets with ``length_bytes`` addresses"""
        return "0" * (length_bytes * 2)
