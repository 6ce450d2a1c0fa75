# Crypto
from .crypto import KeyPair, SignatureManager, derive_address, generate_key_pair

# Wallet
from .wallet import (
    InMemoryKeyDirectory,
    KeyDirectory,
    Transaction,
    TransactionHistory,
    TransactionKind,
    Wallet,
    WalletInfo,
)

# Config
from .config import WalletConfig

# Errors
from .exceptions import (
    WalletCoreError,
    ConfigurationError,
    KeyGenerationError,
    WalletError,
    InsufficientFundsError,
    InvalidAmountError,
    DuplicateTransactionError,
    MisdirectedTransactionError,
    TransactionError,
    TransactionFormatError,
    InvalidSignatureError,
    UnknownSenderError,
)

__version__ = "0.1.0"

__all__ = [
    # Crypto
    "KeyPair",
    "SignatureManager",
    "derive_address",
    "generate_key_pair",
    # Wallet
    "InMemoryKeyDirectory",
    "KeyDirectory",
    "Transaction",
    "TransactionHistory",
    "TransactionKind",
    "Wallet",
    "WalletInfo",
    # Config
    "WalletConfig",
    # Errors
    "WalletCoreError",
    "ConfigurationError",
    "KeyGenerationError",
    "WalletError",
    "InsufficientFundsError",
    "InvalidAmountError",
    "DuplicateTransactionError",
    "MisdirectedTransactionError",
    "TransactionError",
    "TransactionFormatError",
    "InvalidSignatureError",
    "UnknownSenderError",
]
