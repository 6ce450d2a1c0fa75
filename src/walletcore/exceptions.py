# src/walletcore/exceptions.py

class WalletCoreError(Exception):
    """Base exception class for walletcore errors"""
    pass

class ConfigurationError(WalletCoreError):
    """Raised when the wallet configuration is invalid"""
    pass

class KeyGenerationError(WalletCoreError):
    """Raised when a key pair cannot be generated. Fatal for the wallet instance."""
    pass

class WalletError(WalletCoreError):
    """Raised when wallet operations fail"""
    pass

class InsufficientFundsError(WalletError):
    """Raised when a send exceeds the current balance"""

    def __init__(self, amount, balance, message=None):
        self.amount = amount
        self.balance = balance
        super().__init__(message or f"Insufficient balance: requested {amount}, available {balance}")

class InvalidAmountError(InsufficientFundsError):
    """Raised when a send amount is negative or not an integer"""

    def __init__(self, amount, balance):
        super().__init__(amount, balance, f"Invalid amount: {amount!r}")

class DuplicateTransactionError(WalletError):
    """Raised when a transaction id is already in the wallet history"""
    pass

class MisdirectedTransactionError(WalletError):
    """Raised when an inbound transaction is addressed to another wallet"""
    pass

class TransactionError(WalletCoreError):
    """Raised when transaction operations fail"""
    pass

class TransactionFormatError(TransactionError):
    """Raised when a serialized transaction cannot be decoded"""
    pass

class InvalidSignatureError(TransactionError):
    """Raised when an inbound transaction fails signature verification"""
    pass

class UnknownSenderError(InvalidSignatureError):
    """Raised when the sender address cannot be resolved to a matching public key"""
    pass
