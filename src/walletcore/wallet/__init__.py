from .transaction import Transaction, TransactionKind
from .directory import KeyDirectory, InMemoryKeyDirectory
from .history import TransactionHistory
from .models import WalletInfo
from .wallet import Wallet

__all__ = [
    'Transaction',
    'TransactionKind',
    'KeyDirectory',
    'InMemoryKeyDirectory',
    'TransactionHistory',
    'WalletInfo',
    'Wallet',
]
