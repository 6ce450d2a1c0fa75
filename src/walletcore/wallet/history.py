# src/walletcore/wallet/history.py
from typing import Iterator, List, Set, Tuple, Union

from .transaction import Transaction

class TransactionHistory:
    """Append-only, insertion-ordered record of accepted transactions."""

    def __init__(self):
        self._transactions: List[Transaction] = []
        self._ids: Set[str] = set()

    def append(self, transaction: Transaction) -> None:
        self._transactions.append(transaction)
        self._ids.add(transaction.id)

    def snapshot(self) -> Tuple[Transaction, ...]:
        return tuple(self._transactions)

    def outgoing(self, address: str) -> Tuple[Transaction, ...]:
        return tuple(tx for tx in self._transactions if tx.sender == address)

    def incoming(self, address: str) -> Tuple[Transaction, ...]:
        return tuple(tx for tx in self._transactions if tx.recipient == address)

    def balance_for(self, address: str) -> int:
        """Balance implied by the history: everything received minus everything sent"""
        received = sum(tx.amount for tx in self._transactions if tx.recipient == address)
        sent = sum(tx.amount for tx in self._transactions if tx.sender == address)
        return received - sent

    def __contains__(self, item: Union[Transaction, str]) -> bool:
        if isinstance(item, Transaction):
            item = item.id
        return item in self._ids

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._transactions)
