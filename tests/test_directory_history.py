# tests/test_directory_history.py
import pytest

from walletcore.crypto.hash import derive_address
from walletcore.wallet.directory import InMemoryKeyDirectory
from walletcore.wallet.history import TransactionHistory
from walletcore.wallet.transaction import Transaction

class TestInMemoryKeyDirectory:
    def test_register_and_resolve(self, key_pair):
        directory = InMemoryKeyDirectory()
        address = directory.register(key_pair.public_key)

        assert address == derive_address(key_pair.public_key)
        assert directory.resolve(address) is key_pair.public_key
        assert address in directory
        assert len(directory) == 1

    def test_unknown_address(self):
        directory = InMemoryKeyDirectory()
        assert directory.resolve("f" * 40) is None
        assert "f" * 40 not in directory

    def test_register_is_idempotent(self, key_pair):
        directory = InMemoryKeyDirectory()
        directory.register(key_pair.public_key)
        directory.register(key_pair.public_key)
        assert len(directory) == 1

    def test_address_length(self, key_pair):
        directory = InMemoryKeyDirectory(address_length=32)
        assert len(directory.register(key_pair.public_key)) == 64

class TestTransactionHistory:
    @pytest.fixture
    def history(self):
        history = TransactionHistory()
        history.append(Transaction(id="1", sender="x" * 40, recipient="me", amount=100))
        history.append(Transaction(id="2", sender="me", recipient="y" * 40, amount=30))
        history.append(Transaction(id="3", sender="z" * 40, recipient="me", amount=5))
        return history

    def test_order_is_preserved(self, history):
        assert [tx.id for tx in history] == ["1", "2", "3"]
        assert len(history) == 3

    def test_snapshot_is_immutable(self, history):
        snapshot = history.snapshot()
        assert isinstance(snapshot, tuple)
        with pytest.raises(AttributeError):
            snapshot.append(None)
        history.append(Transaction(id="4", sender="me", recipient="q", amount=1))
        assert len(snapshot) == 3

    def test_contains(self, history):
        assert "2" in history
        assert history.snapshot()[0] in history
        assert "9" not in history

    def test_directions(self, history):
        assert [tx.id for tx in history.incoming("me")] == ["1", "3"]
        assert [tx.id for tx in history.outgoing("me")] == ["2"]

    def test_balance_for(self, history):
        assert history.balance_for("me") == 75
        assert history.balance_for("nobody") == 0
