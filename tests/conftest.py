# tests/conftest.py
import pytest

from walletcore.crypto.keys import KeyPair
from walletcore.wallet.directory import InMemoryKeyDirectory
from walletcore.wallet.transaction import Transaction
from walletcore.wallet.wallet import Wallet

@pytest.fixture(scope="session")
def key_pair():
    """RSA generation is slow, so one pair is shared by the read-only crypto tests"""
    return KeyPair.generate()

@pytest.fixture(scope="session")
def other_key_pair():
    return KeyPair.generate()

@pytest.fixture
def directory():
    return InMemoryKeyDirectory()

@pytest.fixture
def wallet_a(directory):
    return Wallet(key_directory=directory)

@pytest.fixture
def wallet_b(directory):
    return Wallet(key_directory=directory)

@pytest.fixture
def funded_a(wallet_a):
    wallet_a.accept_issuance(Transaction.issuance(wallet_a.get_address(), 1000))
    return wallet_a
