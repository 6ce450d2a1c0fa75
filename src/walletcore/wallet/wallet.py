# src/walletcore/wallet/wallet.py
from typing import Optional, Tuple
from threading import RLock
import logging

from cryptography.hazmat.primitives.asymmetric import rsa

from ..config.wallet_config import WalletConfig
from ..crypto.hash import derive_address, is_valid_address
from ..crypto.keys import KeyPair
from ..crypto.signature import SignatureManager
from ..exceptions import (
    ConfigurationError,
    DuplicateTransactionError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidSignatureError,
    MisdirectedTransactionError,
    TransactionFormatError,
    UnknownSenderError,
)
from ..utils.config import Config
from .directory import InMemoryKeyDirectory, KeyDirectory
from .history import TransactionHistory
from .models import WalletInfo
from .transaction import Transaction

logger = logging.getLogger(__name__)

class Wallet:
    """
    Self-custodied wallet: an RSA key pair, a balance and an append-only
    transaction history.

    State only changes through :meth:`send_funds`, :meth:`receive_funds` and
    :meth:`accept_issuance`. Each runs under the wallet's lock and either
    applies completely or raises without touching the balance or history.
    Inbound transfers are verified against the *sender's* public key, which
    is looked up in the wallet's :class:`KeyDirectory`.
    """

    def __init__(
        self,
        key_directory: Optional[KeyDirectory] = None,
        key_pair: Optional[KeyPair] = None,
        config: Optional[WalletConfig] = None
    ):
        self.config = config or WalletConfig()
        self.key_pair = key_pair or KeyPair.generate(
            key_size=self.config.key_size,
            public_exponent=self.config.public_exponent
        )
        self.signature_manager = SignatureManager(self.key_pair)
        self.address = derive_address(self.key_pair.public_key, self.config.address_length)
        if key_directory is None:
            key_directory = InMemoryKeyDirectory(self.config.address_length)
        elif key_directory.address_length != self.config.address_length:
            raise ConfigurationError(
                f"Key directory uses {key_directory.address_length}-byte addresses, "
                f"wallet is configured for {self.config.address_length}"
            )
        self.key_directory = key_directory
        self.key_directory.register(self.key_pair.public_key)

        self._balance = 0
        self._history = TransactionHistory()
        self._lock = RLock()
        logger.info(f"Created wallet {self.address}")

    @property
    def public_key(self) -> rsa.RSAPublicKey:
        return self.key_pair.public_key

    def get_balance(self) -> int:
        with self._lock:
            return self._balance

    def get_address(self) -> str:
        return self.address

    def get_transaction_history(self) -> Tuple[Transaction, ...]:
        """Get wallet transaction history, oldest first"""
        with self._lock:
            return self._history.snapshot()

    def send_funds(self, recipient: str, amount: int) -> Transaction:
        """
        Create, sign and record an outbound transfer.

        Raises:
            InvalidAmountError: amount is negative or not an integer.
            InsufficientFundsError: amount exceeds the current balance.
            MisdirectedTransactionError: recipient is this wallet.
            TransactionFormatError: recipient is not a well-formed address.
        """
        if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
            raise InvalidAmountError(amount, self.get_balance())
        if not is_valid_address(recipient, self.config.address_length):
            raise TransactionFormatError(f"Invalid recipient address: {recipient!r}")
        if recipient == self.address:
            raise MisdirectedTransactionError("Cannot send funds to the wallet's own address")

        with self._lock:
            if amount > self._balance:
                logger.warning(
                    f"Rejected send of {amount} from {self.address}: balance is {self._balance}"
                )
                raise InsufficientFundsError(amount, self._balance)

            unsigned = Transaction.transfer(self.address, recipient, amount)
            transaction = unsigned.with_signature(
                self.signature_manager.sign(unsigned.signing_payload())
            )

            self._history.append(transaction)
            self._balance -= amount
            balance = self._balance

        logger.info(f"Sent {transaction}; balance {balance}")
        return transaction

    def receive_funds(self, transaction: Transaction) -> None:
        """
        Verify and credit an inbound transfer.

        Raises:
            InvalidSignatureError: signature does not verify, or the record
                is an issuance that belongs on the trusted path.
            UnknownSenderError: the sender address cannot be resolved.
            MisdirectedTransactionError: the record is addressed elsewhere.
            DuplicateTransactionError: the id is already in the history.
        """
        transaction = transaction.model_copy()

        if transaction.is_issuance():
            raise InvalidSignatureError(
                f"Issuance transaction {transaction.short_id} must be accepted through accept_issuance"
            )
        self._check_addressed_to_self(transaction)

        public_key = self._resolve_sender_key(transaction.sender)
        if not SignatureManager.verify_signature(
            transaction.signing_payload(), transaction.signature, public_key
        ):
            logger.warning(f"Invalid signature on transaction {transaction.short_id} from {transaction.sender}")
            raise InvalidSignatureError(f"Invalid signature on transaction {transaction.id}")

        with self._lock:
            balance = self._credit(transaction)

        logger.info(f"Received {transaction}; balance {balance}")

    def accept_issuance(self, transaction: Transaction) -> None:
        """
        Credit a trusted-issuance (genesis) record.

        No signature is checked on this path; it exists only to seed a
        balance and accepts nothing but issuance records from the genesis
        sender.
        """
        transaction = transaction.model_copy()

        if not transaction.is_issuance() or transaction.sender != Config.genesis_sender(self.config.address_length):
            raise InvalidSignatureError(
                f"Transaction {transaction.short_id} is not a trusted issuance"
            )
        self._check_addressed_to_self(transaction)

        with self._lock:
            balance = self._credit(transaction)

        logger.info(f"Accepted issuance {transaction}; balance {balance}")

    def verify_own_transaction(self, transaction: Transaction) -> bool:
        """Check a record's signature against this wallet's own public key"""
        return self.signature_manager.verify(transaction.signing_payload(), transaction.signature)

    def export_public_key(self) -> str:
        """Export public key"""
        return self.key_pair.export_public_key()

    def to_info(self) -> WalletInfo:
        with self._lock:
            return WalletInfo(
                address=self.address,
                public_key=self.export_public_key(),
                balance=self._balance,
                transactions=len(self._history),
            )

    def _credit(self, transaction: Transaction) -> int:
        # caller holds the lock
        if transaction in self._history:
            raise DuplicateTransactionError(f"Transaction {transaction.id} already recorded")
        self._history.append(transaction)
        self._balance += transaction.amount
        return self._balance

    def _check_addressed_to_self(self, transaction: Transaction):
        if transaction.recipient != self.address:
            raise MisdirectedTransactionError(
                f"Transaction {transaction.short_id} is addressed to {transaction.recipient}, not {self.address}"
            )

    def _resolve_sender_key(self, sender: str) -> rsa.RSAPublicKey:
        public_key = self.key_directory.resolve(sender)
        if public_key is None:
            raise UnknownSenderError(f"No public key known for sender {sender}")
        if derive_address(public_key, self.config.address_length) != sender:
            raise UnknownSenderError(f"Resolved public key does not match sender {sender}")
        return public_key

    def __str__(self) -> str:
        """String representation of wallet"""
        return f"Wallet(address={self.address})"
