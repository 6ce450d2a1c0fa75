# src/walletcore/wallet/transaction.py
from typing import Any, Dict
from enum import Enum
import json
import time
import uuid
import logging

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError

from ..exceptions import TransactionFormatError
from ..utils.config import Config

logger = logging.getLogger(__name__)

class TransactionKind(str, Enum):
    TRANSFER = "transfer"
    ISSUANCE = "issuance"

def current_timestamp_ms() -> int:
    """Wall-clock time in integer milliseconds"""
    return int(time.time() * 1000)

class Transaction(BaseModel):
    """
    Signed value-transfer record.

    Records are frozen: a signed transaction is never mutated, only copied.
    The signature is detached and covers :meth:`signing_payload`, which is
    the JSON object of every other field keyed by wire name, with sorted
    keys, no whitespace and UTF-8 encoding.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    version: StrictInt = Config.TRANSACTION_VERSION
    kind: TransactionKind = TransactionKind.TRANSFER
    id: str = Field(default_factory=lambda: str(uuid.uuid4()), min_length=1)
    sender: str = Field(alias="from", min_length=1)
    recipient: str = Field(alias="to", min_length=1)
    amount: StrictInt = Field(ge=0)
    timestamp: StrictInt = Field(default_factory=current_timestamp_ms, ge=0)
    signature: str = ""

    @classmethod
    def transfer(cls, sender: str, recipient: str, amount: int) -> 'Transaction':
        """Create an unsigned transfer record"""
        return cls._build(sender=sender, recipient=recipient, amount=amount)

    @classmethod
    def issuance(cls, recipient: str, amount: int) -> 'Transaction':
        """
        Create a trusted-issuance record that seeds a wallet's balance.
        The genesis sender is sized to the recipient's address width.
        """
        return cls._build(
            kind=TransactionKind.ISSUANCE,
            sender=Config.genesis_sender(len(recipient) // 2) if isinstance(recipient, str) else None,
            recipient=recipient,
            amount=amount,
        )

    @classmethod
    def _build(cls, **fields) -> 'Transaction':
        try:
            return cls(**fields)
        except ValidationError as e:
            raise TransactionFormatError(f"Invalid transaction fields: {e}") from e

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Transaction':
        """Create transaction from its serialized form"""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise TransactionFormatError(f"Malformed transaction: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    def signing_payload(self) -> bytes:
        """Returns the bytes to be signed"""
        payload = self.model_dump(mode="json", by_alias=True, exclude={"signature"})
        return json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")

    def with_signature(self, signature: str) -> 'Transaction':
        logger.debug(f"Set signature for transaction {self.short_id}: {signature[:32]}...")
        return self.model_copy(update={"signature": signature})

    def is_issuance(self) -> bool:
        return self.kind == TransactionKind.ISSUANCE

    @property
    def short_id(self) -> str:
        return self.id[:8]

    def __str__(self) -> str:
        return f"Tx({self.short_id}: {self.sender[:8]}->{self.recipient[:8]}, {self.amount})"
