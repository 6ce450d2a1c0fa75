# src/walletcore/wallet/directory.py
from abc import ABC, abstractmethod
from threading import Lock
from typing import Dict, Optional
import logging

from cryptography.hazmat.primitives.asymmetric import rsa

from ..crypto.hash import derive_address
from ..utils.config import Config

logger = logging.getLogger(__name__)

class KeyDirectory(ABC):
    """Resolves an address to the public key that produced it."""

    # width, in bytes, of the addresses this directory derives and serves
    address_length: int = Config.ADDRESS_LENGTH_BYTES

    @abstractmethod
    def resolve(self, address: str) -> Optional[rsa.RSAPublicKey]:
        """Return the public key for ``address``, or None when unknown"""

    @abstractmethod
    def register(self, public_key: rsa.RSAPublicKey) -> str:
        """Publish a public key and return its address"""


class InMemoryKeyDirectory(KeyDirectory):
    """
    Process-local directory. Addresses are derived from the registered keys,
    so an entry can never point at a key that does not hash to it.
    """

    def __init__(self, address_length: int = Config.ADDRESS_LENGTH_BYTES):
        self.address_length = address_length
        self._keys: Dict[str, rsa.RSAPublicKey] = {}
        self._lock = Lock()

    def register(self, public_key: rsa.RSAPublicKey) -> str:
        address = derive_address(public_key, self.address_length)
        with self._lock:
            self._keys[address] = public_key
        logger.debug(f"Registered public key for {address}")
        return address

    def resolve(self, address: str) -> Optional[rsa.RSAPublicKey]:
        with self._lock:
            return self._keys.get(address)

    def __contains__(self, address: object) -> bool:
        with self._lock:
            return address in self._keys

    def __len__(self) -> int:
        with self._lock:
            return len(self._keys)
