# src/walletcore/crypto/hash.py
from typing import Union
import hashlib
import re
from cryptography.hazmat.primitives.asymmetric import rsa

from .keys import load_public_key, public_key_to_der
from ..utils.config import Config

_HEX_RE = re.compile(r"^[0-9a-f]+$")

class Hash:
    @staticmethod
    def hash_public_key(public_key: Union[str, bytes, rsa.RSAPublicKey]) -> str:
        """
        Create SHA-256 hash of a public key's DER encoding.
        PEM input is parsed first so both forms hash identically.
        """
        if not isinstance(public_key, rsa.RSAPublicKey):
            public_key = load_public_key(public_key)
        return hashlib.sha256(public_key_to_der(public_key)).hexdigest()

    @staticmethod
    def hash_bytes(data: bytes) -> str:
        """
        Create SHA-256 hash of raw bytes
        """
        return hashlib.sha256(data).hexdigest()


def derive_address(
    public_key: Union[str, bytes, rsa.RSAPublicKey],
    length_bytes: int = Config.ADDRESS_LENGTH_BYTES
) -> str:
    """
    Derive the wallet address for a public key.

    The address is the first ``length_bytes`` bytes of SHA-256 over the DER
    SubjectPublicKeyInfo encoding, rendered as lowercase hex. The same key
    always yields the same address.
    """
    if not Config.MIN_ADDRESS_LENGTH_BYTES <= length_bytes <= Config.MAX_ADDRESS_LENGTH_BYTES:
        raise ValueError(
            f"Address length must be between {Config.MIN_ADDRESS_LENGTH_BYTES} "
            f"and {Config.MAX_ADDRESS_LENGTH_BYTES} bytes, got {length_bytes}"
        )
    return Hash.hash_public_key(public_key)[:length_bytes * 2]


def is_valid_address(value: object, length_bytes: int = Config.ADDRESS_LENGTH_BYTES) -> bool:
    """Check that a value has the shape of a derived address"""
    return (
        isinstance(value, str) and
        len(value) == length_bytes * 2 and
        bool(_HEX_RE.match(value))
    )
