# src/walletcore/crypto/keys.py
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives import serialization
from typing import Optional
import logging

from ..exceptions import KeyGenerationError
from ..utils.config import Config

logger = logging.getLogger(__name__)

class KeyPair:
    """
    RSA key pair owned by a single wallet.

    The private key never leaves this object: there is no export for it and
    it is excluded from ``repr``. Only the public half is exposed.
    """

    def __init__(self, private_key: rsa.RSAPrivateKey):
        self._private_key = private_key
        self.public_key = private_key.public_key()

    @classmethod
    def generate(
        cls,
        key_size: int = Config.RSA_KEY_SIZE,
        public_exponent: int = Config.RSA_PUBLIC_EXPONENT
    ) -> 'KeyPair':
        """Generate a new keypair"""
        if key_size < Config.MIN_RSA_KEY_SIZE:
            raise KeyGenerationError(
                f"RSA key size {key_size} is below the minimum of {Config.MIN_RSA_KEY_SIZE} bits"
            )
        try:
            private_key = rsa.generate_private_key(
                public_exponent=public_exponent,
                key_size=key_size
            )
        except (ValueError, UnsupportedAlgorithm, OSError) as e:
            raise KeyGenerationError(f"Unable to generate RSA key pair: {e}") from e

        logger.debug(f"Generated RSA-{key_size} key pair")
        return cls(private_key)

    @property
    def private_key(self) -> rsa.RSAPrivateKey:
        return self._private_key

    @property
    def key_size(self) -> int:
        return self.public_key.key_size

    def public_key_der(self) -> bytes:
        """Canonical byte form of the public key (DER SubjectPublicKeyInfo)"""
        return public_key_to_der(self.public_key)

    def export_public_key(self) -> str:
        """Export public key in PEM format"""
        return self.public_key.public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo
        ).decode()

    def __repr__(self) -> str:
        return f"KeyPair(rsa-{self.key_size})"


def generate_key_pair(
    key_size: int = Config.RSA_KEY_SIZE,
    public_exponent: int = Config.RSA_PUBLIC_EXPONENT
) -> KeyPair:
    return KeyPair.generate(key_size=key_size, public_exponent=public_exponent)


def public_key_to_der(public_key: rsa.RSAPublicKey) -> bytes:
    return public_key.public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo
    )


def load_public_key(data: Optional[str | bytes]) -> rsa.RSAPublicKey:
    """Load an RSA public key from PEM text or bytes"""
    if isinstance(data, str):
        data = data.encode()
    if not data:
        raise ValueError("Empty public key")
    public_key = serialization.load_pem_public_key(data)
    if not isinstance(public_key, rsa.RSAPublicKey):
        raise ValueError("Public key is not an RSA key")
    return public_key
