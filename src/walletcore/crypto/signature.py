#src/walletcore/crypto/signature.py
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from .keys import KeyPair

def _pss() -> padding.PSS:
    return padding.PSS(
        mgf=padding.MGF1(hashes.SHA256()),
        salt_length=padding.PSS.MAX_LENGTH
    )

class SignatureManager:
    """
    Signing capability bound to one key pair.

    Signatures are RSA-PSS over SHA-256, rendered as lowercase hex.
    """

    def __init__(self, key_pair: KeyPair):
        self.key_pair = key_pair

    @property
    def public_key(self) -> rsa.RSAPublicKey:
        return self.key_pair.public_key

    def sign(self, payload: bytes) -> str:
        """Create a detached signature for ``payload``"""
        signature = self.key_pair.private_key.sign(payload, _pss(), hashes.SHA256())
        return signature.hex()

    def verify(self, payload: bytes, signature: str) -> bool:
        """Verify a signature against this manager's own public key"""
        return self.verify_signature(payload, signature, self.public_key)

    @staticmethod
    def verify_signature(payload: bytes, signature: str, public_key: rsa.RSAPublicKey) -> bool:
        """Verify a detached signature using a public key"""
        if not signature:
            return False
        try:
            signature_bytes = bytes.fromhex(signature)
        except (ValueError, TypeError):
            return False
        try:
            public_key.verify(signature_bytes, payload, _pss(), hashes.SHA256())
            return True
        except InvalidSignature:
            return False
