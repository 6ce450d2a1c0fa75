from .keys import KeyPair, generate_key_pair, load_public_key
from .hash import Hash, derive_address, is_valid_address
from .signature import SignatureManager

__all__ = [
    'KeyPair',
    'generate_key_pair',
    'load_public_key',
    'Hash',
    'derive_address',
    'is_valid_address',
    'SignatureManager',
]
