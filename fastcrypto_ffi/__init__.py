"""
fastcrypto_ffi - Hashing, hex codec và multi-scheme signing cho foreign caller
"""

from .ffi import (
    hash,
    hex_encode,
    hex_decode,
    HashType,
    FastCryptoError,
    GenericError,
    Ed25519KeyPairWrapper,
    Secp256k1KeyPairWrapper,
    Secp256r1KeyPairWrapper,
    BLS12381KeyPairWrapper,
)

__version__ = "0.1.0"

__all__ = [
    'hash', 'hex_encode', 'hex_decode', 'HashType',
    'FastCryptoError', 'GenericError',
    'Ed25519KeyPairWrapper', 'Secp256k1KeyPairWrapper',
    'Secp256r1KeyPairWrapper', 'BLS12381KeyPairWrapper',
]
