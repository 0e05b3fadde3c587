"""
Boundary layer - Export surface cho foreign caller
"""

from fastcrypto_ffi.crypto.errors import FastCryptoError, GenericError
from fastcrypto_ffi.crypto.hashing import HashType
from .exports import (
    hash,
    hex_encode,
    hex_decode,
    Ed25519KeyPairWrapper,
    Secp256k1KeyPairWrapper,
    Secp256r1KeyPairWrapper,
    BLS12381KeyPairWrapper,
    WRAPPERS,
)

__all__ = [
    'hash', 'hex_encode', 'hex_decode', 'HashType',
    'FastCryptoError', 'GenericError',
    'Ed25519KeyPairWrapper', 'Secp256k1KeyPairWrapper',
    'Secp256r1KeyPairWrapper', 'BLS12381KeyPairWrapper', 'WRAPPERS',
]
