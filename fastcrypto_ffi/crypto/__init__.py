"""
Cryptography layer - Hashing, Hex, Errors, Key pairs
"""

from .errors import FastCryptoError, GenericError, map_error, reportable
from .buffers import as_bytes
from .hashing import HashType, Hasher, hash
from .hexcodec import hex_encode, hex_decode
from .keys import KeyPair, Ed25519KeyPair, Secp256k1KeyPair, Secp256r1KeyPair
from .bls import BLS12381KeyPair
from .schemes import SCHEMES, scheme_for

__all__ = [
    'FastCryptoError', 'GenericError', 'map_error', 'reportable', 'as_bytes',
    'HashType', 'Hasher', 'hash',
    'hex_encode', 'hex_decode',
    'KeyPair', 'Ed25519KeyPair', 'Secp256k1KeyPair', 'Secp256r1KeyPair',
    'BLS12381KeyPair', 'SCHEMES', 'scheme_for',
]
