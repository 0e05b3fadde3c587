import hashlib
from enum import Enum

from fastcrypto_ffi.crypto.buffers import as_bytes
from fastcrypto_ffi.crypto.errors import GenericError

DIGEST_SIZE = 32


class HashType(Enum):
    """Các thuật toán hash được hỗ trợ"""
    SHA256 = "sha256"
    BLAKE2B256 = "blake2b256"

    @classmethod
    def from_name(cls, name):
        """Parse tên thuật toán, ví dụ 'SHA-256' hoặc 'blake2b256'"""
        if isinstance(name, cls):
            return name
        normalized = str(name).lower().replace("-", "").replace("_", "")
        for algorithm in cls:
            if algorithm.value == normalized:
                return algorithm
        raise GenericError(f"Unsupported hash algorithm: {name}")


class Hasher:
    """Xử lý hashing trên raw bytes"""

    @staticmethod
    def sha256(data):
        return hashlib.sha256(data).digest()

    @staticmethod
    def blake2b256(data):
        return hashlib.blake2b(data, digest_size=DIGEST_SIZE).digest()

    @staticmethod
    def hash_hex(data, algorithm=HashType.SHA256):
        """Hash raw bytes, trả về hex digest"""
        return hash(data, algorithm).hex()


_DISPATCH = {
    HashType.SHA256: Hasher.sha256,
    HashType.BLAKE2B256: Hasher.blake2b256,
}


def hash(data, algorithm):
    """Tính digest 32 bytes của data theo algorithm"""
    return _DISPATCH[HashType.from_name(algorithm)](as_bytes(data))
