"""
Chuyển giá trị từ foreign caller sang kiểu Python và ngược lại.

Byte buffer có thể đến dưới dạng bytes, bytearray, memoryview hoặc list
các int 0..255 (hình dạng của Vec<u8> / ByteArray bên kia boundary).
"""
from fastcrypto_ffi.crypto.buffers import as_bytes
from fastcrypto_ffi.crypto.errors import GenericError
from fastcrypto_ffi.crypto.hashing import HashType


def lift_bytes(value, name="data"):
    """Copy giá trị thành bytes immutable"""
    if isinstance(value, (list, tuple)):
        if not all(isinstance(b, int) and 0 <= b <= 255 for b in value):
            raise GenericError(f"{name} must contain only ints in range 0..255")
        return bytes(value)
    return as_bytes(value, name)


def lift_hash_type(value):
    return HashType.from_name(value)


def lift_str(value, name="data"):
    if not isinstance(value, str):
        raise GenericError(f"{name} must be a string, got {type(value).__name__}")
    return value
