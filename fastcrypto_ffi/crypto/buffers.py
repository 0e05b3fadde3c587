from fastcrypto_ffi.crypto.errors import GenericError

BUFFER_TYPES = (bytes, bytearray, memoryview)


def as_bytes(value, name="data"):
    """Copy byte buffer thành bytes immutable; kiểu khác -> GenericError"""
    if not isinstance(value, BUFFER_TYPES):
        raise GenericError(f"{name} must be a byte buffer, got {type(value).__name__}")
    return bytes(value)
