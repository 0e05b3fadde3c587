import binascii

from fastcrypto_ffi.crypto.buffers import BUFFER_TYPES, as_bytes
from fastcrypto_ffi.crypto.errors import GenericError, reportable


def hex_encode(data):
    """Encode bytes thành hex chữ thường, không separator"""
    return binascii.hexlify(as_bytes(data)).decode('ascii')


def hex_decode(text):
    """Decode hex string; hex không hợp lệ hoặc độ dài lẻ -> GenericError"""
    if not isinstance(text, (str,) + BUFFER_TYPES):
        raise GenericError(f"hex input must be a string, got {type(text).__name__}")
    with reportable("hex_decode"):
        return binascii.unhexlify(text)
