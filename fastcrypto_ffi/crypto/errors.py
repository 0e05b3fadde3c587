from contextlib import contextmanager

from cryptography.exceptions import UnsupportedAlgorithm

from fastcrypto_ffi.utils.logger import Logger

# Lỗi parse của primitives; binascii.Error là subclass của ValueError.
# UnsupportedAlgorithm khi backend OpenSSL thiếu curve hoặc RFC 6979.
MAPPED_ERRORS = (ValueError, UnsupportedAlgorithm)

_logger = Logger("errors")


class FastCryptoError(Exception):
    """Lỗi gốc trả về cho caller ở boundary"""


class GenericError(FastCryptoError):
    """Loại lỗi duy nhất: chỉ mang một message"""

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message

    def __repr__(self):
        return f"GenericError({self.message!r})"


def map_error(exc):
    """Chuyển lỗi của primitives library thành GenericError"""
    if isinstance(exc, FastCryptoError):
        return exc
    message = str(exc) or exc.__class__.__name__
    return GenericError(message)


@contextmanager
def reportable(context):
    """
    Bọc một call site có thể fail.

    Lỗi từ primitives library được flatten thành GenericError, giữ lại
    exception gốc trong __cause__.
    """
    try:
        yield
    except FastCryptoError:
        raise
    except MAPPED_ERRORS as exc:
        error = map_error(exc)
        _logger.log(f"{context} failed: {error.message}", level="debug")
        raise error from exc
