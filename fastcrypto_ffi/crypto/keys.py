from abc import ABC, abstractmethod

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519

from fastcrypto_ffi.crypto.buffers import as_bytes
from fastcrypto_ffi.crypto.errors import reportable
from fastcrypto_ffi.crypto.signatures import EcdsaSigner, SCALAR_LENGTH, curve_order


class KeyPair(ABC):
    """
    Contract chung cho key pair của mọi scheme.

    Mỗi scheme là một implementation độc lập; key pair là immutable sau
    khi được tạo bằng generate() hoặc from_bytes().
    """

    SCHEME = None
    PRIVATE_KEY_LENGTH = None
    PUBLIC_KEY_LENGTH = None
    SIGNATURE_LENGTH = None

    @classmethod
    @abstractmethod
    def generate(cls):
        """Sinh key pair mới từ nguồn random an toàn"""

    @classmethod
    @abstractmethod
    def from_bytes(cls, data):
        """Load key pair từ raw private key bytes"""

    @abstractmethod
    def public_key(self):
        """Public key dạng bytes"""

    @abstractmethod
    def private_key_bytes(self):
        """Bản copy immutable của raw private key"""

    @abstractmethod
    def sign(self, message):
        """Ký message, trả về signature bytes"""

    @abstractmethod
    def verify(self, message, signature):
        """True/False; GenericError nếu signature không parse được"""

    def __repr__(self):
        return f"{self.__class__.__name__}(public_key={self.public_key().hex()})"


def _check_length(data, expected, what):
    if len(data) != expected:
        raise ValueError(f"Invalid {what} length: expected {expected} bytes, got {len(data)}")


class Ed25519KeyPair(KeyPair):
    """Quản lý cặp khóa Ed25519"""

    SCHEME = "ed25519"
    PRIVATE_KEY_LENGTH = 32
    PUBLIC_KEY_LENGTH = 32
    SIGNATURE_LENGTH = 64

    def __init__(self, private_key):
        self._private_key = private_key
        self._public_bytes = private_key.public_key().public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw
        )

    @classmethod
    def generate(cls):
        return cls(ed25519.Ed25519PrivateKey.generate())

    @classmethod
    def from_bytes(cls, data):
        with reportable("Ed25519KeyPair.from_bytes"):
            data = as_bytes(data, "private key")
            _check_length(data, cls.PRIVATE_KEY_LENGTH, "Ed25519 private key")
            return cls(ed25519.Ed25519PrivateKey.from_private_bytes(data))

    def public_key(self):
        return self._public_bytes

    def private_key_bytes(self):
        return self._private_key.private_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PrivateFormat.Raw,
            encryption_algorithm=serialization.NoEncryption()
        )

    def sign(self, message):
        return self._private_key.sign(as_bytes(message, "message"))

    def verify(self, message, signature):
        with reportable("Ed25519KeyPair.verify"):
            signature = as_bytes(signature, "signature")
            _check_length(signature, self.SIGNATURE_LENGTH, "Ed25519 signature")
        try:
            self._private_key.public_key().verify(signature, as_bytes(message, "message"))
            return True
        except InvalidSignature:
            return False


class _EcdsaKeyPair(KeyPair):
    """ECDSA/SHA-256 trên một curve cố định, public key dạng compressed"""

    CURVE = None
    PRIVATE_KEY_LENGTH = SCALAR_LENGTH
    PUBLIC_KEY_LENGTH = 33
    SIGNATURE_LENGTH = 64

    def __init__(self, private_key):
        self._private_key = private_key
        self._signer = EcdsaSigner(self.CURVE)
        self._public_bytes = private_key.public_key().public_bytes(
            encoding=serialization.Encoding.X962,
            format=serialization.PublicFormat.CompressedPoint
        )

    @classmethod
    def generate(cls):
        return cls(ec.generate_private_key(cls.CURVE))

    @classmethod
    def from_bytes(cls, data):
        with reportable(f"{cls.__name__}.from_bytes"):
            data = as_bytes(data, "private key")
            _check_length(data, cls.PRIVATE_KEY_LENGTH, f"{cls.SCHEME} private key")
            scalar = int.from_bytes(data, 'big')
            if not 0 < scalar < curve_order(cls.CURVE):
                raise ValueError(f"Invalid {cls.SCHEME} private key: scalar out of range")
            return cls(ec.derive_private_key(scalar, cls.CURVE))

    def public_key(self):
        return self._public_bytes

    def private_key_bytes(self):
        return self._private_key.private_numbers().private_value.to_bytes(SCALAR_LENGTH, 'big')

    def sign(self, message):
        return self._signer.sign(self._private_key, as_bytes(message, "message"))

    def verify(self, message, signature):
        with reportable(f"{self.__class__.__name__}.verify"):
            r, s = self._signer.parse(as_bytes(signature, "signature"))
        return self._signer.verify(self._private_key.public_key(), as_bytes(message, "message"), r, s)


class Secp256k1KeyPair(_EcdsaKeyPair):
    """Quản lý cặp khóa Secp256k1"""

    SCHEME = "secp256k1"
    CURVE = ec.SECP256K1()


class Secp256r1KeyPair(_EcdsaKeyPair):
    """Quản lý cặp khóa Secp256r1 (NIST P-256)"""

    SCHEME = "secp256r1"
    CURVE = ec.SECP256R1()

