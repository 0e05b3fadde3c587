from fastcrypto_ffi.crypto import hashing, hexcodec
from fastcrypto_ffi.crypto.bls import BLS12381KeyPair
from fastcrypto_ffi.crypto.keys import Ed25519KeyPair, Secp256k1KeyPair, Secp256r1KeyPair
from fastcrypto_ffi.ffi.marshal import lift_bytes, lift_hash_type, lift_str


def hash(data, algorithm):
    """Digest 32 bytes của data"""
    return hashing.hash(lift_bytes(data), lift_hash_type(algorithm))


def hex_encode(data):
    return hexcodec.hex_encode(lift_bytes(data))


def hex_decode(data):
    return hexcodec.hex_decode(lift_str(data))


class _KeyPairWrapper:
    """
    Handle của một key pair cho foreign caller.

    Wrapper sở hữu key pair bên trong; không có thao tác destroy, key bị
    huỷ khi handle không còn được tham chiếu. Private key không được lộ ra
    qua wrapper.
    """

    KEY_PAIR = None

    def __init__(self, key_pair):
        self._inner = key_pair

    @classmethod
    def generate(cls):
        return cls(cls.KEY_PAIR.generate())

    @classmethod
    def from_bytes(cls, data):
        return cls(cls.KEY_PAIR.from_bytes(lift_bytes(data, "bytes")))

    def public_key(self):
        return self._inner.public_key()

    def sign(self, msg):
        return self._inner.sign(lift_bytes(msg, "msg"))

    def verify(self, msg, signature):
        return self._inner.verify(lift_bytes(msg, "msg"), lift_bytes(signature, "signature"))

    def __repr__(self):
        return f"{self.__class__.__name__}({self.public_key().hex()})"


class Ed25519KeyPairWrapper(_KeyPairWrapper):
    KEY_PAIR = Ed25519KeyPair


class Secp256k1KeyPairWrapper(_KeyPairWrapper):
    KEY_PAIR = Secp256k1KeyPair


class Secp256r1KeyPairWrapper(_KeyPairWrapper):
    KEY_PAIR = Secp256r1KeyPair


class BLS12381KeyPairWrapper(_KeyPairWrapper):
    KEY_PAIR = BLS12381KeyPair


WRAPPERS = {
    wrapper.KEY_PAIR.SCHEME: wrapper
    for wrapper in (
        Ed25519KeyPairWrapper,
        Secp256k1KeyPairWrapper,
        Secp256r1KeyPairWrapper,
        BLS12381KeyPairWrapper,
    )
}
