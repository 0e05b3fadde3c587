from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import (
    decode_dss_signature,
    encode_dss_signature,
)

SCALAR_LENGTH = 32
COMPACT_SIGNATURE_LENGTH = 2 * SCALAR_LENGTH

# Bậc n của điểm sinh G, theo SEC 2 v2 (secp256k1: 2.4.1, secp256r1: 2.4.2)
CURVE_ORDERS = {
    ec.SECP256K1.name: 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
    ec.SECP256R1.name: 0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551,
}


def curve_order(curve):
    return CURVE_ORDERS[curve.name]


def is_low_s(s, order):
    return s <= order // 2


def normalize_s(s, order):
    """Đưa s về nửa dưới của [1, n) để chống malleability"""
    return s if is_low_s(s, order) else order - s


def encode_compact(r, s):
    """(r, s) -> r || s, mỗi phần 32 bytes big-endian"""
    return r.to_bytes(SCALAR_LENGTH, 'big') + s.to_bytes(SCALAR_LENGTH, 'big')


def decode_compact(signature, order):
    """r || s -> (r, s); sai độ dài hoặc scalar ngoài [1, n) -> ValueError"""
    if len(signature) != COMPACT_SIGNATURE_LENGTH:
        raise ValueError(
            f"Invalid signature length: expected {COMPACT_SIGNATURE_LENGTH} bytes, got {len(signature)}"
        )
    r = int.from_bytes(signature[:SCALAR_LENGTH], 'big')
    s = int.from_bytes(signature[SCALAR_LENGTH:], 'big')
    if not (0 < r < order and 0 < s < order):
        raise ValueError("Invalid signature: scalar out of range")
    return r, s


class EcdsaSigner:
    """Ký và verify ECDSA/SHA-256 với chữ ký compact, low-s"""

    def __init__(self, curve):
        self.curve = curve
        self.order = curve_order(curve)

    def sign(self, private_key, message):
        # RFC 6979: nonce được dẫn xuất từ key và message
        der = private_key.sign(
            message, ec.ECDSA(hashes.SHA256(), deterministic_signing=True)
        )
        r, s = decode_dss_signature(der)
        return encode_compact(r, normalize_s(s, self.order))

    def parse(self, signature):
        return decode_compact(signature, self.order)

    def verify(self, public_key, message, r, s):
        """Verify (r, s) đã parse; chữ ký high-s bị từ chối"""
        if not is_low_s(s, self.order):
            return False
        try:
            public_key.verify(encode_dss_signature(r, s), message, ec.ECDSA(hashes.SHA256()))
            return True
        except InvalidSignature:
            return False
