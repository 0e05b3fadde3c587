"""
BLS12-381, biến thể minimal-signature: chữ ký thuộc G1 (48 bytes),
public key thuộc G2 (96 bytes).
"""
import hashlib
import secrets

from py_ecc.bls import G2ProofOfPossession
from py_ecc.bls.g2_primitives import G1_to_pubkey, G2_to_signature, pubkey_to_G1
from py_ecc.bls.hash_to_curve import hash_to_G1
from py_ecc.optimized_bls12_381 import (
    FQ12,
    G2,
    curve_order,
    final_exponentiate,
    is_inf,
    multiply,
    neg,
    pairing,
)

from fastcrypto_ffi.crypto.buffers import as_bytes
from fastcrypto_ffi.crypto.errors import reportable
from fastcrypto_ffi.crypto.keys import KeyPair, _check_length

DST_G1 = b"BLS_SIG_BLS12381G1_XMD:SHA-256_SSWU_RO_NUL_"
IKM_LENGTH = 32


def _in_subgroup(point):
    return is_inf(multiply(point, curve_order))


class BLS12381KeyPair(KeyPair):
    """Quản lý cặp khóa BLS12-381 (min-sig)"""

    SCHEME = "bls12381"
    PRIVATE_KEY_LENGTH = 32
    PUBLIC_KEY_LENGTH = 96
    SIGNATURE_LENGTH = 48

    def __init__(self, secret):
        self._secret = secret
        self._public_point = multiply(G2, secret)
        # G2_to_signature chỉ là encoder nén điểm G2
        self._public_bytes = G2_to_signature(self._public_point)

    @classmethod
    def generate(cls):
        return cls(G2ProofOfPossession.KeyGen(secrets.token_bytes(IKM_LENGTH)))

    @classmethod
    def from_bytes(cls, data):
        with reportable("BLS12381KeyPair.from_bytes"):
            data = as_bytes(data, "private key")
            _check_length(data, cls.PRIVATE_KEY_LENGTH, "BLS12-381 private key")
            secret = int.from_bytes(data, 'big')
            if not 0 < secret < curve_order:
                raise ValueError("Invalid BLS12-381 private key: scalar out of range")
            return cls(secret)

    def public_key(self):
        return bytes(self._public_bytes)

    def private_key_bytes(self):
        return self._secret.to_bytes(self.PRIVATE_KEY_LENGTH, 'big')

    def sign(self, message):
        point = multiply(hash_to_G1(as_bytes(message, "message"), DST_G1, hashlib.sha256), self._secret)
        return bytes(G1_to_pubkey(point))

    def verify(self, message, signature):
        with reportable("BLS12381KeyPair.verify"):
            signature = as_bytes(signature, "signature")
            _check_length(signature, self.SIGNATURE_LENGTH, "BLS12-381 signature")
            signature_point = pubkey_to_G1(signature)
            if is_inf(signature_point):
                raise ValueError("Invalid BLS12-381 signature: point at infinity")
            if not _in_subgroup(signature_point):
                raise ValueError("Invalid BLS12-381 signature: point not in G1 subgroup")

        message_point = hash_to_G1(as_bytes(message, "message"), DST_G1, hashlib.sha256)
        # e(g2, sig) * e(pk, -H(m)) == 1
        product = pairing(G2, signature_point, final_exponentiate=False) * pairing(
            self._public_point, neg(message_point), final_exponentiate=False
        )
        return final_exponentiate(product) == FQ12.one()
