import pytest
from fastcrypto_ffi.crypto import (
    BLS12381KeyPair,
    Ed25519KeyPair,
    GenericError,
    SCHEMES,
    Secp256k1KeyPair,
    Secp256r1KeyPair,
    scheme_for,
)
from fastcrypto_ffi.crypto.signatures import curve_order, encode_compact

ALL_SCHEMES = [Ed25519KeyPair, Secp256k1KeyPair, Secp256r1KeyPair, BLS12381KeyPair]

EXPECTED_LENGTHS = {
    "ed25519": (32, 32, 64),
    "secp256k1": (32, 33, 64),
    "secp256r1": (32, 33, 64),
    "bls12381": (32, 96, 48),
}

# RFC 8032, test 1
ED25519_SECRET = "9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60"
ED25519_PUBLIC = "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a"
ED25519_SIGNATURE = (
    "e5564300c360ac729086e2cc806e828a84877f1eb8e5d974d873e065224901555"
    "fb8821590a33bacc61e39701cf9b46bd25bf5f0595bbe24655141438e7a100b"
)


@pytest.fixture(scope="module", params=ALL_SCHEMES, ids=lambda cls: cls.SCHEME)
def key_pair(request):
    return request.param.generate()


def test_scheme_lengths(key_pair):
    """Độ dài private/public/signature khớp với scheme"""
    private_len, public_len, signature_len = EXPECTED_LENGTHS[key_pair.SCHEME]
    assert len(key_pair.private_key_bytes()) == private_len == key_pair.PRIVATE_KEY_LENGTH
    assert len(key_pair.public_key()) == public_len == key_pair.PUBLIC_KEY_LENGTH
    assert len(key_pair.sign(b"msg")) == signature_len == key_pair.SIGNATURE_LENGTH


@pytest.mark.parametrize("message", [b"", b"Hello", bytes(range(256)) * 4])
def test_sign_verify(key_pair, message):
    signature = key_pair.sign(message)
    assert key_pair.verify(message, signature) is True


def test_wrong_message_fails(key_pair):
    signature = key_pair.sign(b"original")
    assert key_pair.verify(b"tampered", signature) is False


def test_other_key_fails(key_pair):
    other = key_pair.__class__.generate()
    signature = other.sign(b"message")
    assert key_pair.verify(b"message", signature) is False


def test_signing_is_deterministic(key_pair):
    assert key_pair.sign(b"message") == key_pair.sign(b"message")


def test_round_trip(key_pair):
    """from_bytes(private bytes) cho lại đúng public key"""
    restored = key_pair.__class__.from_bytes(key_pair.private_key_bytes())
    assert restored.public_key() == key_pair.public_key()
    assert restored.private_key_bytes() == key_pair.private_key_bytes()
    assert key_pair.verify(b"message", restored.sign(b"message"))


def test_from_bytes_accepts_bytearray(key_pair):
    restored = key_pair.__class__.from_bytes(bytearray(key_pair.private_key_bytes()))
    assert restored.public_key() == key_pair.public_key()


@pytest.mark.parametrize("length", [0, 1, 31, 33, 64])
@pytest.mark.parametrize("cls", ALL_SCHEMES, ids=lambda cls: cls.SCHEME)
def test_from_bytes_wrong_length(cls, length):
    with pytest.raises(GenericError) as exc_info:
        cls.from_bytes(b"\x01" * length)
    assert "length" in exc_info.value.message


@pytest.mark.parametrize("cls", [Secp256k1KeyPair, Secp256r1KeyPair, BLS12381KeyPair],
                         ids=lambda cls: cls.SCHEME)
def test_from_bytes_zero_scalar(cls):
    with pytest.raises(GenericError):
        cls.from_bytes(bytes(32))


@pytest.mark.parametrize("cls", [Secp256k1KeyPair, Secp256r1KeyPair], ids=lambda cls: cls.SCHEME)
def test_from_bytes_scalar_above_order(cls):
    with pytest.raises(GenericError):
        cls.from_bytes(b"\xff" * 32)


def test_from_bytes_bls_scalar_above_order():
    with pytest.raises(GenericError):
        BLS12381KeyPair.from_bytes(b"\xff" * 32)


@pytest.mark.parametrize("length", [0, 47, 63, 65, 96])
def test_verify_wrong_signature_length(key_pair, length):
    """Signature không parse được -> GenericError, không phải False"""
    with pytest.raises(GenericError):
        key_pair.verify(b"message", b"\x00" * length)


def test_cross_scheme_rejection():
    """Chữ ký của scheme A không bao giờ verify được với scheme B"""
    key_pairs = [cls.generate() for cls in ALL_SCHEMES]
    message = b"cross scheme"
    signatures = {kp.SCHEME: kp.sign(message) for kp in key_pairs}

    for signer in key_pairs:
        for verifier in key_pairs:
            if signer.SCHEME == verifier.SCHEME:
                continue
            try:
                result = verifier.verify(message, signatures[signer.SCHEME])
            except GenericError:
                result = False
            assert result is False, f"{signer.SCHEME} signature accepted by {verifier.SCHEME}"


def test_generated_keys_differ():
    kp1 = Ed25519KeyPair.generate()
    kp2 = Ed25519KeyPair.generate()
    assert kp1.private_key_bytes() != kp2.private_key_bytes()
    assert kp1.public_key() != kp2.public_key()


class TestEd25519:
    """RFC 8032 test vector"""

    def test_public_key(self):
        kp = Ed25519KeyPair.from_bytes(bytes.fromhex(ED25519_SECRET))
        assert kp.public_key().hex() == ED25519_PUBLIC

    def test_signature(self):
        kp = Ed25519KeyPair.from_bytes(bytes.fromhex(ED25519_SECRET))
        assert kp.sign(b"").hex() == ED25519_SIGNATURE
        assert kp.verify(b"", bytes.fromhex(ED25519_SIGNATURE))

    def test_garbage_signature_is_false(self):
        kp = Ed25519KeyPair.generate()
        assert kp.verify(b"message", b"\x01" * 64) is False


class TestEcdsa:
    """Compact signature, low-s, compressed public key"""

    def test_secp256k1_generator_public_key(self):
        kp = Secp256k1KeyPair.from_bytes((1).to_bytes(32, 'big'))
        assert kp.public_key().hex() == (
            "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
        )

    def test_secp256r1_generator_public_key(self):
        kp = Secp256r1KeyPair.from_bytes((1).to_bytes(32, 'big'))
        assert kp.public_key().hex() == (
            "036b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296"
        )

    @pytest.mark.parametrize("cls, generator", [
        (Secp256k1KeyPair, "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"),
        (Secp256r1KeyPair, "036b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296"),
    ], ids=["secp256k1", "secp256r1"])
    def test_curve_order_matches_generator(self, cls, generator):
        """(n - 1) * G = -G: cùng x, khác parity"""
        order = curve_order(cls.CURVE)
        kp = cls.from_bytes((order - 1).to_bytes(32, 'big'))
        negated_prefix = "03" if generator.startswith("02") else "02"
        assert kp.public_key().hex() == negated_prefix + generator[2:]
        with pytest.raises(GenericError):
            cls.from_bytes(order.to_bytes(32, 'big'))

    @pytest.mark.parametrize("cls", [Secp256k1KeyPair, Secp256r1KeyPair], ids=lambda cls: cls.SCHEME)
    def test_signature_is_low_s(self, cls):
        kp = cls.generate()
        order = curve_order(cls.CURVE)
        signature = kp.sign(b"message")
        s = int.from_bytes(signature[32:], 'big')
        assert s <= order // 2

    @pytest.mark.parametrize("cls", [Secp256k1KeyPair, Secp256r1KeyPair], ids=lambda cls: cls.SCHEME)
    def test_high_s_signature_is_false(self, cls):
        """Chữ ký high-s parse được nhưng không hợp lệ"""
        kp = cls.generate()
        order = curve_order(cls.CURVE)
        signature = kp.sign(b"message")
        r = int.from_bytes(signature[:32], 'big')
        s = int.from_bytes(signature[32:], 'big')
        assert kp.verify(b"message", encode_compact(r, order - s)) is False

    @pytest.mark.parametrize("cls", [Secp256k1KeyPair, Secp256r1KeyPair], ids=lambda cls: cls.SCHEME)
    def test_zero_scalar_signature_is_error(self, cls):
        kp = cls.generate()
        with pytest.raises(GenericError):
            kp.verify(b"message", bytes(64))


class TestBLS12381:

    def test_hash_to_g1_available(self):
        from py_ecc.bls import hash_to_curve
        assert hasattr(hash_to_curve, "hash_to_G1")

    def test_infinity_signature_is_error(self):
        """Điểm vô cực là chữ ký không parse được"""
        kp = BLS12381KeyPair.from_bytes((7).to_bytes(32, 'big'))
        with pytest.raises(GenericError) as exc_info:
            kp.verify(b"message", bytes([0xc0]) + bytes(47))
        assert "infinity" in exc_info.value.message

    def test_invalid_point_is_error(self):
        kp = BLS12381KeyPair.from_bytes((7).to_bytes(32, 'big'))
        # Thiếu compression flag
        with pytest.raises(GenericError):
            kp.verify(b"message", bytes(48))


class TestSchemeRegistry:

    def test_all_schemes_registered(self):
        assert set(SCHEMES) == set(EXPECTED_LENGTHS)

    @pytest.mark.parametrize("name, cls", [
        ("ed25519", Ed25519KeyPair),
        ("Secp256k1", Secp256k1KeyPair),
        ("secp256r1", Secp256r1KeyPair),
        ("BLS12-381", BLS12381KeyPair),
    ])
    def test_scheme_for(self, name, cls):
        assert scheme_for(name) is cls

    def test_unknown_scheme(self):
        with pytest.raises(GenericError):
            scheme_for("rsa")


@pytest.mark.parametrize("value", [32, None, "00" * 32, [0] * 32])
@pytest.mark.parametrize("cls", ALL_SCHEMES, ids=lambda cls: cls.SCHEME)
def test_from_bytes_rejects_non_buffer(cls, value):
    """from_bytes(32) không được tạo key toàn byte 0"""
    with pytest.raises(GenericError):
        cls.from_bytes(value)


def test_sign_and_verify_reject_non_buffer(key_pair):
    with pytest.raises(GenericError):
        key_pair.sign(64)
    with pytest.raises(GenericError):
        key_pair.verify(b"message", key_pair.SIGNATURE_LENGTH)
    with pytest.raises(GenericError):
        key_pair.verify(5, key_pair.sign(b"message"))
