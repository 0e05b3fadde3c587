from fastcrypto_ffi.crypto.bls import BLS12381KeyPair
from fastcrypto_ffi.crypto.errors import GenericError
from fastcrypto_ffi.crypto.keys import Ed25519KeyPair, Secp256k1KeyPair, Secp256r1KeyPair

SCHEMES = {
    cls.SCHEME: cls
    for cls in (Ed25519KeyPair, Secp256k1KeyPair, Secp256r1KeyPair, BLS12381KeyPair)
}


def scheme_for(name):
    """Tìm class key pair theo tên scheme"""
    normalized = str(name).lower().replace("-", "").replace("_", "")
    try:
        return SCHEMES[normalized]
    except KeyError:
        raise GenericError(
            f"Unsupported signature scheme: {name} (expected one of {', '.join(SCHEMES)})"
        ) from None
