import argparse
import sys

from fastcrypto_ffi.config import load_config
from fastcrypto_ffi.crypto import (
    FastCryptoError,
    HashType,
    SCHEMES,
    hash,
    hex_decode,
    hex_encode,
    scheme_for,
)
from fastcrypto_ffi.utils.logger import Logger, configure_logging

logger = Logger("cli")


def cmd_hash(args, config):
    algorithm = HashType.from_name(args.algorithm or config["default_hash"])
    print(hex_encode(hash(hex_decode(args.data), algorithm)))
    return 0


def cmd_hex_encode(args, config):
    print(hex_encode(args.text.encode('utf-8')))
    return 0


def cmd_hex_decode(args, config):
    data = hex_decode(args.data)
    print(data.decode('utf-8', errors='replace'))
    return 0


def cmd_keygen(args, config):
    cls = scheme_for(args.scheme or config["default_scheme"])
    kp = cls.generate()
    logger.log(f"Generated {cls.SCHEME} key pair")
    print(f"scheme:      {cls.SCHEME}")
    print(f"private_key: {hex_encode(kp.private_key_bytes())}")
    print(f"public_key:  {hex_encode(kp.public_key())}")
    return 0


def _load_key_pair(args, config):
    cls = scheme_for(args.scheme or config["default_scheme"])
    return cls.from_bytes(hex_decode(args.private_key))


def cmd_public_key(args, config):
    print(hex_encode(_load_key_pair(args, config).public_key()))
    return 0


def cmd_sign(args, config):
    kp = _load_key_pair(args, config)
    print(hex_encode(kp.sign(hex_decode(args.message))))
    return 0


def cmd_verify(args, config):
    kp = _load_key_pair(args, config)
    valid = kp.verify(hex_decode(args.message), hex_decode(args.signature))
    print("valid" if valid else "invalid")
    return 0 if valid else 2


def cmd_selftest(args, config):
    """Chạy generate/sign/verify/round-trip trên mọi scheme"""
    success = True
    message = b"fastcrypto selftest"

    for name, cls in SCHEMES.items():
        kp = cls.generate()
        signature = kp.sign(message)
        restored = cls.from_bytes(kp.private_key_bytes())

        checks = {
            "sign/verify": kp.verify(message, signature),
            "tampered message rejected": not kp.verify(message + b"!", signature),
            "round-trip": restored.public_key() == kp.public_key(),
            "lengths": (
                len(kp.public_key()) == cls.PUBLIC_KEY_LENGTH
                and len(signature) == cls.SIGNATURE_LENGTH
            ),
        }
        for check, passed in checks.items():
            print(f"  [{'OK' if passed else 'FAIL'}] {name}: {check}")
            success = success and passed

    for algorithm in HashType:
        digest = hash(b"", algorithm)
        passed = len(digest) == 32
        print(f"  [{'OK' if passed else 'FAIL'}] {algorithm.value}: digest length")
        success = success and passed

    print("SELFTEST PASSED" if success else "SELFTEST FAILED")
    return 0 if success else 1


def build_parser():
    parser = argparse.ArgumentParser(
        prog="fastcrypto",
        description="Hashing, hex codec and multi-scheme signatures",
    )
    parser.add_argument("--config", help="JSON config file")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("hash", help="digest of hex-encoded data")
    p.add_argument("--algorithm", choices=[a.value for a in HashType])
    p.add_argument("data", help="hex-encoded input")
    p.set_defaults(func=cmd_hash)

    p = sub.add_parser("hex-encode", help="hex-encode UTF-8 text")
    p.add_argument("text")
    p.set_defaults(func=cmd_hex_encode)

    p = sub.add_parser("hex-decode", help="decode hex into UTF-8 text")
    p.add_argument("data")
    p.set_defaults(func=cmd_hex_decode)

    p = sub.add_parser("keygen", help="generate a key pair")
    p.add_argument("--scheme", choices=list(SCHEMES))
    p.set_defaults(func=cmd_keygen)

    p = sub.add_parser("public-key", help="derive the public key")
    p.add_argument("--scheme", choices=list(SCHEMES))
    p.add_argument("private_key", help="hex-encoded private key")
    p.set_defaults(func=cmd_public_key)

    p = sub.add_parser("sign", help="sign a hex-encoded message")
    p.add_argument("--scheme", choices=list(SCHEMES))
    p.add_argument("private_key")
    p.add_argument("message")
    p.set_defaults(func=cmd_sign)

    p = sub.add_parser("verify", help="verify a hex-encoded signature")
    p.add_argument("--scheme", choices=list(SCHEMES))
    p.add_argument("private_key")
    p.add_argument("message")
    p.add_argument("signature")
    p.set_defaults(func=cmd_verify)

    p = sub.add_parser("selftest", help="run a sanity check over every scheme")
    p.set_defaults(func=cmd_selftest)

    return parser


def main(argv=None):
    """Main function"""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
        configure_logging(config["log_level"], config["log_file"])
        return args.func(args, config)
    except FastCryptoError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
