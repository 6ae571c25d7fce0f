# server/core/security.py

import hashlib
import hmac
import secrets


SALT_BYTES = 16
KEY_BYTES = 64
SEPARATOR = "."

# scrypt cost parameters (N=2^14, r=8, p=1)
SCRYPT_N = 16384
SCRYPT_R = 8
SCRYPT_P = 1


def _derive(password: str, salt: str) -> bytes:
    return hashlib.scrypt(
        password.encode("utf-8"),
        salt=salt.encode("utf-8"),
        n=SCRYPT_N,
        r=SCRYPT_R,
        p=SCRYPT_P,
        dklen=KEY_BYTES,
    )


def get_password_hash(password: str) -> str:
    """
    Returns "<derived key hex>.<salt hex>" for a freshly generated salt.
    """
    salt = secrets.token_hex(SALT_BYTES)
    return f"{_derive(password, salt).hex()}{SEPARATOR}{salt}"


def verify_password(plain_password: str, stored: str) -> bool:
    if not stored or SEPARATOR not in stored:
        return False
    hashed, salt = stored.split(SEPARATOR, 1)
    try:
        expected = bytes.fromhex(hashed)
    except ValueError:
        return False
    if len(expected) != KEY_BYTES or not salt:
        return False
    return hmac.compare_digest(expected, _derive(plain_password, salt))
