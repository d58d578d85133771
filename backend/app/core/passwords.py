"""Password Hashing — salted PBKDF2-SHA256, encoded as a single storable string.

Invariants:
    - hash_password never returns the plain text and never repeats for the same input
    - verify_password(p, hash_password(p)) is True; comparison is constant-time
    - Encoded form: "pbkdf2_sha256$<iterations>$<salt hex>$<digest hex>"
"""

import hashlib
import hmac
import secrets

ALGORITHM = "pbkdf2_sha256"
DEFAULT_ITERATIONS: int = 600_000


def hash_password(password: str, iterations: int = DEFAULT_ITERATIONS) -> str:
    salt = secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode(), bytes.fromhex(salt), iterations,
    )
    return f"{ALGORITHM}${iterations}${salt}${digest.hex()}"


def verify_password(password: str, encoded: str) -> bool:
    try:
        algorithm, iterations, salt, expected = encoded.split("$")
    except ValueError:
        return False
    if algorithm != ALGORITHM:
        return False
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode(), bytes.fromhex(salt), int(iterations),
    )
    return hmac.compare_digest(digest.hex(), expected)
