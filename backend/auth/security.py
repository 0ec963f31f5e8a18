import hashlib
import hmac
import secrets

PBKDF2_ITERATIONS = 190_000
HASH_SCHEME = "pbkdf2_sha256"


def _derive(password: str, salt: str, iterations: int) -> str:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("utf-8"), iterations).hex()


def hash_password(password: str) -> str:
    salt = secrets.token_hex(16)
    digest = _derive(password, salt, PBKDF2_ITERATIONS)
    return f"{HASH_SCHEME}${PBKDF2_ITERATIONS}${salt}${digest}"


def verify_password(password: str, stored: str) -> bool:
    try:
        scheme, iterations, salt, digest = stored.split("$")
        iterations = int(iterations)
    except (AttributeError, ValueError):
        return False
    if scheme != HASH_SCHEME:
        return False
    return hmac.compare_digest(_derive(password, salt, iterations), digest)
