"""Password hashing with bcrypt."""

import bcrypt


def hash_password(password: str) -> str:
    """Return a cost-12 bcrypt hash; raise ``ValueError`` beyond 72 bytes."""
    encoded = password.encode("utf-8")
    if len(encoded) > 72:
        raise ValueError("password length exceeds 72 bytes")
    return bcrypt.hashpw(encoded, bcrypt.gensalt(12, b"2a")).decode("ascii")


def check_password_hash(password: str, hashed: str) -> bool:
    """Return whether ``password`` matches ``hashed``."""
    encoded = password.encode("utf-8")
    try:
        return len(encoded) <= 72 and bcrypt.checkpw(encoded, hashed.encode("utf-8"))
    except ValueError:
        return False