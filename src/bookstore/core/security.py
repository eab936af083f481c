"""Password hashing helpers."""

from werkzeug.security import check_password_hash, generate_password_hash

MIN_PASSWORD_LENGTH = 6


def hash_password(password: str) -> str:
    """Hash a plain-text password (salted scrypt via werkzeug)."""
    return generate_password_hash(password)


def verify_password(password_hash: str | None, password: str) -> bool:
    """Check a plain-text password against a stored hash.

    Users without a stored hash can never log in with a password.
    """
    if not password_hash:
        return False
    return check_password_hash(password_hash, password)
