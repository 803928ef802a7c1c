# invoicebook/services/passwords.py

import bcrypt

from invoicebook.errors import PasswordTooLong

DEFAULT_ROUNDS = 10
MAX_PASSWORD_BYTES = 72


def hash_password(plain_password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """
    One-way bcrypt hash of plain_password.

    bcrypt only reads the first 72 bytes, so longer passwords raise
    PasswordTooLong instead of being silently truncated.
    """
    raw = plain_password.encode("utf-8")
    if len(raw) > MAX_PASSWORD_BYTES:
        raise PasswordTooLong(MAX_PASSWORD_BYTES)
    return bcrypt.hashpw(raw, bcrypt.gensalt(rounds=rounds)).decode("ascii")


def check_password(plain_password: str, password_hash: str) -> bool:
    """Verify plaintext password against stored hash."""
    if not plain_password or not password_hash:
        return False
    raw = plain_password.encode("utf-8")
    if len(raw) > MAX_PASSWORD_BYTES:
        return False
    try:
        return bcrypt.checkpw(raw, password_hash.encode("ascii"))
    except ValueError:
        # not a bcrypt hash
        return False
