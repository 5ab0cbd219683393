"""
Project Backend — Password Hashing
====================================

What:  bcrypt hashing for stored user passwords.
Why:   Passwords are validated in plain text, then only the hash is persisted.
How:   bcrypt with a random salt per hash; the work factor comes from settings.
"""

import bcrypt


def hash_password(password: str, rounds: int = 12) -> str:
    """
    Hash a plain text password; the salt is embedded in the returned string.

    bcrypt rejects input over 72 bytes, so `password` must already have
    passed app.validation.validate_password.
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

