"""Password hashing utilities.

Passwords are stored as bcrypt hashes. The stored value is opaque to callers:
they only ever hash a new password or verify a candidate against a stored hash.
"""

import logging

import bcrypt

log = logging.getLogger(__name__)

BCRYPT_ROUNDS = 12


def hash_password(password: str) -> str:
    """
    Hash a password.

    Args:
        password: The plain text password to hash

    Returns:
        The bcrypt hash of the password as a string
    """
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(stored_hash: str, provided_password: str) -> bool:
    """
    Verify a password against a stored hash.

    Args:
        stored_hash: The stored password hash
        provided_password: The password to verify

    Returns:
        True if the password matches, False otherwise
    """
    if not stored_hash or not provided_password:
        return False

    try:
        return bcrypt.checkpw(provided_password.encode("utf-8"), stored_hash.encode("utf-8"))
    except ValueError as e:
        # Stored value is not a bcrypt hash
        log.warning(f"Password verification against malformed hash: {e}")
        return False
