"""Credential Store — salted bcrypt hashing and verification of user passwords.

Invariants:
    - hash_password never returns an empty or implausibly short hash (raises instead)
    - Two hashes of the same plaintext differ (fresh salt per call)
    - verify_password never raises: a malformed stored hash is a failed verification
    - Any backend exception while hashing surfaces as PasswordHashingError
    - Callers verify against dummy_hash() when no identity was found, so sign-in costs
      one bcrypt check either way

Design Decisions:
    - bcrypt directly over passlib: one algorithm, no scheme registry to configure
    - Cost factor is a parameter: production reads BCRYPT_ROUNDS, tests pass 4
    - MAX_PASSWORD_BYTES exported so request validation rejects input bcrypt cannot take
"""

import logging
from functools import lru_cache

import bcrypt

from freight.core.errors import PasswordHashingError

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 12
MIN_HASH_LENGTH = 8
MAX_PASSWORD_BYTES = 72


def password_too_long(plaintext: str) -> bool:
    return len(plaintext.encode("utf-8")) > MAX_PASSWORD_BYTES


def hash_password(plaintext: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """One-way salted hash. Raises PasswordHashingError if the backend misbehaves."""
    try:
        hashed = bcrypt.hashpw(
            plaintext.encode("utf-8"), bcrypt.gensalt(rounds=rounds),
        ).decode("utf-8")
    except Exception as e:
        raise PasswordHashingError(f"bcrypt failed: {e}") from e
    if not hashed or len(hashed) < MIN_HASH_LENGTH:
        raise PasswordHashingError("Hashing backend returned an unusable hash")
    return hashed


DUMMY_PASSWORD = "freight-dummy-password"


@lru_cache
def dummy_hash(rounds: int = DEFAULT_ROUNDS) -> str:
    """A real hash at `rounds` cost, verified against when no identity was found."""
    return hash_password(DUMMY_PASSWORD, rounds=rounds)


def verify_password(plaintext: str, password_hash: str) -> bool:
    """True iff plaintext matches password_hash under its embedded salt and cost."""
    try:
        return bcrypt.checkpw(
            plaintext.encode("utf-8"), password_hash.encode("utf-8"),
        )
    except ValueError as e:
        logger.warning(f"Password verification rejected input: {e}")
        return False
