"""Password hashing for seeded accounts.

Hashes are bcrypt ($2b$) so the application's login flow can verify them.
"""
from __future__ import annotations

from passlib.context import CryptContext  # type: ignore[import-untyped]

# bcrypt cost factor used by the application for real sign-ups.
PASSWORD_HASH_ROUNDS = 10

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=PASSWORD_HASH_ROUNDS,
)


def hash_password(password: str, rounds: int = PASSWORD_HASH_ROUNDS) -> str:
    """Hash a password with bcrypt at the given cost factor."""
    return pwd_context.handler("bcrypt").using(rounds=rounds).hash(password)  # type: ignore[no-any-return]


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)  # type: ignore[no-any-return]
