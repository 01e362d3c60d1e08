"""Password hashing helpers.

Seeded passwords are stored as bcrypt hashes with a fixed cost factor so that
hashes produced by different runs are comparable in cost.
"""

from __future__ import annotations

from passlib.context import CryptContext

BCRYPT_ROUNDS = 10

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


__all__ = ["BCRYPT_ROUNDS", "pwd_context", "verify_password", "get_password_hash"]
