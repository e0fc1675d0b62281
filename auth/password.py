"""
Password hashing and verification.

Uses bcrypt for password hashing with automatic
salting and configurable work factor.
"""

from __future__ import annotations

from functools import cached_property

import bcrypt

# bcrypt only looks at the first 72 bytes and current releases refuse longer input
MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """One-way password hashing with a tunable bcrypt work factor."""

    def __init__(self, rounds: int = 12) -> None:
        self.rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a password with bcrypt (auto-salted)."""
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=self.rounds)).decode()

    def verify(self, password: str, password_hash: str) -> bool:
        """Constant-time comparison against a bcrypt hash.

        A truncated or otherwise malformed hash is a mismatch, not an error.
        """
        try:
            return bcrypt.checkpw(password.encode(), password_hash.encode())
        except (ValueError, TypeError):
            return False

    def verify_dummy(self, password: str) -> bool:
        """Burn one comparison's worth of work; used when no user matched."""
        self.verify(password, self._dummy_hash)
        return False

    @cached_property
    def _dummy_hash(self) -> str:
        return self.hash("dummy-password")
