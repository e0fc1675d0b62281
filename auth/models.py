"""Request-scoped identity produced by the auth gate."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AuthContext:
    user_id: int


__all__ = ["AuthContext"]
