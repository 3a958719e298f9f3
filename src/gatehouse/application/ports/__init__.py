"""Application layer ports (aka interfaces)."""

from gatehouse.application.ports.identity import (
    EmailValidator,
    Encrypter,
    PasswordHasher,
    TokenGenerator,
)

__all__ = [
    "EmailValidator",
    "Encrypter",
    "PasswordHasher",
    "TokenGenerator",
]
