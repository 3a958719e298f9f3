"""Identity ports consumed by the authentication use cases."""

from gatehouse.application.ports.identity.email_validator import EmailValidator
from gatehouse.application.ports.identity.encrypter import Encrypter
from gatehouse.application.ports.identity.password_hasher import PasswordHasher
from gatehouse.application.ports.identity.token_generator import TokenGenerator

__all__ = [
    "EmailValidator",
    "Encrypter",
    "PasswordHasher",
    "TokenGenerator",
]
