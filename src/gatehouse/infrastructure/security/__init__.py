"""Security adapters - password hashing and access tokens."""

from gatehouse.infrastructure.security.bcrypt_encrypter import BcryptEncrypter
from gatehouse.infrastructure.security.jwt_token_generator import JWTTokenGenerator

__all__ = [
    "BcryptEncrypter",
    "JWTTokenGenerator",
]
