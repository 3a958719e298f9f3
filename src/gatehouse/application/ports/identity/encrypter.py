"""Credential comparison port."""

from abc import ABC, abstractmethod


class Encrypter(ABC):
    """Compares a plaintext password with a stored password hash."""

    @abstractmethod
    async def compare(self, password: str, password_hash: str) -> bool:
        """Return True if ``password`` matches ``password_hash``."""
