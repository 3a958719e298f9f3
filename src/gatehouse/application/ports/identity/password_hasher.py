"""Password hashing port used when creating accounts."""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    @abstractmethod
    async def hash(self, password: str) -> str:
        """Return a hash of ``password`` suitable for storage."""
