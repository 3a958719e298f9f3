"""User repository interfaces.

Each interface covers a single capability so that use cases only
depend on what they actually call.
"""

from abc import ABC, abstractmethod

from gatehouse.domain.user.aggregates.user import User


class LoadUserByEmailRepository(ABC):
    """Looks up a user record by email address."""

    @abstractmethod
    async def load(self, email: str) -> User | None:
        """Return the user registered under ``email``, or None."""


class AddAccountRepository(ABC):
    """Stores a new user account."""

    @abstractmethod
    async def add(self, email: str, password_hash: str) -> User:
        """Persist a new account and return it.

        Raises
        ------
        EmailAlreadyExistsError
            If an account with this email already exists
        """
