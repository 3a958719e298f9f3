"""Access token generation port."""

from abc import ABC, abstractmethod
from uuid import UUID


class TokenGenerator(ABC):
    """Issues opaque access tokens for authenticated users.

    The token format is owned entirely by the implementation; callers
    only pass it through to the client.
    """

    @abstractmethod
    async def generate(self, user_id: UUID) -> str:
        """Create an access token for ``user_id``."""
