"""Email syntax validation port."""

from abc import ABC, abstractmethod
from collections.abc import Awaitable


class EmailValidator(ABC):
    """Decides whether a string is a syntactically valid email address.

    Implementations may be synchronous or asynchronous; callers must
    accept either a ``bool`` or an awaitable resolving to one.
    """

    @abstractmethod
    def is_valid(self, email: str) -> bool | Awaitable[bool]:
        """Return whether ``email`` is a valid address."""
