"""Base class for transport-independent routers."""

import inspect
from abc import ABC, abstractmethod
from collections.abc import Awaitable
from typing import TypeVar

from gatehouse.presentation.http import HttpRequest, HttpResponse

T = TypeVar("T")


class Router(ABC):
    """Maps a request envelope to a response envelope.

    Implementations must never raise from ``route``.
    """

    @abstractmethod
    async def route(self, http_request: HttpRequest | None = None) -> HttpResponse:
        """Handle one request."""


async def resolve(value: T | Awaitable[T]) -> T:
    """Await ``value`` if a collaborator returned an awaitable."""
    if inspect.isawaitable(value):
        return await value
    return value
