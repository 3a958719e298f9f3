"""Transport-independent request and response envelopes."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from fastapi import status

from gatehouse.presentation.http.errors import (
    EmailInUseError,
    ForbiddenError,
    ParamError,
    ServerError,
    UnauthorizedError,
)


@dataclass(frozen=True)
class HttpRequest:
    """Inbound envelope built by the transport adapter.

    ``body`` is None when the transport could not produce one.
    """

    body: Mapping[str, Any] | None = None


@dataclass(frozen=True)
class HttpResponse:
    """Outbound envelope; ``status_code`` becomes the HTTP status."""

    status_code: int
    body: Any

    @classmethod
    def ok(cls, body: Any) -> "HttpResponse":
        return cls(status_code=status.HTTP_200_OK, body=body)

    @classmethod
    def created(cls, body: Any) -> "HttpResponse":
        return cls(status_code=status.HTTP_201_CREATED, body=body)

    @classmethod
    def bad_request(cls, error: ParamError) -> "HttpResponse":
        return cls(status_code=status.HTTP_400_BAD_REQUEST, body=error.to_body())

    @classmethod
    def unauthorized(cls) -> "HttpResponse":
        return cls(
            status_code=status.HTTP_401_UNAUTHORIZED,
            body=UnauthorizedError().to_body(),
        )

    @classmethod
    def forbidden(cls, reason: str) -> "HttpResponse":
        return cls(
            status_code=status.HTTP_403_FORBIDDEN,
            body=ForbiddenError(reason).to_body(),
        )

    @classmethod
    def conflict(cls) -> "HttpResponse":
        return cls(
            status_code=status.HTTP_409_CONFLICT,
            body=EmailInUseError().to_body(),
        )

    @classmethod
    def server_error(cls) -> "HttpResponse":
        return cls(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            body=ServerError().to_body(),
        )
