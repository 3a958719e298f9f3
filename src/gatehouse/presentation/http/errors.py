"""Error bodies returned in response envelopes.

These are plain values, not exceptions: routers pick one and place its
body in an HttpResponse.
"""

from dataclasses import dataclass
from typing import Any, ClassVar


@dataclass(frozen=True)
class HttpError:
    """Base for all error bodies."""

    name: ClassVar[str] = "Error"

    @property
    def message(self) -> str:
        raise NotImplementedError

    def to_body(self) -> dict[str, Any]:
        return {"name": self.name, "message": self.message}


@dataclass(frozen=True)
class ParamError(HttpError):
    """A request parameter was missing or invalid."""

    param: str

    def to_body(self) -> dict[str, Any]:
        return {**super().to_body(), "param": self.param}


@dataclass(frozen=True)
class MissingParamError(ParamError):
    name: ClassVar[str] = "MissingParamError"

    @property
    def message(self) -> str:
        return f"Missing param: {self.param}"


@dataclass(frozen=True)
class InvalidParamError(ParamError):
    name: ClassVar[str] = "InvalidParamError"

    @property
    def message(self) -> str:
        return f"Invalid param: {self.param}"


@dataclass(frozen=True)
class UnauthorizedError(HttpError):
    name: ClassVar[str] = "UnauthorizedError"

    @property
    def message(self) -> str:
        return "Unauthorized"


@dataclass(frozen=True)
class ForbiddenError(HttpError):
    name: ClassVar[str] = "ForbiddenError"

    reason: str = "Forbidden"

    @property
    def message(self) -> str:
        return self.reason


@dataclass(frozen=True)
class EmailInUseError(HttpError):
    name: ClassVar[str] = "EmailInUseError"

    @property
    def message(self) -> str:
        return "Email address is already registered"


@dataclass(frozen=True)
class ServerError(HttpError):
    """Generic failure; never carries internal detail."""

    name: ClassVar[str] = "ServerError"

    @property
    def message(self) -> str:
        return "Internal error"
