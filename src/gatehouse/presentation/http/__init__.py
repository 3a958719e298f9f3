"""HTTP envelopes and error bodies shared by the routers."""

from gatehouse.presentation.http.envelopes import HttpRequest, HttpResponse
from gatehouse.presentation.http.errors import (
    EmailInUseError,
    ForbiddenError,
    HttpError,
    InvalidParamError,
    MissingParamError,
    ParamError,
    ServerError,
    UnauthorizedError,
)
from gatehouse.presentation.http.params import extract_params

__all__ = [
    "EmailInUseError",
    "ForbiddenError",
    "HttpError",
    "HttpRequest",
    "HttpResponse",
    "InvalidParamError",
    "MissingParamError",
    "ParamError",
    "ServerError",
    "UnauthorizedError",
    "extract_params",
]
