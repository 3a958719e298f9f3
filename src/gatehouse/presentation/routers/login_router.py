"""Login router: email/password in, access token out."""

import logging
from collections.abc import Mapping

from gatehouse.application.exceptions import require_collaborator
from gatehouse.application.ports.identity import EmailValidator
from gatehouse.application.use_cases import AuthUseCase
from gatehouse.presentation.http import (
    HttpRequest,
    HttpResponse,
    InvalidParamError,
    ParamError,
    extract_params,
)
from gatehouse.presentation.routers.base import Router, resolve

logger = logging.getLogger(__name__)


class LoginRouter(Router):
    """
    Route a login request through the AuthUseCase.

    Produces 200 with the access token, 400 for missing or invalid
    params, 401 for rejected credentials and 500 for anything else.
    Every exception raised by a collaborator ends as a 500.
    """

    def __init__(
        self,
        auth_use_case: AuthUseCase,
        email_validator: EmailValidator | None = None,
    ):
        self._auth_use_case = require_collaborator(
            auth_use_case,
            AuthUseCase,
            "auth_use_case",
        )
        self._email_validator = (
            require_collaborator(email_validator, EmailValidator, "email_validator")
            if email_validator is not None
            else None
        )

    async def route(self, http_request: HttpRequest | None = None) -> HttpResponse:
        try:
            return await self._route(http_request)
        except Exception as e:
            logger.exception("Login failed: %s", e)
            return HttpResponse.server_error()

    async def _route(self, http_request: HttpRequest | None) -> HttpResponse:
        if http_request is None or not isinstance(http_request.body, Mapping):
            logger.warning("Login request without a body")
            return HttpResponse.server_error()

        params = extract_params(http_request.body, "email", "password")
        if isinstance(params, ParamError):
            return HttpResponse.bad_request(params)

        email, password = params["email"], params["password"]

        if self._email_validator is not None:
            is_valid = await resolve(self._email_validator.is_valid(email))
            if not is_valid:
                return HttpResponse.bad_request(InvalidParamError("email"))

        access_token = await self._auth_use_case.authenticate(email, password)
        if access_token is None:
            return HttpResponse.unauthorized()

        return HttpResponse.ok({"accessToken": access_token})
