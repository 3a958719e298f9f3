"""Signup router: creates an account from email and a repeated password."""

import logging
from collections.abc import Mapping

from gatehouse.application.exceptions import require_collaborator
from gatehouse.application.ports.identity import EmailValidator
from gatehouse.application.use_cases import SignUpUseCase
from gatehouse.domain.user import EmailAlreadyExistsError
from gatehouse.presentation.http import (
    HttpRequest,
    HttpResponse,
    InvalidParamError,
    ParamError,
    extract_params,
)
from gatehouse.presentation.routers.base import Router, resolve

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8
# bcrypt only considers the first 72 bytes
MAX_PASSWORD_BYTES = 72


class SignUpRouter(Router):
    def __init__(
        self,
        signup_use_case: SignUpUseCase,
        email_validator: EmailValidator,
    ):
        self._signup_use_case = require_collaborator(
            signup_use_case,
            SignUpUseCase,
            "signup_use_case",
        )
        self._email_validator = require_collaborator(
            email_validator,
            EmailValidator,
            "email_validator",
        )

    async def route(self, http_request: HttpRequest | None = None) -> HttpResponse:
        try:
            return await self._route(http_request)
        except Exception as e:
            logger.exception("Registration failed: %s", e)
            return HttpResponse.server_error()

    async def _route(self, http_request: HttpRequest | None) -> HttpResponse:
        if http_request is None or not isinstance(http_request.body, Mapping):
            logger.warning("Signup request without a body")
            return HttpResponse.server_error()

        params = extract_params(
            http_request.body,
            "email",
            "password",
            "repeatPassword",
        )
        if isinstance(params, ParamError):
            return HttpResponse.bad_request(params)

        email = params["email"]
        password = params["password"]

        if not await resolve(self._email_validator.is_valid(email)):
            return HttpResponse.bad_request(InvalidParamError("email"))

        password_bytes = len(password.encode("utf-8"))
        if len(password) < MIN_PASSWORD_LENGTH or password_bytes > MAX_PASSWORD_BYTES:
            return HttpResponse.bad_request(InvalidParamError("password"))

        try:
            user = await self._signup_use_case.sign_up(
                email,
                password,
                params["repeatPassword"],
            )
        except EmailAlreadyExistsError:
            return HttpResponse.conflict()

        if user is None:
            return HttpResponse.bad_request(InvalidParamError("repeatPassword"))

        return HttpResponse.created({"id": str(user.id), "email": user.email})
