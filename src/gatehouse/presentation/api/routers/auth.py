"""Authentication router for login and signup."""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from gatehouse.presentation.api.adapters import adapt
from gatehouse.presentation.api.dependencies import (
    DBSession,
    LoginRouterDep,
    SettingsDep,
    SignUpRouterDep,
)
from gatehouse.presentation.api.schemas.auth import (
    AccessTokenResponse,
    ErrorResponse,
    LoginRequest,
    SignUpRequest,
    UserResponse,
)
from gatehouse.presentation.http import HttpResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _json_request_body(model: type) -> dict:
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        },
    }


@router.post(
    "/login",
    summary="Authenticate user",
    response_model=None,
    openapi_extra=_json_request_body(LoginRequest),
    responses={
        200: {"model": AccessTokenResponse, "description": "Login successful"},
        400: {"model": ErrorResponse, "description": "Missing or invalid param"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
        500: {"model": ErrorResponse, "description": "Server error"},
    },
)
async def login(request: Request, login_router: LoginRouterDep) -> JSONResponse:
    """
    Authenticate with email and password.

    Returns an access token on success. Unknown email and wrong password
    are both answered with 401.
    """
    return await adapt(login_router, request)


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    response_model=None,
    openapi_extra=_json_request_body(SignUpRequest),
    responses={
        201: {"model": UserResponse, "description": "User registered successfully"},
        400: {"model": ErrorResponse, "description": "Missing or invalid param"},
        403: {"model": ErrorResponse, "description": "Registration disabled"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
        500: {"model": ErrorResponse, "description": "Server error"},
    },
)
async def signup(
    request: Request,
    signup_router: SignUpRouterDep,
    session: DBSession,
    settings: SettingsDep,
) -> JSONResponse:
    if not settings.registration_enabled:
        envelope = HttpResponse.forbidden("Registration is disabled")
        return JSONResponse(status_code=envelope.status_code, content=envelope.body)

    response = await adapt(signup_router, request)

    if response.status_code == status.HTTP_201_CREATED:
        await session.commit()
        logger.info("New user registered")
    else:
        await session.rollback()

    return response
