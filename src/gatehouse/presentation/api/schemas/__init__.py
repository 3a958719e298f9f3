from gatehouse.presentation.api.schemas.auth import (
    AccessTokenResponse,
    ErrorResponse,
    LoginRequest,
    SignUpRequest,
    UserResponse,
)

__all__ = [
    "AccessTokenResponse",
    "ErrorResponse",
    "LoginRequest",
    "SignUpRequest",
    "UserResponse",
]
