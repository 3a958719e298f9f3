"""Authentication schemas used to document the request/response envelopes.

The routers validate bodies themselves, so these models only feed the
OpenAPI description.
"""

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Request schema for user login."""

    email: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "securepassword123",
            },
        },
    )


class SignUpRequest(BaseModel):
    """Request schema for user registration."""

    email: str
    password: str = Field(..., description="Password (8-72 bytes)")
    repeat_password: str = Field(..., alias="repeatPassword")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "securepassword123",
                "repeatPassword": "securepassword123",
            },
        },
    )


class AccessTokenResponse(BaseModel):
    access_token: str = Field(..., alias="accessToken")

    model_config = ConfigDict(populate_by_name=True)


class UserResponse(BaseModel):
    id: str
    email: str


class ErrorResponse(BaseModel):
    """Error body shared by all failure responses."""

    name: str
    message: str
    param: str | None = Field(
        default=None,
        description="Offending parameter (400 responses only)",
    )
