"""FastAPI dependency injection for the Gatehouse API.

Provides dependencies for:
- Database sessions
- Security collaborators (bcrypt, JWT, email validation)
- Use cases and the routers wired around them
"""

import logging
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from gatehouse.application.use_cases import AuthUseCase, SignUpUseCase
from gatehouse.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)
from gatehouse.infrastructure.security import BcryptEncrypter, JWTTokenGenerator
from gatehouse.infrastructure.validation import EmailValidatorAdapter
from gatehouse.presentation.api.config import get_api_settings
from gatehouse.presentation.routers import LoginRouter, SignUpRouter
from gatehouse_config.settings import Settings

logger = logging.getLogger(__name__)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Database Session
# -----------------------------------------------------------------------------


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the application's
    shared engine/pool.

    Yields
    ------
    AsyncSession for database operations
    """
    async with request.app.state.session_maker() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_user_repository(session: DBSession) -> UserRepositorySQLAlchemy:
    return UserRepositorySQLAlchemy(session)


UserRepository = Annotated[UserRepositorySQLAlchemy, Depends(get_user_repository)]


# -----------------------------------------------------------------------------
# Security collaborators
# -----------------------------------------------------------------------------


def get_encrypter(settings: SettingsDep) -> BcryptEncrypter:
    return BcryptEncrypter(rounds=settings.bcrypt_rounds)


def get_token_generator(settings: SettingsDep) -> JWTTokenGenerator:
    return JWTTokenGenerator(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_email_validator() -> EmailValidatorAdapter:
    return EmailValidatorAdapter()


Encrypter = Annotated[BcryptEncrypter, Depends(get_encrypter)]
TokenGenerator = Annotated[JWTTokenGenerator, Depends(get_token_generator)]
EmailValidator = Annotated[EmailValidatorAdapter, Depends(get_email_validator)]


# -----------------------------------------------------------------------------
# Use cases and routers
# -----------------------------------------------------------------------------


def get_auth_use_case(
    user_repository: UserRepository,
    encrypter: Encrypter,
    token_generator: TokenGenerator,
) -> AuthUseCase:
    return AuthUseCase(
        load_user_by_email_repository=user_repository,
        encrypter=encrypter,
        token_generator=token_generator,
    )


def get_signup_use_case(
    user_repository: UserRepository,
    encrypter: Encrypter,
) -> SignUpUseCase:
    return SignUpUseCase(
        load_user_by_email_repository=user_repository,
        add_account_repository=user_repository,
        password_hasher=encrypter,
    )


AuthUseCaseDep = Annotated[AuthUseCase, Depends(get_auth_use_case)]
SignUpUseCaseDep = Annotated[SignUpUseCase, Depends(get_signup_use_case)]


def get_login_router(
    auth_use_case: AuthUseCaseDep,
    email_validator: EmailValidator,
) -> LoginRouter:
    return LoginRouter(auth_use_case, email_validator=email_validator)


def get_signup_router(
    signup_use_case: SignUpUseCaseDep,
    email_validator: EmailValidator,
) -> SignUpRouter:
    return SignUpRouter(signup_use_case, email_validator=email_validator)


LoginRouterDep = Annotated[LoginRouter, Depends(get_login_router)]
SignUpRouterDep = Annotated[SignUpRouter, Depends(get_signup_router)]
