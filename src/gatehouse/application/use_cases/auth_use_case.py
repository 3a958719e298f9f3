"""Use case for authenticating a user with email and password."""

import logging

from gatehouse.application.exceptions import require_collaborator
from gatehouse.application.ports.identity import Encrypter, TokenGenerator
from gatehouse.domain.user import LoadUserByEmailRepository, MissingCredentialError

logger = logging.getLogger(__name__)


class AuthUseCase:
    """
    Authenticate credentials and issue an access token.

    Unknown email and wrong password both yield ``None`` so callers can
    not tell which part of the credentials was wrong. Collaborator
    failures are not caught here; they propagate to the router.
    """

    def __init__(
        self,
        load_user_by_email_repository: LoadUserByEmailRepository,
        encrypter: Encrypter,
        token_generator: TokenGenerator,
    ):
        self._load_user_by_email_repository = require_collaborator(
            load_user_by_email_repository,
            LoadUserByEmailRepository,
            "load_user_by_email_repository",
        )
        self._encrypter = require_collaborator(encrypter, Encrypter, "encrypter")
        self._token_generator = require_collaborator(
            token_generator,
            TokenGenerator,
            "token_generator",
        )

    async def authenticate(self, email: str, password: str) -> str | None:
        if not email:
            raise MissingCredentialError("email")
        if not password:
            raise MissingCredentialError("password")

        user = await self._load_user_by_email_repository.load(email)
        if user is None:
            logger.debug("Login rejected for %s", email)
            return None

        is_valid = await self._encrypter.compare(password, user.password_hash)
        if not is_valid:
            logger.debug("Login rejected for %s", email)
            return None

        access_token = await self._token_generator.generate(user.id)

        logger.info("User logged in: %s", user.id)
        return access_token
