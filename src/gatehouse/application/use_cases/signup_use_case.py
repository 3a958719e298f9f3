"""Use case for creating a new account with email and password."""

import logging

from gatehouse.application.exceptions import require_collaborator
from gatehouse.application.ports.identity import PasswordHasher
from gatehouse.domain.user import (
    AddAccountRepository,
    EmailAlreadyExistsError,
    LoadUserByEmailRepository,
    MissingCredentialError,
    User,
)

logger = logging.getLogger(__name__)


class SignUpUseCase:
    """Register an account after checking the repeated password."""

    def __init__(
        self,
        load_user_by_email_repository: LoadUserByEmailRepository,
        add_account_repository: AddAccountRepository,
        password_hasher: PasswordHasher,
    ):
        self._load_user_by_email_repository = require_collaborator(
            load_user_by_email_repository,
            LoadUserByEmailRepository,
            "load_user_by_email_repository",
        )
        self._add_account_repository = require_collaborator(
            add_account_repository,
            AddAccountRepository,
            "add_account_repository",
        )
        self._password_hasher = require_collaborator(
            password_hasher,
            PasswordHasher,
            "password_hasher",
        )

    async def sign_up(
        self,
        email: str,
        password: str,
        repeat_password: str,
    ) -> User | None:
        """Create the account, or return None if the passwords differ.

        Raises
        ------
        MissingCredentialError
            If any field is empty
        EmailAlreadyExistsError
            If the email is already registered
        """
        if not email:
            raise MissingCredentialError("email")
        if not password:
            raise MissingCredentialError("password")
        if not repeat_password:
            raise MissingCredentialError("repeatPassword")

        if password != repeat_password:
            return None

        existing = await self._load_user_by_email_repository.load(email)
        if existing is not None:
            raise EmailAlreadyExistsError(email)

        password_hash = await self._password_hasher.hash(password)
        user = await self._add_account_repository.add(email, password_hash)

        logger.info("User registered: %s", user.id)
        return user
