"""SQLAlchemy implementation of the user repositories."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from gatehouse.domain.shared import ensure_tz_aware
from gatehouse.domain.user import (
    AddAccountRepository,
    EmailAlreadyExistsError,
    LoadUserByEmailRepository,
    User,
    normalize_email,
)
from gatehouse.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(LoadUserByEmailRepository, AddAccountRepository):
    """SQLAlchemy implementation of the user repository interfaces.

    Changes are flushed, not committed; the caller owns the transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def load(self, email: str) -> User | None:
        stmt = select(UserModel).where(UserModel.email == normalize_email(email))
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def add(self, email: str, password_hash: str) -> User:
        user = User.create(email, password_hash)
        self._session.add(self._map_to_model(user))

        try:
            await self._session.flush()
        except IntegrityError as e:
            if "UNIQUE constraint failed" in str(e) or "unique" in str(e).lower():
                raise EmailAlreadyExistsError(user.email) from e
            raise

        logger.info("Created user: %s (email: %s)", user.id, user.email)
        return user

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            # SQLite drops tzinfo on the way back
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            email=user.email,
            password_hash=user.password_hash,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
