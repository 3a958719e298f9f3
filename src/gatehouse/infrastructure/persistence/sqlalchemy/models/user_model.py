"""Table backing the User aggregate."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from gatehouse.domain.shared.time import utc_now
from gatehouse.infrastructure.persistence.sqlalchemy.models.base import Base

EMAIL_MAX_LENGTH = 255
# bcrypt output is 60 characters; leave room for other schemes
PASSWORD_HASH_MAX_LENGTH = 255


class UserModel(Base):
    """One row per registered account.

    ``email`` holds the normalized address, so the unique index also
    rejects addresses that differ only in case.
    """

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    email: Mapped[str] = mapped_column(
        String(EMAIL_MAX_LENGTH),
        unique=True,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(PASSWORD_HASH_MAX_LENGTH))
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email})>"
