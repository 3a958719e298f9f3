"""User aggregate holding identity and the stored password hash."""

from datetime import datetime
from uuid import UUID, uuid4

from gatehouse.domain.shared.time import utc_now


def normalize_email(email: str) -> str:
    return email.strip().lower()


class User:
    """
    User aggregate root.

    Loaded read-only by the authentication flow. The password hash is
    opaque to the domain; only an Encrypter knows how to compare it.
    """

    def __init__(
        self,
        email: str,
        password_hash: str,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._email = normalize_email(email)
        self._password_hash = password_hash
        self._id = id or uuid4()
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @classmethod
    def create(cls, email: str, password_hash: str) -> "User":
        return cls(email=email, password_hash=password_hash)

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        email: str,
        password_hash: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            password_hash=password_hash,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email})"
