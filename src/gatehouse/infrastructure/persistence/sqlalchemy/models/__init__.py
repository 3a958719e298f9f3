"""SQLAlchemy models."""

from gatehouse.infrastructure.persistence.sqlalchemy.models.base import Base
from gatehouse.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = [
    "Base",
    "UserModel",
]
