"""SQLAlchemy implementation for gatehouse persistence.

Provides:
- Base: Declarative base for models
- UserModel: SQLAlchemy model for users
- UserRepositorySQLAlchemy: Repository implementation for users
"""

from gatehouse.infrastructure.persistence.sqlalchemy.models import Base, UserModel
from gatehouse.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
