"""User domain.

This domain handles:
- User aggregate (identity: id, email, password hash)
- Repository interfaces for lookup and account creation
"""

from gatehouse.domain.user.aggregates import User, normalize_email
from gatehouse.domain.user.exceptions import (
    EmailAlreadyExistsError,
    MissingCredentialError,
)
from gatehouse.domain.user.repositories import (
    AddAccountRepository,
    LoadUserByEmailRepository,
)

__all__ = [
    "AddAccountRepository",
    "EmailAlreadyExistsError",
    "LoadUserByEmailRepository",
    "MissingCredentialError",
    "User",
    "normalize_email",
]
