from gatehouse.domain.user.repositories.user_repository import (
    AddAccountRepository,
    LoadUserByEmailRepository,
)

__all__ = ["AddAccountRepository", "LoadUserByEmailRepository"]
