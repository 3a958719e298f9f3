"""Application use cases for login and signup."""

from gatehouse.application.use_cases.auth_use_case import AuthUseCase
from gatehouse.application.use_cases.signup_use_case import SignUpUseCase

__all__ = ["AuthUseCase", "SignUpUseCase"]
