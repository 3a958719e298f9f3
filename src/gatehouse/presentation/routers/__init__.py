"""Transport-independent routers."""

from gatehouse.presentation.routers.base import Router
from gatehouse.presentation.routers.login_router import LoginRouter
from gatehouse.presentation.routers.signup_router import SignUpRouter

__all__ = ["LoginRouter", "Router", "SignUpRouter"]
