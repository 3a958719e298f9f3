"""JWT access token generation."""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from gatehouse.application.ports.identity import TokenGenerator


class JWTTokenGenerator(TokenGenerator):
    """Issues signed, short-lived JWT access tokens.

    Examples
    --------
    >>> generator = JWTTokenGenerator(secret_key="your-secret-key")
    >>> token = await generator.generate(user_id)
    """

    DEFAULT_ACCESS_EXPIRE_HOURS = 1
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        access_token_expire_hours: int = DEFAULT_ACCESS_EXPIRE_HOURS,
    ):
        """Initialize the token generator.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        access_token_expire_hours
            Hours until an access token expires
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_expire = timedelta(hours=access_token_expire_hours)

    async def generate(self, user_id: UUID) -> str:
        now = datetime.now(tz=timezone.utc)
        payload = {
            "sub": str(user_id),
            "type": "access",
            "iat": now,
            "exp": now + self._access_expire,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)
