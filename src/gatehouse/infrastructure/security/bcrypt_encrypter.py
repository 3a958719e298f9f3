"""Password hashing and comparison using bcrypt."""

import bcrypt

from gatehouse.application.ports.identity import Encrypter, PasswordHasher


class BcryptEncrypter(Encrypter, PasswordHasher):
    """Bcrypt implementation of the Encrypter and PasswordHasher ports.

    Examples
    --------
    >>> encrypter = BcryptEncrypter(rounds=4)
    >>> password_hash = await encrypter.hash("my_secure_password")
    >>> await encrypter.compare("my_secure_password", password_hash)
    True
    >>> await encrypter.compare("wrong_password", password_hash)
    False
    """

    DEFAULT_ROUNDS = 12

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        """Initialize the encrypter.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Higher values
            are more secure but slower.
        """
        self._rounds = rounds

    async def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    async def compare(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            # Invalid hash format or password over bcrypt's 72 byte limit
            return False
