"""User domain exceptions.

Raised for precondition violations and business rule conflicts.
Expected login outcomes (unknown user, wrong password) are not
exceptions; they are reported as ``None`` by the use cases.
"""


class MissingCredentialError(ValueError):
    """Raised when a required credential field is empty or absent."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing param: {field}")


class EmailAlreadyExistsError(Exception):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Email already registered: {email}")
