"""Application layer exceptions.

These signal a broken wiring of the application rather than bad input,
and are never part of a normal request outcome.
"""

from typing import Any, TypeVar

T = TypeVar("T")


class MissingCollaboratorError(TypeError):
    """Raised when a required collaborator is absent or has the wrong type."""

    def __init__(self, name: str, expected: type) -> None:
        self.name = name
        self.expected = expected
        super().__init__(
            f"{name} must be an instance of {expected.__name__}",
        )


def require_collaborator(collaborator: Any, expected: type[T], name: str) -> T:
    """Return ``collaborator`` if it implements ``expected``, else fail fast."""
    if not isinstance(collaborator, expected):
        raise MissingCollaboratorError(name, expected)
    return collaborator
