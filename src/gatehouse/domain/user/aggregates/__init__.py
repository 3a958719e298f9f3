from gatehouse.domain.user.aggregates.user import User, normalize_email

__all__ = ["User", "normalize_email"]
