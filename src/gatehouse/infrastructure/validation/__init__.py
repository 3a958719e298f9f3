from gatehouse.infrastructure.validation.email_validator import EmailValidatorAdapter

__all__ = ["EmailValidatorAdapter"]
