"""Email syntax validation backed by the email-validator package."""

import logging

from email_validator import EmailNotValidError, validate_email

from gatehouse.application.ports.identity import EmailValidator

logger = logging.getLogger(__name__)


class EmailValidatorAdapter(EmailValidator):
    """Checks address syntax only; no DNS deliverability lookups."""

    def is_valid(self, email: str) -> bool:
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError as e:
            logger.debug("Rejected email %r: %s", email, e)
            return False
        return True
