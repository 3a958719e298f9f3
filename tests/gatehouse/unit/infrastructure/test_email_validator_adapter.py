"""Unit tests for EmailValidatorAdapter."""

import pytest

from gatehouse.infrastructure.validation import EmailValidatorAdapter


@pytest.fixture
def validator():
    return EmailValidatorAdapter()


class TestEmailValidatorAdapter:
    @pytest.mark.parametrize(
        "email",
        ["valid_email@mail.com", "first.last+tag@mail.com"],
    )
    def test_accepts_valid_addresses(self, validator, email):
        assert validator.is_valid(email) is True

    @pytest.mark.parametrize(
        "email",
        ["invalid_email", "missing-domain@", "@example.com", "two@@example.com"],
    )
    def test_rejects_invalid_addresses(self, validator, email):
        assert validator.is_valid(email) is False
