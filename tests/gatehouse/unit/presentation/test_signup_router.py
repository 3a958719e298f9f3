"""Unit tests for SignUpRouter."""

from unittest.mock import AsyncMock, Mock

import pytest

from gatehouse.application.exceptions import MissingCollaboratorError
from gatehouse.application.ports.identity import EmailValidator
from gatehouse.application.use_cases import SignUpUseCase
from gatehouse.domain.user import EmailAlreadyExistsError
from gatehouse.presentation.http import HttpRequest
from gatehouse.presentation.routers import SignUpRouter
from tests.shared.fixtures.factories import TestUserFactory

PASSWORD = "correct horse"


def signup_body(**overrides):
    body = {
        "email": TestUserFactory.DEFAULT_EMAIL,
        "password": PASSWORD,
        "repeatPassword": PASSWORD,
    }
    body.update(overrides)
    return body


@pytest.fixture
def signup_use_case():
    use_case = AsyncMock(spec=SignUpUseCase)
    use_case.sign_up.return_value = TestUserFactory.default_user()
    return use_case


@pytest.fixture
def email_validator():
    validator = Mock(spec=EmailValidator)
    validator.is_valid.return_value = True
    return validator


@pytest.fixture
def router(signup_use_case, email_validator):
    return SignUpRouter(signup_use_case, email_validator)


class TestSignUpRouterConstruction:
    def test_email_validator_is_required(self, signup_use_case):
        with pytest.raises(MissingCollaboratorError) as exc_info:
            SignUpRouter(signup_use_case, None)

        assert exc_info.value.name == "email_validator"

    def test_missing_use_case_raises(self, email_validator):
        with pytest.raises(MissingCollaboratorError):
            SignUpRouter(None, email_validator)


class TestSignUpRouterValidation:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["email", "password", "repeatPassword"])
    async def test_missing_field_returns_400(self, router, signup_use_case, field):
        body = signup_body()
        del body[field]

        response = await router.route(HttpRequest(body=body))

        assert response.status_code == 400
        assert response.body["name"] == "MissingParamError"
        assert response.body["param"] == field
        signup_use_case.sign_up.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_email_returns_400(self, router, email_validator):
        email_validator.is_valid.return_value = False

        response = await router.route(HttpRequest(body=signup_body()))

        assert response.status_code == 400
        assert response.body["param"] == "email"

    @pytest.mark.asyncio
    async def test_short_password_returns_400(self, router, signup_use_case):
        response = await router.route(
            HttpRequest(body=signup_body(password="short", repeatPassword="short")),
        )

        assert response.status_code == 400
        assert response.body == {
            "name": "InvalidParamError",
            "message": "Invalid param: password",
            "param": "password",
        }
        signup_use_case.sign_up.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_password_over_72_bytes_returns_400(self, router):
        # 37 two-byte characters exceed bcrypt's limit
        long_password = "é" * 37

        response = await router.route(
            HttpRequest(
                body=signup_body(password=long_password, repeatPassword=long_password),
            ),
        )

        assert response.status_code == 400
        assert response.body["param"] == "password"

    @pytest.mark.asyncio
    async def test_password_mismatch_returns_400(self, router, signup_use_case):
        signup_use_case.sign_up.return_value = None

        response = await router.route(
            HttpRequest(body=signup_body(repeatPassword="different password")),
        )

        assert response.status_code == 400
        assert response.body["param"] == "repeatPassword"


class TestSignUpRouterOutcome:
    @pytest.mark.asyncio
    async def test_created_returns_201_with_user(self, router, signup_use_case):
        response = await router.route(HttpRequest(body=signup_body()))

        assert response.status_code == 201
        assert response.body == {
            "id": str(TestUserFactory.DEFAULT_ID),
            "email": TestUserFactory.DEFAULT_EMAIL,
        }
        signup_use_case.sign_up.assert_awaited_once_with(
            TestUserFactory.DEFAULT_EMAIL,
            PASSWORD,
            PASSWORD,
        )

    @pytest.mark.asyncio
    async def test_existing_email_returns_409(self, router, signup_use_case):
        signup_use_case.sign_up.side_effect = EmailAlreadyExistsError("x@mail.com")

        response = await router.route(HttpRequest(body=signup_body()))

        assert response.status_code == 409
        assert response.body["name"] == "EmailInUseError"

    @pytest.mark.asyncio
    async def test_unexpected_error_returns_500(self, router, signup_use_case):
        signup_use_case.sign_up.side_effect = RuntimeError("boom")

        response = await router.route(HttpRequest(body=signup_body()))

        assert response.status_code == 500
        assert response.body == {"name": "ServerError", "message": "Internal error"}

    @pytest.mark.asyncio
    async def test_no_request_returns_500(self, router):
        response = await router.route(None)

        assert response.status_code == 500
