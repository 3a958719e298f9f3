"""Unit tests for the User aggregate."""

from uuid import UUID

from gatehouse.domain.user import User, normalize_email
from tests.shared.fixtures.factories import TestUserFactory


class TestNormalizeEmail:
    def test_lowercases_and_strips(self):
        assert normalize_email("  Alice@Example.COM ") == "alice@example.com"


class TestUserCreate:
    def test_create_assigns_id_and_timestamps(self):
        user = User.create("Bob@Example.com", "hash")

        assert isinstance(user.id, UUID)
        assert user.email == "bob@example.com"
        assert user.password_hash == "hash"
        assert user.created_at.tzinfo is not None
        assert user.updated_at.tzinfo is not None

    def test_two_created_users_get_distinct_ids(self):
        first = User.create("a@example.com", "hash")
        second = User.create("a@example.com", "hash")

        assert first.id != second.id
        assert first != second


class TestUserReconstitute:
    def test_reconstitute_keeps_persisted_values(self):
        user = TestUserFactory.default_user()

        assert user.id == TestUserFactory.DEFAULT_ID
        assert user.email == TestUserFactory.DEFAULT_EMAIL
        assert user.created_at == TestUserFactory.CREATED_AT

    def test_equality_is_by_id(self):
        first = TestUserFactory.default_user(password_hash="one")
        second = TestUserFactory.default_user(password_hash="two")

        assert first == second
        assert hash(first) == hash(second)
        assert first != TestUserFactory.alice()

    def test_repr_does_not_leak_password_hash(self):
        user = TestUserFactory.default_user(password_hash="secret-hash")

        assert "secret-hash" not in repr(user)
