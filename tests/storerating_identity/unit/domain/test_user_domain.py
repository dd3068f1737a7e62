"""Unit tests for the user aggregate and its value objects."""

import pytest

from storerating_identity.domain.user import (
    Email,
    InvalidEmailError,
    User,
    UserRole,
    satisfies_password_policy,
)


class TestEmail:
    def test_normalizes_case_and_whitespace(self):
        assert Email("  Alex@Example.COM ").value == "alex@example.com"

    @pytest.mark.parametrize("value", ["", "no-at-sign", "a@b", "a@@example.com"])
    def test_rejects_invalid(self, value):
        with pytest.raises(InvalidEmailError):
            Email(value)


class TestUserRole:
    def test_wire_strings(self):
        assert [role.value for role in UserRole] == [
            "System Administrator",
            "Normal User",
            "Store Owner",
        ]


class TestUser:
    def test_create_defaults_to_normal_user(self):
        user = User.create("Alexandra Normal Customer", "Alex@Example.com")

        assert user.id is None
        assert user.role == UserRole.NORMAL_USER
        assert user.email == "alex@example.com"
        assert not user.is_admin
        assert not user.is_store_owner

    def test_role_flags(self):
        admin = User.create(
            "Ada Administrator",
            "a@example.com",
            role=UserRole.SYSTEM_ADMINISTRATOR,
        )
        owner = User.create(
            "Olivia Store Owner",
            "o@example.com",
            role=UserRole.STORE_OWNER,
        )

        assert admin.is_admin
        assert owner.is_store_owner

    def test_role_accepts_wire_string(self):
        user = User(
            name="Olivia Store Owner",
            email="o@example.com",
            role="Store Owner",
        )

        assert user.role == UserRole.STORE_OWNER


class TestPasswordPolicy:
    @pytest.mark.parametrize(
        ("password", "expected"),
        [
            ("Secret!Pass1", True),
            ("secret!pass1", False),
            ("SecretPass12", False),
            ("Se!1", False),
            ("", False),
        ],
    )
    def test_policy(self, password, expected):
        assert satisfies_password_policy(password) is expected
