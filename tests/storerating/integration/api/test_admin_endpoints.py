"""API tests for the admin endpoints."""

import pytest

from storerating_identity.domain.user import UserRole
from tests.shared.fixtures.factories import TestStoreFactory, TestUserFactory

pytestmark = pytest.mark.integration


class TestAccess:
    def test_missing_token(self, client):
        response = client.get("/api/admin/dashboard")

        assert response.status_code == 401

    def test_wrong_role(self, client, normal_user):
        response = client.get("/api/admin/dashboard", headers=normal_user.headers)

        assert response.status_code == 403
        assert response.json()["code"] == "FORBIDDEN"

    def test_role_checked_before_body(self, client, owner):
        response = client.post("/api/admin/users", json={}, headers=owner.headers)

        assert response.status_code == 403


def test_dashboard_counts(client, admin, normal_user, store):
    client.post(
        "/api/ratings",
        json={"storeId": store["id"], "rating": 5},
        headers=normal_user.headers,
    )

    response = client.get("/api/admin/dashboard", headers=admin.headers)

    assert response.status_code == 200
    # admin, owner, normal user
    assert response.json() == {"usersCount": 3, "storesCount": 1, "ratingsCount": 1}


class TestCreateUser:
    def test_admin_name_range_differs_from_signup(self, client, admin):
        ok = client.post(
            "/api/admin/users",
            json=TestUserFactory.admin_create_payload(
                UserRole.STORE_OWNER,
                name="x" * 15,
            ),
            headers=admin.headers,
        )
        too_long = client.post(
            "/api/admin/users",
            json=TestUserFactory.admin_create_payload(
                UserRole.STORE_OWNER,
                name="x" * 45,
                email="other@example.com",
            ),
            headers=admin.headers,
        )

        assert ok.status_code == 201
        assert ok.json()["role"] == "Store Owner"
        assert too_long.status_code == 400
        assert too_long.json()["errors"] == [
            {"msg": "Name must be 10-40 characters", "path": "name", "location": "body"},
        ]

    def test_can_create_administrators(self, client, admin):
        response = client.post(
            "/api/admin/users",
            json=TestUserFactory.admin_create_payload(
                UserRole.SYSTEM_ADMINISTRATOR,
                email="second.admin@example.com",
            ),
            headers=admin.headers,
        )

        assert response.status_code == 201
        assert response.json()["role"] == "System Administrator"

    def test_duplicate_email(self, client, admin, owner):
        response = client.post(
            "/api/admin/users",
            json=TestUserFactory.admin_create_payload(UserRole.NORMAL_USER),
            headers=admin.headers,
        )

        assert response.status_code == 409


class TestListUsers:
    def test_owner_rows_carry_average_rating(self, client, admin, normal_user, store):
        client.post(
            "/api/ratings",
            json={"storeId": store["id"], "rating": 3},
            headers=normal_user.headers,
        )

        response = client.get(
            "/api/admin/users",
            params={"orderBy": "id"},
            headers=admin.headers,
        )

        assert response.status_code == 200
        rows = {row["email"]: row for row in response.json()}
        assert rows[TestUserFactory.OWNER_EMAIL]["averageRating"] == 3.0
        assert "averageRating" not in rows[TestUserFactory.NORMAL_EMAIL]
        assert "averageRating" not in rows[TestUserFactory.ADMIN_EMAIL]

    def test_filters_and_sorting(self, client, admin, owner, normal_user):
        by_role = client.get(
            "/api/admin/users",
            params={"role": "store"},
            headers=admin.headers,
        ).json()
        by_name_desc = client.get(
            "/api/admin/users",
            params={"orderBy": "name", "order": "desc"},
            headers=admin.headers,
        ).json()

        assert [u["email"] for u in by_role] == [TestUserFactory.OWNER_EMAIL]
        names = [u["name"] for u in by_name_desc]
        assert names == sorted(names, reverse=True)

    def test_unknown_sort_key_falls_back_to_name(self, client, admin, owner):
        response = client.get(
            "/api/admin/users",
            params={"orderBy": "password"},
            headers=admin.headers,
        )

        assert response.status_code == 200
        names = [u["name"] for u in response.json()]
        assert names == sorted(names)


class TestUserDetail:
    def test_store_owner_has_store_rating(self, client, admin, owner, store):
        response = client.get(f"/api/admin/users/{owner.id}", headers=admin.headers)

        assert response.status_code == 200
        assert response.json()["storeRating"] == 0.0

    def test_normal_user_has_no_store_rating(self, client, admin, normal_user):
        response = client.get(
            f"/api/admin/users/{normal_user.id}",
            headers=admin.headers,
        )

        assert "storeRating" not in response.json()

    def test_unknown_user(self, client, admin):
        response = client.get("/api/admin/users/9999", headers=admin.headers)

        assert response.status_code == 404


def test_admin_store_listing_sorts_by_email(client, admin, owner, store):
    client.post(
        "/api/stores",
        json=TestStoreFactory.payload(
            owner_id=owner.id,
            name=TestStoreFactory.OTHER_NAME,
            email="aardvark@example.com",
        ),
        headers=admin.headers,
    )

    response = client.get(
        "/api/admin/stores",
        params={"orderBy": "email"},
        headers=admin.headers,
    )

    assert [s["email"] for s in response.json()] == [
        "aardvark@example.com",
        TestStoreFactory.EMAIL,
    ]
