"""
API tests for the protected user endpoints.
"""

import pytest

from conftest import register_and_login


class TestListUsers:
    """Tests for GET /users."""

    @pytest.mark.asyncio
    async def test_lists_users_with_requester(self, client, auth_headers):
        await register_and_login(client, name="Bob", email="bob@x.com", password="secret2")

        response = await client.get("/users", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["requestedBy"] == "jane@x.com"
        assert [user["email"] for user in body["users"]] == ["jane@x.com", "bob@x.com"]
        assert all("password" not in key.lower() for user in body["users"] for key in user)


class TestProfile:
    """Tests for GET /users/profile."""

    @pytest.mark.asyncio
    async def test_returns_token_owner(self, client, jane, auth_headers):
        user, _token = jane

        response = await client.get("/users/profile", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["user"]["id"] == user["id"]
        assert response.json()["user"]["name"] == "Jane"

    @pytest.mark.asyncio
    async def test_alias_under_auth_prefix(self, client, auth_headers):
        response = await client.get("/auth/users/profile", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["user"]["email"] == "jane@x.com"


class TestGetUser:
    """Tests for GET /users/{user_id}."""

    @pytest.mark.asyncio
    async def test_get_existing(self, client, jane, auth_headers):
        user, _token = jane

        response = await client.get(f"/users/{user['id']}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["user"]["email"] == "jane@x.com"

    @pytest.mark.asyncio
    async def test_get_missing_is_404(self, client, auth_headers):
        response = await client.get("/users/9999", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["message"] == "User not found"

    @pytest.mark.asyncio
    async def test_non_numeric_id_is_400(self, client, auth_headers):
        response = await client.get("/users/abc", headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_oversized_id_is_400(self, client, auth_headers):
        response = await client.get("/users/99999999999999999999", headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"
