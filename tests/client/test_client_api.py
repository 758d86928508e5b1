"""
Tests for the async API client.

Unit tests run against ``httpx.MockTransport``; the end-to-end class drives
the real application in-process.
"""

import json
import time

import httpx
import jwt
import pytest
import pytest_asyncio
from httpx import ASGITransport

from school_client.api import SchoolApiClient
from school_client.errors import ApiError
from school_client.manager import TokenManager
from school_client.storage import MemoryTokenStorage


def make_token(exp_offset: int = 3600) -> str:
    now = int(time.time())
    payload = {"userId": 1, "email": "jane@x.com", "iat": now, "exp": now + exp_offset}
    return jwt.encode(payload, "server-secret", algorithm="HS256")


class MockApi:
    """Routes requests to canned responses and records what was sent."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], httpx.Response] = {}

    def add(self, method: str, path: str, status_code: int, body) -> None:
        self.routes[(method, path)] = httpx.Response(status_code, json=body)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.routes.get(
            (request.method, request.url.path),
            httpx.Response(404, json={"message": "Not found", "code": "NOT_FOUND"}),
        )


@pytest.fixture
def mock_api():
    return MockApi()


@pytest.fixture
def tokens():
    return TokenManager(MemoryTokenStorage())


@pytest_asyncio.fixture
async def api(mock_api, tokens):
    async with SchoolApiClient(
        "http://api", token_manager=tokens, transport=httpx.MockTransport(mock_api)
    ) as client:
        yield client


class TestLogin:
    """Tests for login and logout."""

    @pytest.mark.asyncio
    async def test_login_stores_token_and_later_requests_carry_it(self, api, mock_api, tokens):
        token = make_token()
        mock_api.add("POST", "/auth/login", 200, {"message": "Login successful", "token": token})
        mock_api.add("GET", "/students", 200, [])

        await api.login("jane@x.com", "secret1")
        await api.students.list()

        assert tokens.get_token() == token
        assert json.loads(mock_api.requests[0].content) == {
            "email": "jane@x.com",
            "password": "secret1",
        }
        assert mock_api.requests[1].headers["Authorization"] == f"Bearer {token}"

    @pytest.mark.asyncio
    async def test_failed_login_raises_api_error(self, api, mock_api, tokens):
        mock_api.add(
            "POST",
            "/auth/login",
            400,
            {"message": "Invalid email or password", "code": "INVALID_CREDENTIALS"},
        )

        with pytest.raises(ApiError) as exc_info:
            await api.login("jane@x.com", "wrong")

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Invalid email or password"
        assert exc_info.value.code == "INVALID_CREDENTIALS"
        assert tokens.get_token() is None

    @pytest.mark.asyncio
    async def test_logout_stops_sending_header(self, api, mock_api, tokens):
        tokens.store(make_token())
        mock_api.add("GET", "/students", 200, [])

        api.logout()
        await api.students.list()

        assert "Authorization" not in mock_api.requests[0].headers


class TestAuthErrors:
    """401/403 responses log the user out."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [401, 403])
    async def test_auth_failure_clears_token(self, api, mock_api, tokens, status_code):
        tokens.store(make_token())
        mock_api.add("GET", "/users/profile", status_code, {"message": "Invalid token"})

        with pytest.raises(ApiError) as exc_info:
            await api.profile()

        assert exc_info.value.is_auth_error
        assert tokens.get_token() is None

    @pytest.mark.asyncio
    async def test_not_found_keeps_token(self, api, tokens):
        tokens.store(make_token())

        with pytest.raises(ApiError) as exc_info:
            await api.students.get(99)

        assert exc_info.value.status_code == 404
        assert tokens.get_token() is not None

    @pytest.mark.asyncio
    async def test_non_json_error_body(self, tokens):
        transport = httpx.MockTransport(lambda request: httpx.Response(502, text="Bad Gateway"))
        client = SchoolApiClient("http://api", token_manager=tokens, transport=transport)

        with pytest.raises(ApiError) as exc_info:
            await client.list_users()

        assert exc_info.value.status_code == 502
        assert exc_info.value.message == "Bad Gateway"
        await client.aclose()


class TestResources:
    """Tests for the CRUD helpers."""

    @pytest.mark.asyncio
    async def test_crud_paths_and_methods(self, api, mock_api):
        mock_api.add("POST", "/courses", 201, {"id": 1})
        mock_api.add("PUT", "/courses/1", 200, {"id": 1})
        mock_api.add("DELETE", "/courses/1", 200, {"message": "Course deleted successfully"})

        await api.courses.create({"title": "Algebra"})
        await api.courses.update(1, {"credits": 3})
        result = await api.courses.delete(1)

        assert [(r.method, r.url.path) for r in mock_api.requests] == [
            ("POST", "/courses"),
            ("PUT", "/courses/1"),
            ("DELETE", "/courses/1"),
        ]
        assert json.loads(mock_api.requests[1].content) == {"credits": 3}
        assert result == {"message": "Course deleted successfully"}


class TestAgainstApplication:
    """The client driving the real application in-process."""

    @pytest.mark.asyncio
    async def test_register_login_and_manage_students(self, app):
        tokens = TokenManager(MemoryTokenStorage())
        async with SchoolApiClient(
            "http://test", token_manager=tokens, transport=ASGITransport(app=app)
        ) as api:
            with pytest.raises(ApiError) as exc_info:
                await api.students.list()
            assert exc_info.value.status_code == 401

            await api.register("Jane", "jane@x.com", "secret1")
            await api.login("jane@x.com", "secret1")

            assert tokens.get_user_info()["email"] == "jane@x.com"
            assert (await api.profile())["name"] == "Jane"

            await api.students.create({"name": "Sam Student", "email": "sam@school.edu"})
            students = await api.students.list()
            assert [s["email"] for s in students] == ["sam@school.edu"]

            # Unexpired but signed by someone else: the server refuses it
            tokens.store(make_token())
            with pytest.raises(ApiError) as exc_info:
                await api.students.list()
            assert exc_info.value.status_code == 403
            assert tokens.get_token() is None
