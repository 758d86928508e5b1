"""
Async API client for the School Management API.

Usage:
    async with SchoolApiClient("http://localhost:4000") as api:
        await api.login("jane@x.com", "secret1")
        students = await api.students.list()
"""

import logging
from typing import Any

import httpx

from school_client.errors import ApiError
from school_client.manager import BearerAuth, TokenManager

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:4000"
DEFAULT_TIMEOUT = 10.0


class ResourceClient:
    """CRUD calls for one protected collection (students, teachers, courses)."""

    def __init__(self, api: "SchoolApiClient", path: str):
        self._api = api
        self.path = path

    async def list(self) -> list[dict[str, Any]]:
        return await self._api.request("GET", self.path)

    async def get(self, item_id: int) -> dict[str, Any]:
        return await self._api.request("GET", f"{self.path}/{item_id}")

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        return await self._api.request("POST", self.path, json=data)

    async def update(self, item_id: int, data: dict[str, Any]) -> dict[str, Any]:
        return await self._api.request("PUT", f"{self.path}/{item_id}", json=data)

    async def delete(self, item_id: int) -> dict[str, Any]:
        return await self._api.request("DELETE", f"{self.path}/{item_id}")


class SchoolApiClient:
    """
    Authenticated client.

    The bearer header is added per request by ``BearerAuth``; any 401 or
    403 answer logs the user out through the token manager before the
    ``ApiError`` is raised.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        token_manager: TokenManager | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.tokens = token_manager if token_manager is not None else TokenManager()
        self._client = httpx.AsyncClient(
            base_url=base_url,
            auth=BearerAuth(self.tokens),
            transport=transport,
            timeout=timeout,
            event_hooks={"response": [self._on_response]},
        )
        self.students = ResourceClient(self, "/students")
        self.teachers = ResourceClient(self, "/teachers")
        self.courses = ResourceClient(self, "/courses")

    async def __aenter__(self) -> "SchoolApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _on_response(self, response: httpx.Response) -> None:
        self.tokens.handle_auth_error(response.status_code)

    async def request(self, method: str, url: str, **kwargs: Any) -> Any:
        """
        Send a request and return the decoded JSON body.

        Raises:
            ApiError: For any non-2xx response
        """
        response = await self._client.request(method, url, **kwargs)
        if response.is_error:
            error = ApiError.from_response(response)
            logger.debug(f"{method} {url} failed: {error}")
            raise error
        return response.json()

    async def register(self, name: str, email: str, password: str) -> dict[str, Any]:
        return await self.request(
            "POST",
            "/auth/register",
            json={"name": name, "email": email, "password": password},
        )

    async def login(self, email: str, password: str) -> dict[str, Any]:
        """Log in and store the returned token."""
        body = await self.request(
            "POST",
            "/auth/login",
            json={"email": email, "password": password},
        )
        self.tokens.store(body["token"])
        return body

    def logout(self) -> None:
        self.tokens.logout()

    async def profile(self) -> dict[str, Any]:
        body = await self.request("GET", "/users/profile")
        return body["user"]

    async def list_users(self) -> list[dict[str, Any]]:
        body = await self.request("GET", "/users")
        return body["users"]

    async def get_user(self, user_id: int) -> dict[str, Any]:
        body = await self.request("GET", f"/users/{user_id}")
        return body["user"]
