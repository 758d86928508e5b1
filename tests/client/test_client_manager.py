"""
Tests for the client token manager and its httpx auth flow.
"""

import httpx
import jwt
import pytest

from school_client.manager import BearerAuth, TokenManager
from school_client.storage import MemoryTokenStorage

NOW = 1_800_000_000


def make_token(exp_offset: int = 3600) -> str:
    payload = {"userId": 7, "email": "jane@x.com", "iat": NOW, "exp": NOW + exp_offset}
    return jwt.encode(payload, "server-secret", algorithm="HS256")


class FakeClock:
    def __init__(self, now: float = NOW):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def storage():
    return MemoryTokenStorage()


@pytest.fixture
def manager(storage, clock):
    return TokenManager(storage, clock=clock)


class TestStoreAndAuthenticate:
    """Tests for store / is_authenticated / logout."""

    def test_store_then_authenticated(self, manager):
        token = make_token()

        manager.store(token)

        assert manager.get_token() == token
        assert manager.is_authenticated()["userId"] == 7

    def test_nothing_stored(self, manager):
        assert manager.is_authenticated() is None

    def test_expiry_logs_out(self, manager, storage, clock):
        manager.store(make_token(exp_offset=24 * 3600))
        storage.set("user", "cached profile")

        clock.now = NOW + 24 * 3600 + 1

        assert manager.is_authenticated() is None
        assert storage.get("token") is None
        assert storage.get("user") is None

    def test_unreadable_token_is_not_authenticated(self, manager):
        manager.store("garbage")
        assert manager.is_authenticated() is None

    def test_logout_clears_session_keys(self, manager, storage):
        manager.store(make_token())
        storage.set("refreshToken", "r")
        storage.set("tokenExpiry", "e")

        manager.logout()

        assert storage.get("token") is None
        assert storage.get("refreshToken") is None
        assert storage.get("tokenExpiry") is None


class TestDerivedInfo:
    """Tests for helpers derived from the stored token."""

    def test_user_info(self, manager):
        manager.store(make_token())

        assert manager.get_user_info() == {
            "userId": 7,
            "email": "jane@x.com",
            "exp": NOW + 3600,
            "iat": NOW,
        }

    def test_user_info_when_logged_out(self, manager):
        assert manager.get_user_info() is None

    def test_time_remaining(self, manager):
        manager.store(make_token(exp_offset=2 * 3600 + 30))

        remaining = manager.time_remaining()

        assert (remaining.days, remaining.hours, remaining.minutes, remaining.seconds) == (
            0,
            2,
            0,
            30,
        )

    def test_expiring_soon(self, manager, clock):
        manager.store(make_token(exp_offset=3600))
        assert manager.is_expiring_soon() is False

        clock.now = NOW + 3600 - 120
        assert manager.is_expiring_soon() is True

    def test_auth_header(self, manager):
        token = make_token()
        assert manager.auth_header() is None

        manager.store(token)

        assert manager.auth_header() == {"Authorization": f"Bearer {token}"}

    def test_auth_header_none_for_expired_token(self, manager, clock):
        manager.store(make_token())
        clock.now = NOW + 7200

        assert manager.auth_header() is None

    def test_decode_and_is_expired(self, manager):
        claims = manager.decode(make_token(exp_offset=0))

        assert claims["userId"] == 7
        assert manager.is_expired(claims) is True
        assert manager.decode("nope") is None


class TestHandleAuthError:
    """Tests for handle_auth_error."""

    @pytest.mark.parametrize("status_code", [401, 403])
    def test_auth_failures_log_out(self, manager, status_code):
        manager.store(make_token())

        assert manager.handle_auth_error(status_code) is True
        assert manager.get_token() is None

    @pytest.mark.parametrize("status_code", [200, 400, 404, 500])
    def test_other_statuses_ignored(self, manager, status_code):
        manager.store(make_token())

        assert manager.handle_auth_error(status_code) is False
        assert manager.get_token() is not None


class TestBearerAuth:
    """Tests for the per-request header interceptor."""

    @pytest.fixture
    def seen_headers(self):
        return []

    @pytest.fixture
    def http(self, manager, seen_headers):
        def handler(request: httpx.Request) -> httpx.Response:
            seen_headers.append(request.headers.get("Authorization"))
            return httpx.Response(200, json={})

        return httpx.Client(
            base_url="http://api",
            auth=BearerAuth(manager),
            transport=httpx.MockTransport(handler),
        )

    def test_header_follows_login_state(self, http, manager, seen_headers):
        token = make_token()

        http.get("/students")
        manager.store(token)
        http.get("/students")
        manager.logout()
        http.get("/students")

        assert seen_headers == [None, f"Bearer {token}", None]

    def test_expired_token_not_sent(self, http, manager, clock, seen_headers):
        manager.store(make_token())
        clock.now = NOW + 3600

        http.get("/students")

        assert seen_headers == [None]
        assert manager.get_token() is None
