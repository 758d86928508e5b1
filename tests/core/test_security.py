"""
Unit tests for password hashing and the token service.

These tests cover:
- bcrypt hashing and verification
- Token issuance and claim layout
- Expiry at the 24 hour boundary
- Rejection of tampered, foreign and malformed tokens
"""

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from app.core.security import (
    DEFAULT_BCRYPT_ROUNDS,
    ExpiredTokenError,
    MalformedTokenError,
    TokenError,
    TokenService,
    hash_password,
    verify_password,
)

SECRET = "unit-test-secret-that-is-long-enough-to-sign"


def _tamper_signature(token: str) -> str:
    header, payload, signature = token.split(".")
    # Middle characters always change the decoded bytes; the last one may not
    index = len(signature) // 2
    replacement = "A" if signature[index] != "A" else "B"
    signature = signature[:index] + replacement + signature[index + 1 :]
    return f"{header}.{payload}.{signature}"


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(SECRET)


class TestPasswordHashing:
    """Tests for bcrypt helpers."""

    def test_hash_is_not_plaintext(self):
        """Hashes never contain the password."""
        hashed = hash_password("secret1", rounds=4)
        assert "secret1" not in hashed
        assert hashed.startswith("$2")

    def test_default_cost_factor_is_ten(self):
        """Production hashes use cost 10."""
        assert DEFAULT_BCRYPT_ROUNDS == 10
        assert hash_password("secret1").startswith("$2b$10$")

    def test_hashes_are_salted(self):
        """Same password hashed twice gives different hashes."""
        assert hash_password("secret1", rounds=4) != hash_password("secret1", rounds=4)

    def test_verify_matches_correct_password(self):
        hashed = hash_password("secret1", rounds=4)
        assert verify_password("secret1", hashed) is True

    def test_verify_rejects_wrong_password(self):
        hashed = hash_password("secret1", rounds=4)
        assert verify_password("secret2", hashed) is False

    def test_verify_rejects_garbage_hash(self):
        """A corrupt stored hash is a failed match, not a crash."""
        assert verify_password("secret1", "not-a-bcrypt-hash") is False


class TestTokenIssue:
    """Tests for TokenService.issue."""

    def test_requires_secret(self):
        with pytest.raises(ValueError):
            TokenService("")

    def test_claims_layout(self, token_service):
        """Tokens carry userId, email, iat and exp, signed with HS256."""
        now = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
        token = token_service.issue(7, "jane@x.com", now=now)

        header = jwt.get_unverified_header(token)
        payload = jwt.decode(token, options={"verify_signature": False})

        assert header["alg"] == "HS256"
        assert payload == {
            "userId": 7,
            "email": "jane@x.com",
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(hours=24)).timestamp()),
        }

    def test_default_lifetime_is_24_hours(self, token_service):
        assert token_service.lifetime == timedelta(hours=24)

    def test_round_trip_recovers_identity(self, token_service):
        token = token_service.issue(42, "jane@x.com")

        claims = token_service.verify(token)

        assert claims.user_id == 42
        assert claims.email == "jane@x.com"
        assert claims.expires_at - claims.issued_at == timedelta(hours=24)


class TestTokenVerify:
    """Tests for TokenService.verify failure modes."""

    def test_token_older_than_lifetime_is_expired(self, token_service):
        """A token checked 24h + 1s after issue is expired."""
        issued = datetime.now(UTC) - timedelta(hours=24, seconds=1)
        token = token_service.issue(1, "jane@x.com", now=issued)

        with pytest.raises(ExpiredTokenError):
            token_service.verify(token)

    def test_token_just_inside_lifetime_is_valid(self, token_service):
        issued = datetime.now(UTC) - timedelta(hours=23, minutes=59)
        token = token_service.issue(1, "jane@x.com", now=issued)

        assert token_service.verify(token).user_id == 1

    def test_tampered_signature_is_malformed(self, token_service):
        token = _tamper_signature(token_service.issue(1, "jane@x.com"))

        with pytest.raises(MalformedTokenError):
            token_service.verify(token)

    def test_token_from_another_secret_is_malformed(self, token_service):
        other = TokenService("a-completely-different-secret-value-here")
        token = other.issue(1, "jane@x.com")

        with pytest.raises(MalformedTokenError):
            token_service.verify(token)

    @pytest.mark.parametrize("token", ["", "abc", "a.b.c", "not-a-jwt-at-all"])
    def test_garbage_is_malformed(self, token_service, token):
        with pytest.raises(MalformedTokenError):
            token_service.verify(token)

    def test_missing_identity_claims_is_malformed(self, token_service):
        now = int(datetime.now(UTC).timestamp())
        token = jwt.encode({"iat": now, "exp": now + 60}, SECRET, algorithm="HS256")

        with pytest.raises(MalformedTokenError):
            token_service.verify(token)

    def test_missing_expiry_is_rejected(self, token_service):
        token = jwt.encode({"userId": 1, "email": "jane@x.com"}, SECRET, algorithm="HS256")

        with pytest.raises(TokenError):
            token_service.verify(token)

    def test_expired_is_a_token_error(self):
        """Callers can catch the whole family with TokenError."""
        assert issubclass(ExpiredTokenError, TokenError)
        assert issubclass(MalformedTokenError, TokenError)
