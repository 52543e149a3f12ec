"""Unit tests for JWTService."""

from datetime import timedelta
from uuid import uuid4

import jwt
import pytest

from blogger_auth.exceptions import InvalidTokenError
from blogger_auth.services import JWTService

TEST_SECRET = "test-secret-key-for-jwt"  # NOQA: S105


class TestSessionTokens:
    """Tests for session token creation and verification."""

    def setup_method(self):
        self.service = JWTService(secret_key=TEST_SECRET)
        self.user_id = uuid4()

    def test_roundtrip_carries_identity_claims(self):
        token = self.service.create_session_token(
            self.user_id,
            "user@example.com",
            name="Jane Doe",
        )

        payload = self.service.verify_session_token(token)

        assert payload.user_id == self.user_id
        assert payload.email == "user@example.com"
        assert payload.name == "Jane Doe"
        assert payload.is_session_token()
        assert not payload.is_expired()

    def test_sub_and_id_are_the_user_id(self):
        token = self.service.create_session_token(self.user_id, "user@example.com")

        raw = jwt.decode(token, TEST_SECRET, algorithms=["HS256"])

        assert raw["sub"] == str(self.user_id)
        assert raw["id"] == str(self.user_id)
        assert raw["type"] == "session"
        assert "iat" in raw
        assert "exp" in raw

    def test_default_max_age_is_30_days(self):
        assert self.service.session_max_age_seconds == 30 * 24 * 60 * 60

    def test_extra_claims_cannot_override_reserved(self):
        other_id = uuid4()
        token = self.service.create_session_token(
            self.user_id,
            "user@example.com",
            extra_claims={"sub": str(other_id), "id": str(other_id), "theme": "dark"},
        )

        payload = self.service.verify_session_token(token)

        assert payload.user_id == self.user_id
        assert payload.claims["theme"] == "dark"

    def test_expired_token_raises(self):
        token = self.service.create_session_token(
            self.user_id,
            "user@example.com",
            expires_delta=timedelta(seconds=-1),
        )

        with pytest.raises(InvalidTokenError, match="expired"):
            self.service.verify_session_token(token)

    def test_wrong_secret_raises(self):
        token = JWTService(secret_key="other-secret").create_session_token(
            self.user_id,
            "user@example.com",
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify_session_token(token)

    def test_state_token_is_not_a_session(self):
        token = self.service.create_state_token({"provider": "google"})

        with pytest.raises(InvalidTokenError, match="Not a session token"):
            self.service.verify_session_token(token)

    def test_empty_token_raises(self):
        with pytest.raises(InvalidTokenError):
            self.service.verify_session_token("")

    def test_empty_secret_rejected(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            JWTService(secret_key="")


class TestMergeSessionClaims:
    def setup_method(self):
        self.service = JWTService(secret_key=TEST_SECRET)
        self.user_id = uuid4()
        self.token = self.service.create_session_token(
            self.user_id,
            "user@example.com",
            name="Jane",
        )

    def test_merge_adds_claims(self):
        merged = self.service.merge_session_claims(self.token, {"theme": "dark"})

        payload = self.service.verify_session_token(merged)

        assert payload.claims["theme"] == "dark"
        assert payload.email == "user@example.com"
        assert payload.name == "Jane"

    def test_merge_can_change_profile_claims(self):
        merged = self.service.merge_session_claims(self.token, {"name": "Janet"})

        assert self.service.verify_session_token(merged).name == "Janet"

    def test_merge_keeps_user_id(self):
        merged = self.service.merge_session_claims(
            self.token,
            {"sub": str(uuid4()), "id": str(uuid4()), "exp": 0, "iat": 0},
        )

        payload = self.service.verify_session_token(merged)

        assert payload.user_id == self.user_id
        assert not payload.is_expired()

    def test_merge_keeps_earlier_merged_claims(self):
        first = self.service.merge_session_claims(self.token, {"a": 1})
        second = self.service.merge_session_claims(first, {"b": 2})

        claims = self.service.verify_session_token(second).claims

        assert claims["a"] == 1
        assert claims["b"] == 2

    def test_merge_rejects_invalid_token(self):
        with pytest.raises(InvalidTokenError):
            self.service.merge_session_claims("not-a-token", {"a": 1})


class TestStateTokens:
    def setup_method(self):
        self.service = JWTService(secret_key=TEST_SECRET)

    def test_roundtrip_returns_data(self):
        token = self.service.create_state_token(
            {"provider": "github", "callbackUrl": "/posts", "nonce": "abc"},
        )

        data = self.service.verify_state_token(token)

        assert data == {"provider": "github", "callbackUrl": "/posts", "nonce": "abc"}

    def test_session_token_is_not_a_state(self):
        token = self.service.create_session_token(uuid4(), "user@example.com")

        with pytest.raises(InvalidTokenError, match="Not an OAuth state token"):
            self.service.verify_state_token(token)

    def test_expired_state_raises(self):
        token = self.service.create_state_token(
            {"provider": "google"},
            expires_delta=timedelta(seconds=-1),
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify_state_token(token)
