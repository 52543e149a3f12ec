"""Unit tests for SessionIssuer."""

from datetime import timedelta

import pytest

from blogger_auth import JWTService
from blogger_identity.application import SessionIssuer
from blogger_identity.domain.user import User

TEST_SECRET = "test-secret"  # NOQA: S105


class TestSessionIssuer:
    def setup_method(self):
        self.jwt_service = JWTService(secret_key=TEST_SECRET, session_expire_days=7)
        self.issuer = SessionIssuer(self.jwt_service)
        self.user = User.register_with_password("Jane", "jane@example.com", "hash")

    def test_issue_then_materialize(self):
        token = self.issuer.issue(self.user)

        session = self.issuer.materialize(token)

        assert session is not None
        assert session.user_id == self.user.id
        assert session.email == "jane@example.com"
        assert session.name == "Jane"

    def test_max_age_follows_jwt_service(self):
        assert self.issuer.max_age_seconds == 7 * 24 * 60 * 60

    def test_materialize_missing_or_invalid_token(self):
        assert self.issuer.materialize(None) is None
        assert self.issuer.materialize("") is None
        assert self.issuer.materialize("garbage") is None

    def test_materialize_expired_token(self):
        token = self.jwt_service.create_session_token(
            self.user.id,
            self.user.email,
            expires_delta=timedelta(seconds=-1),
        )

        assert self.issuer.materialize(token) is None

    def test_update_merges_claims_and_keeps_user(self):
        token = self.issuer.issue(self.user)

        updated = self.issuer.update(token, {"theme": "dark", "id": "someone-else"})
        session = self.issuer.materialize(updated)

        assert session is not None
        assert session.user_id == self.user.id
        assert session.claims["theme"] == "dark"

    def test_session_document_shape(self):
        token = self.issuer.issue(self.user, extra_claims={"role": "author"})
        session = self.issuer.materialize(token)
        assert session is not None

        document = session.to_dict()

        assert document["user"]["id"] == str(self.user.id)
        assert document["user"]["email"] == "jane@example.com"
        assert document["user"]["name"] == "Jane"
        assert document["user"]["role"] == "author"
        assert "expires" in document

    @pytest.mark.parametrize("claim", ["aud", "iss", "nbf", "jti"])
    def test_update_ignores_registered_jwt_claims(self, claim):
        token = self.issuer.issue(self.user)

        updated = self.issuer.update(token, {claim: "someone", "theme": "dark"})
        session = self.issuer.materialize(updated)

        # The updated session still verifies
        assert session is not None
        assert claim not in session.claims
        assert session.claims["theme"] == "dark"
