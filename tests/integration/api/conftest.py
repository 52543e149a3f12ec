"""Pytest fixtures for API integration tests."""

from urllib.parse import urlencode

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from blogger.presentation.api.app import AUTH_PREFIX, create_app
from blogger.presentation.api.dependencies import get_db_session
from blogger_config.settings import Settings
from blogger_identity.application.ports import OAuthClient, OAuthProfile
from blogger_identity.domain.user import ProviderKind

PROVIDER_AUTHORIZE_URL = "https://provider.test/authorize"


class FakeGoogleClient(OAuthClient):
    """Google stand-in returning a fixed profile for any code."""

    def __init__(self):
        self.profile = OAuthProfile(
            external_id="g-123",
            email="oauth@example.com",
            name="Oauth User",
        )

    @property
    def kind(self) -> ProviderKind:
        return ProviderKind.GOOGLE

    def authorization_url(self, state: str, redirect_uri: str) -> str:
        query = urlencode({"state": state, "redirect_uri": redirect_uri})
        return f"{PROVIDER_AUTHORIZE_URL}?{query}"

    async def fetch_profile(self, code: str, redirect_uri: str) -> OAuthProfile:
        return self.profile


@pytest.fixture
def auth_prefix() -> str:
    return AUTH_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        # Required security settings
        auth_secret=SecretStr("test-auth-secret-for-testing-only"),
        postgres_password=SecretStr("test-password"),
        # API settings
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        auth_base_url="http://testserver",
        session_cookie_secure=False,  # Allow HTTP in tests
        password_hash_rounds=4,  # Fast bcrypt
        _env_file=None,
    )


@pytest.fixture
def fake_google() -> FakeGoogleClient:
    return FakeGoogleClient()


@pytest.fixture
def test_client(api_settings, test_db_engine, fake_google) -> TestClient:
    """Create a test client with an in-memory database and a fake Google."""
    app = create_app(settings=api_settings)
    app.state.oauth_clients = [fake_google]

    # Create a session maker that uses our test engine
    test_session_maker = async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Override the database session dependency
    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session

    return TestClient(app, follow_redirects=False)


@pytest.fixture
def signup_data() -> dict:
    return {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "password": "Secure#Pass1",
        "confirmPassword": "Secure#Pass1",
    }


@pytest.fixture
def registered_user(test_client, signup_data, auth_prefix) -> dict:
    """Sign up a user through the API and return the signup data."""
    response = test_client.post(f"{auth_prefix}/signup", json=signup_data)
    assert response.status_code == 201
    return signup_data


@pytest.fixture
def logged_in_client(test_client, registered_user, auth_prefix) -> TestClient:
    """Test client carrying a valid session cookie."""
    response = test_client.post(
        f"{auth_prefix}/login",
        json={
            "email": registered_user["email"],
            "password": registered_user["password"],
        },
    )
    assert response.status_code == 200
    return test_client
