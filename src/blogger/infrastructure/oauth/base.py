"""Shared httpx plumbing for OAuth 2.0 authorization-code providers."""

from __future__ import annotations

import logging
from abc import abstractmethod
from typing import Any
from urllib.parse import urlencode

import httpx

from blogger_identity.application.ports import OAuthClient, OAuthProfile
from blogger_identity.exceptions import OAuthProviderError

logger = logging.getLogger(__name__)


class HttpOAuthClient(OAuthClient):
    """Authorization-code client over ``httpx.AsyncClient``.

    Subclasses provide the provider endpoints and turn the access token
    into an ``OAuthProfile``. Transport failures, non-2xx responses and
    malformed bodies all surface as ``OAuthProviderError``.
    """

    AUTHORIZE_URL: str
    TOKEN_URL: str
    SCOPES: tuple[str, ...] = ()

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._client_id = client_id
        self._client_secret = client_secret
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def authorization_url(self, state: str, redirect_uri: str) -> str:
        params = {
            "client_id": self._client_id,
            "redirect_uri": redirect_uri,
            "response_type": "code",
            "scope": " ".join(self.SCOPES),
            "state": state,
            **self._extra_authorize_params(),
        }
        return f"{self.AUTHORIZE_URL}?{urlencode(params)}"

    async def fetch_profile(self, code: str, redirect_uri: str) -> OAuthProfile:
        try:
            access_token = await self._exchange_code(code, redirect_uri)
            return await self._load_profile(access_token)
        except httpx.TimeoutException as e:
            logger.warning("%s request timed out: %s", self.kind.value, e)
            raise OAuthProviderError(self.kind.value, "Request timed out") from e
        except httpx.HTTPStatusError as e:
            logger.warning(
                "%s returned error %d: %s",
                self.kind.value,
                e.response.status_code,
                e.response.text[:200] if e.response.text else "no body",
            )
            raise OAuthProviderError(
                self.kind.value,
                f"HTTP {e.response.status_code}",
            ) from e
        except httpx.HTTPError as e:
            logger.warning("%s request failed: %s", self.kind.value, e)
            raise OAuthProviderError(self.kind.value, str(e)) from e
        except ValueError as e:
            # Response body was not JSON
            raise OAuthProviderError(self.kind.value, "Malformed response") from e

    async def _exchange_code(self, code: str, redirect_uri: str) -> str:
        response = await self._get_client().post(
            self.TOKEN_URL,
            data={
                "grant_type": "authorization_code",
                "code": code,
                "redirect_uri": redirect_uri,
                "client_id": self._client_id,
                "client_secret": self._client_secret,
            },
        )
        response.raise_for_status()
        body = response.json()

        access_token = body.get("access_token") if isinstance(body, dict) else None
        if not access_token:
            error = body.get("error") if isinstance(body, dict) else None
            raise OAuthProviderError(
                self.kind.value,
                f"Token exchange failed: {error or 'no access token'}",
            )
        return access_token

    async def _get_json(self, url: str, access_token: str) -> Any:
        response = await self._get_client().get(
            url,
            headers={"Authorization": f"Bearer {access_token}"},
        )
        response.raise_for_status()
        return response.json()

    def _extra_authorize_params(self) -> dict[str, str]:
        return {}

    @abstractmethod
    async def _load_profile(self, access_token: str) -> OAuthProfile:
        """Fetch and map the provider's user profile."""
