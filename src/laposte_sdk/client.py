"""High-level La Poste REST client."""

from __future__ import annotations

import logging
from collections.abc import Mapping

import requests

from .auth import AuthStrategy, BearerTokenAuth
from .config import LAPOSTE, ClientConfig, SdkSettings, check_family
from .http import configure_session, resolve_strict_ssl
from .request import ApiRequest
from .urls import build_api_url, build_base_url

logger = logging.getLogger(__name__)


class ApiClient:
    """Build requests against one La Poste API provider.

    When ``base_url`` is omitted the client uses the environment override for
    ``family`` (``LAPOSTE_API_BASE_URL`` or ``DIGIPOSTE_API_BASE_URL``) and
    falls back to the published default.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        family: str = LAPOSTE,
        settings: SdkSettings | None = None,
        strict_ssl: bool | None = None,
        session: requests.Session | None = None,
        auth_strategy: AuthStrategy | None = None,
        timeout: float = 30.0,
        default_headers: Mapping[str, str] | None = None,
    ) -> None:
        self.family = check_family(family)
        self.settings = settings or SdkSettings.from_env()
        verify_ssl = resolve_strict_ssl(strict_ssl, self.settings)
        self.config = ClientConfig(
            base_url=build_base_url(
                base_url if base_url is not None else self.settings.base_url_for(self.family)
            ),
            verify_ssl=verify_ssl,
            timeout=timeout,
            default_headers=default_headers,
        )
        self._owns_session = session is None
        self.session = configure_session(verify_ssl, session=session)
        self._auth = auth_strategy or self._auth_from_settings()
        logger.debug("baseUrl : %s", self.config.base_url)

    # Context manager helpers -------------------------------------------------
    def __enter__(self) -> ApiClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # Public API --------------------------------------------------------------
    @property
    def base_url(self) -> str:
        return self.config.base_url

    def build_url(self, path: str) -> str:
        return build_api_url(self.config.base_url, path)

    def get(self, path: str) -> ApiRequest:
        return self._new_request("GET", path)

    def post(self, path: str) -> ApiRequest:
        return self._new_request("POST", path)

    def put(self, path: str) -> ApiRequest:
        return self._new_request("PUT", path)

    def delete(self, path: str) -> ApiRequest:
        return self._new_request("DELETE", path)

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    # Internal helpers -------------------------------------------------------
    def _new_request(self, method: str, path: str) -> ApiRequest:
        url = self.build_url(path)
        logger.debug("%s %s", method, url)
        request = ApiRequest(self, method, url)
        if self._auth is not None:
            self._auth.apply(request.headers)
        return request

    def _auth_from_settings(self) -> AuthStrategy | None:
        token = self.settings.access_token_for(self.family)
        if token:
            return BearerTokenAuth(token)
        return None
