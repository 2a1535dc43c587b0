"""Request builder returned by the client verbs."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import requests

from .exceptions import RequestError
from .http import ensure_success

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from .client import ApiClient


class ApiRequest:
    """A pending HTTP request that callers configure and then send.

    Setters return the request itself so calls can be chained::

        response = client.post("/letters").header("X-Trace", "1").json_body(payload).send()
    """

    def __init__(self, client: ApiClient, method: str, url: str) -> None:
        self._client = client
        self.method = method.upper()
        self.url = url
        self.headers: dict[str, str] = client.config.resolved_headers()
        self.params: dict[str, str] = {}
        self._json: Any | None = None
        self._data: Any | None = None
        self._timeout: float | None = None

    def __repr__(self) -> str:
        return f"<ApiRequest {self.method} {self.url}>"

    def header(self, name: str, value: str) -> ApiRequest:
        self.headers[name] = value
        return self

    def with_headers(self, headers: Mapping[str, str]) -> ApiRequest:
        self.headers.update(headers)
        return self

    def param(self, name: str, value: str) -> ApiRequest:
        self.params[name] = value
        return self

    def json_body(self, payload: Any) -> ApiRequest:
        self._json = payload
        self._data = None
        return self

    def body(self, data: Any) -> ApiRequest:
        self._data = data
        self._json = None
        return self

    def timeout(self, seconds: float) -> ApiRequest:
        self._timeout = seconds
        return self

    def prepare(self) -> requests.PreparedRequest:
        request = requests.Request(
            method=self.method,
            url=self.url,
            headers=self.headers,
            params=self.params or None,
            json=self._json,
            data=self._data,
        )
        return self._client.session.prepare_request(request)

    def send(self, *, check: bool = True) -> requests.Response:
        """Send the request and return the raw response.

        With ``check`` enabled, non-2xx responses raise `RequestError`.
        """

        session = self._client.session
        prepared = self.prepare()
        timeout = self._timeout if self._timeout is not None else self._client.config.timeout
        # None lets CA bundles from the session or the environment apply in strict mode.
        verify = None if self._client.config.verify_ssl else False
        try:
            send_kwargs = session.merge_environment_settings(prepared.url, {}, None, verify, None)
            response = session.send(prepared, timeout=timeout, **send_kwargs)
        except requests.RequestException as exc:
            reason = str(exc).strip() or exc.__class__.__name__
            raise RequestError(
                f"Failed to communicate with La Poste API: {reason}", details=reason
            ) from exc
        if check:
            ensure_success(response)
        return response


__all__ = ["ApiRequest"]
