"""HTTP session configuration and response checks."""

from __future__ import annotations

import logging

import requests
import urllib3
from requests import Response, Session
from urllib3.exceptions import InsecureRequestWarning

from .config import SdkSettings
from .exceptions import AuthenticationError, RequestError
from .version import user_agent

logger = logging.getLogger(__name__)


def resolve_strict_ssl(strict_ssl: bool | None = None, settings: SdkSettings | None = None) -> bool:
    """Return the explicit flag, else the environment setting (strict unless "false")."""

    if strict_ssl is not None:
        return strict_ssl
    settings = settings or SdkSettings.from_env()
    return settings.strict_ssl


def configure_session(
    strict_ssl: bool | None = None,
    *,
    settings: SdkSettings | None = None,
    session: Session | None = None,
) -> Session:
    """Return a session with the default User-Agent and the selected TLS mode."""

    session = session or requests.Session()
    session.headers["User-Agent"] = user_agent()
    if resolve_strict_ssl(strict_ssl, settings):
        # Keep a CA bundle path the caller already configured.
        if not isinstance(session.verify, str):
            session.verify = True
    else:
        _enable_insecure_tls(session)
    return session


def _enable_insecure_tls(session: Session) -> None:
    # Accepts any certificate chain. Only for test servers with self-signed certificates.
    session.verify = False
    urllib3.disable_warnings(InsecureRequestWarning)
    logger.warning("TLS certificate verification is disabled (insecure mode)")


def ensure_success(response: Response) -> None:
    """Raise `RequestError` if the response signals a failure."""

    if 200 <= response.status_code < 300:
        return
    message = f"La Poste API error {response.status_code}: {response.text[:200]}"
    error_cls = AuthenticationError if response.status_code in (401, 403) else RequestError
    raise error_cls(message, status_code=response.status_code, details=response.text)


__all__ = ["configure_session", "ensure_success", "resolve_strict_ssl"]
