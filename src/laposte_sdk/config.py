"""Configuration helpers for the La Poste SDK."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields

from .version import user_agent

LAPOSTE = "laposte"
DIGIPOSTE = "digiposte"

LAPOSTE_API_BASE_URL = "https://api.laposte.fr/"
DIGIPOSTE_API_BASE_URL = "https://api.laposte.fr/digiposte/1.0"

DEFAULT_BASE_URLS: Mapping[str, str] = {
    LAPOSTE: LAPOSTE_API_BASE_URL,
    DIGIPOSTE: DIGIPOSTE_API_BASE_URL,
}


class Env:
    """Supported environment variable names."""

    LAPOSTE_API_STRICT_SSL = "LAPOSTE_API_STRICT_SSL"
    LAPOSTE_API_BASE_URL = "LAPOSTE_API_BASE_URL"
    LAPOSTE_API_CONSUMER_KEY = "LAPOSTE_API_CONSUMER_KEY"
    LAPOSTE_API_CONSUMER_SECRET = "LAPOSTE_API_CONSUMER_SECRET"
    LAPOSTE_API_USERNAME = "LAPOSTE_API_USERNAME"
    LAPOSTE_API_PASSWORD = "LAPOSTE_API_PASSWORD"
    LAPOSTE_API_ACCESS_TOKEN = "LAPOSTE_API_ACCESS_TOKEN"
    LAPOSTE_API_REFRESH_TOKEN = "LAPOSTE_API_REFRESH_TOKEN"
    DIGIPOSTE_API_BASE_URL = "DIGIPOSTE_API_BASE_URL"
    DIGIPOSTE_API_ACCESS_TOKEN = "DIGIPOSTE_API_ACCESS_TOKEN"
    DIGIPOSTE_API_REFRESH_TOKEN = "DIGIPOSTE_API_REFRESH_TOKEN"
    DIGIPOSTE_API_USERNAME = "DIGIPOSTE_API_USERNAME"
    DIGIPOSTE_API_PASSWORD = "DIGIPOSTE_API_PASSWORD"


def check_family(family: str) -> str:
    if family not in DEFAULT_BASE_URLS:
        known = ", ".join(sorted(DEFAULT_BASE_URLS))
        raise ValueError(f"Unknown API family {family!r} (expected one of: {known})")
    return family


# Field name -> environment variable. Fields holding credentials are masked on display.
_ENV_FIELDS: Mapping[str, str] = {
    "strict_ssl_flag": Env.LAPOSTE_API_STRICT_SSL,
    "laposte_base_url": Env.LAPOSTE_API_BASE_URL,
    "consumer_key": Env.LAPOSTE_API_CONSUMER_KEY,
    "consumer_secret": Env.LAPOSTE_API_CONSUMER_SECRET,
    "laposte_username": Env.LAPOSTE_API_USERNAME,
    "laposte_password": Env.LAPOSTE_API_PASSWORD,
    "laposte_access_token": Env.LAPOSTE_API_ACCESS_TOKEN,
    "laposte_refresh_token": Env.LAPOSTE_API_REFRESH_TOKEN,
    "digiposte_base_url": Env.DIGIPOSTE_API_BASE_URL,
    "digiposte_access_token": Env.DIGIPOSTE_API_ACCESS_TOKEN,
    "digiposte_refresh_token": Env.DIGIPOSTE_API_REFRESH_TOKEN,
    "digiposte_username": Env.DIGIPOSTE_API_USERNAME,
    "digiposte_password": Env.DIGIPOSTE_API_PASSWORD,
}
_SECRET_FIELDS = frozenset(
    {
        "consumer_secret",
        "laposte_password",
        "laposte_access_token",
        "laposte_refresh_token",
        "digiposte_password",
        "digiposte_access_token",
        "digiposte_refresh_token",
    }
)


@dataclass(frozen=True, slots=True)
class SdkSettings:
    """Environment-driven defaults, read once and passed to clients."""

    strict_ssl_flag: str | None = None
    laposte_base_url: str | None = None
    consumer_key: str | None = None
    consumer_secret: str | None = None
    laposte_username: str | None = None
    laposte_password: str | None = None
    laposte_access_token: str | None = None
    laposte_refresh_token: str | None = None
    digiposte_base_url: str | None = None
    digiposte_access_token: str | None = None
    digiposte_refresh_token: str | None = None
    digiposte_username: str | None = None
    digiposte_password: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SdkSettings:
        source = os.environ if environ is None else environ
        values = {name: source.get(var) for name, var in _ENV_FIELDS.items()}
        return cls(**values)

    @property
    def strict_ssl(self) -> bool:
        return self.strict_ssl_flag != "false"

    def base_url_for(self, family: str) -> str:
        check_family(family)
        override = getattr(self, f"{family}_base_url")
        return override or DEFAULT_BASE_URLS[family]

    def access_token_for(self, family: str) -> str | None:
        check_family(family)
        return getattr(self, f"{family}_access_token")

    def masked(self) -> dict[str, str | None]:
        """Return environment variable names mapped to displayable values."""

        shown: dict[str, str | None] = {}
        for field in fields(self):
            value = getattr(self, field.name)
            if value is not None and field.name in _SECRET_FIELDS:
                value = "********"
            shown[_ENV_FIELDS[field.name]] = value
        return shown


@dataclass(slots=True)
class ClientConfig:
    """Typed configuration for `ApiClient`."""

    base_url: str
    verify_ssl: bool = True
    timeout: float = 30.0
    default_headers: Mapping[str, str] | None = None

    def resolved_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {
            "Accept": "application/json",
            "User-Agent": user_agent(),
        }
        if self.default_headers:
            headers.update(self.default_headers)
        return headers
