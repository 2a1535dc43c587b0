"""High-level La Poste SDK entrypoints."""
from .client import ApiClient
from .config import ClientConfig, Env, SdkSettings
from .exceptions import ApiError, InvalidURLError, RequestError
from .http import configure_session
from .paths import normalize_path
from .request import ApiRequest
from .version import get_version

__version__ = get_version()

__all__ = [
    "ApiClient",
    "ApiRequest",
    "ApiError",
    "ClientConfig",
    "Env",
    "InvalidURLError",
    "RequestError",
    "SdkSettings",
    "configure_session",
    "get_version",
    "normalize_path",
]
