"""Package version lookup."""

from __future__ import annotations

import logging
from importlib import metadata

logger = logging.getLogger(__name__)

DISTRIBUTION_NAME = "laposte-sdk"
UNKNOWN_VERSION = "UNKNOWN"


def get_version() -> str:
    """Return the installed version, or ``UNKNOWN`` when metadata is unavailable."""

    try:
        version = metadata.version(DISTRIBUTION_NAME)
    except (metadata.PackageNotFoundError, OSError, ValueError) as exc:
        logger.debug("Unable to read %s metadata: %s", DISTRIBUTION_NAME, exc)
        return UNKNOWN_VERSION
    return version or UNKNOWN_VERSION


def user_agent() -> str:
    return f"{DISTRIBUTION_NAME}/{get_version()}"


__all__ = ["get_version", "user_agent", "UNKNOWN_VERSION"]
