from __future__ import annotations

import logging

from expo_updates_manifest.core.common.exceptions import MissingPlatformError
from expo_updates_manifest.core.constants import PLATFORM_HEADER, PLATFORM_QUERY_PARAM
from expo_updates_manifest.core.domain.request import IncomingRequest

logger = logging.getLogger(__name__)


def resolve_platform(request: IncomingRequest) -> str:
    """Return the platform requested by the client.

    The ``platform`` query parameter takes precedence over the
    ``expo-platform`` header. The value is passed through unvalidated.

    Raises:
        MissingPlatformError: If neither source carries a non-empty value
    """
    platform = request.query_param(PLATFORM_QUERY_PARAM) or request.header(
        PLATFORM_HEADER
    )
    if not platform:
        raise MissingPlatformError()
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Resolved platform %s for %s", platform, request.url)
    return platform
