"""
FastAPI request adapters.

Converts Starlette/FastAPI request objects into the transport-agnostic
``IncomingRequest`` used by the manifest services.
"""

from __future__ import annotations

from starlette.requests import Request

from expo_updates_manifest.core.domain.request import IncomingRequest


def starlette_to_incoming_request(request: Request) -> IncomingRequest:
    """Convert a Starlette request to an ``IncomingRequest``.

    Args:
        request: The Starlette request object

    Returns:
        The request URL (path and query) and lower-cased headers
    """
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"

    headers: dict[str, str] = {}
    for header_name, header_value in request.headers.items():
        # First occurrence wins for repeated headers
        headers.setdefault(header_name.lower(), header_value)

    return IncomingRequest(url=url, headers=headers)
