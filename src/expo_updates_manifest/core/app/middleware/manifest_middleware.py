from __future__ import annotations

import json
import logging
import traceback
from typing import Any

from starlette.background import BackgroundTask
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from expo_updates_manifest.core.constants import (
    ERROR_LOG_TAG,
    HTTP_520_MANIFEST_ERROR,
    MANIFEST_ROUTE_PATH,
    SERVE_MANIFEST_EVENT,
)
from expo_updates_manifest.core.interfaces.analytics_interface import (
    IAnalyticsService,
)
from expo_updates_manifest.core.interfaces.error_logger_interface import IErrorLogger
from expo_updates_manifest.core.interfaces.manifest_builder_interface import (
    IManifestBuilder,
)
from expo_updates_manifest.core.transport.fastapi.request_adapters import (
    starlette_to_incoming_request,
)

logger = logging.getLogger(__name__)


def format_error(error: BaseException) -> str:
    """Render an exception as ``<Type>: <message>`` for the error body."""
    message = str(error)
    name = error.__class__.__name__
    return f"{name}: {message}" if message else name


class ManifestMiddleware(BaseHTTPMiddleware):
    """Serve Expo Updates manifests on the manifest route.

    Requests for any other path are handed to the next handler untouched.
    Every failure while building the manifest is logged through the error
    logger and answered with status 520 and ``{"error": "..."}``.
    """

    def __init__(
        self,
        app: Any,
        *,
        project_root: str,
        builder: IManifestBuilder,
        analytics: IAnalyticsService,
        error_logger: IErrorLogger,
        developer_tool: str,
    ) -> None:  # type: ignore[override]
        super().__init__(app)
        self._project_root = project_root
        self._builder = builder
        self._analytics = analytics
        self._error_logger = error_logger
        self._developer_tool = developer_tool

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path != MANIFEST_ROUTE_PATH:
            return await call_next(request)

        try:
            manifest = await self._builder.build_manifest_response(
                self._project_root, starlette_to_incoming_request(request)
            )
            body = manifest.body.to_json_dict()
            content = json.dumps(body)
        except Exception as e:
            try:
                self._error_logger.log_error(
                    self._project_root, ERROR_LOG_TAG, traceback.format_exc()
                )
            except Exception:
                logger.exception(
                    "Failed to record manifest error for %s", self._project_root
                )
            return JSONResponse(
                content={"error": format_error(e)},
                status_code=HTTP_520_MANIFEST_ERROR,
            )

        return Response(
            content=content,
            headers=manifest.headers,
            background=BackgroundTask(
                self._analytics.log_event,
                SERVE_MANIFEST_EVENT,
                {
                    "projectRoot": self._project_root,
                    "developerTool": self._developer_tool,
                    "runtimeVersion": body.get("runtimeVersion"),
                },
            ),
        )
