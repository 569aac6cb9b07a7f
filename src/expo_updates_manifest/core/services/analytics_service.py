"""Analytics sink for developer tooling events."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from expo_updates_manifest.core.common.logging_utils import get_logger
from expo_updates_manifest.core.config.app_config import AnalyticsConfig
from expo_updates_manifest.core.interfaces.analytics_interface import (
    IAnalyticsService,
)

logger = logging.getLogger(__name__)
event_logger = get_logger("analytics")


class AnalyticsService(IAnalyticsService):
    """Records events as structured log lines and optionally forwards them.

    When analytics is enabled and an endpoint is configured every event is
    POSTed as JSON. Delivery failures are logged and never raised.
    """

    def __init__(
        self,
        config: AnalyticsConfig,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config
        self._client = client

    @property
    def forwarding_enabled(self) -> bool:
        return self._config.enabled and bool(self._config.endpoint)

    async def log_event(self, name: str, properties: dict[str, Any]) -> None:
        try:
            await self._record(name, properties)
        except httpx.HTTPError as e:
            logger.warning("Failed to deliver analytics event %s: %s", name, e)
        except Exception:
            # Runs as a background task after the response has been sent
            logger.exception(
                "Unexpected error while recording analytics event %s", name
            )

    async def _record(self, name: str, properties: dict[str, Any]) -> None:
        event_logger.info("analytics_event", event_name=name, properties=properties)
        if not self.forwarding_enabled:
            return

        payload: dict[str, Any] = {"event": name, "properties": properties}
        if self._config.write_key:
            payload["writeKey"] = self._config.write_key

        if self._client is not None:
            response = await self._client.post(
                self._config.endpoint, json=payload, timeout=self._config.timeout
            )
        else:
            async with httpx.AsyncClient(timeout=self._config.timeout) as client:
                response = await client.post(self._config.endpoint, json=payload)
        response.raise_for_status()
