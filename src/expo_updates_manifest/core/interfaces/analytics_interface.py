from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class IAnalyticsService(ABC):
    """Fire-and-forget analytics sink."""

    @abstractmethod
    async def log_event(self, name: str, properties: dict[str, Any]) -> None:
        """Record an event. Implementations must not raise."""
