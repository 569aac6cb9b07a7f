from __future__ import annotations

from abc import ABC, abstractmethod


class IErrorLogger(ABC):
    """Reports project-level errors to the developer."""

    @abstractmethod
    def log_error(self, project_root: str, tag: str, stack_trace: str) -> None:
        pass
