from __future__ import annotations

import logging

from expo_updates_manifest.core.interfaces.error_logger_interface import IErrorLogger

logger = logging.getLogger(__name__)


class ProjectErrorLogger(IErrorLogger):
    """Writes project errors, with their stack traces, to the server log."""

    def log_error(self, project_root: str, tag: str, stack_trace: str) -> None:
        logger.error(
            "[%s] %s\n%s",
            tag,
            project_root,
            stack_trace,
            extra={"project_root": project_root, "tag": tag},
        )
