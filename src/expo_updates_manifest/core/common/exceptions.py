"""
Common exception classes for the Expo Updates manifest server.

Every failure raised while assembling a manifest derives from
`ManifestServerError` so callers can tell project problems apart from
programming errors. The manifest route renders all of them through the
same 520 error envelope.
"""

from __future__ import annotations


class ManifestServerError(Exception):
    """Base exception class for all manifest server errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MalformedRequestError(ManifestServerError):
    """Raised when an incoming request carries no resolvable URL."""

    def __init__(self, message: str = "Request has no URL") -> None:
        super().__init__(message)


class MissingPlatformError(ManifestServerError):
    """Raised when neither the platform query parameter nor header is present."""

    def __init__(
        self, message: str = "Must specify expo-platform header or query parameter"
    ) -> None:
        super().__init__(message)


class InvalidBundleUrlError(ManifestServerError):
    """Raised when a bundle URL is not an absolute http(s) URL with a path."""

    def __init__(
        self, message: str = "Invalid bundle URL", bundle_url: str | None = None
    ) -> None:
        super().__init__(message)
        self.bundle_url = bundle_url


class ProjectConfigError(ManifestServerError):
    """Raised when the project configuration cannot be loaded."""

    def __init__(
        self,
        message: str = "Unable to load project configuration",
        project_root: str | None = None,
    ) -> None:
        super().__init__(message)
        self.project_root = project_root


class EntryPointNotFoundError(ManifestServerError):
    """Raised when no entry point file can be resolved for a platform."""

    def __init__(
        self,
        message: str = "Unable to resolve entry point",
        platform: str | None = None,
    ) -> None:
        super().__init__(message)
        self.platform = platform


class ClassicManifestError(ManifestServerError):
    """Raised when the classic manifest cannot be produced or lacks a bundle URL."""

    def __init__(self, message: str = "Classic manifest is unavailable") -> None:
        super().__init__(message)
