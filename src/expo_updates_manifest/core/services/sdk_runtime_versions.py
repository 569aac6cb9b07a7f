"""Mapping between Expo SDK versions and runtime versions."""

from __future__ import annotations

SDK_RUNTIME_VERSION_PREFIX = "exposdk:"


def get_runtime_version_for_sdk_version(sdk_version: str) -> str:
    """Return the runtime version clients built against ``sdk_version`` report."""
    if not sdk_version:
        raise ValueError("SDK version must be a non-empty string")
    return f"{SDK_RUNTIME_VERSION_PREFIX}{sdk_version}"
