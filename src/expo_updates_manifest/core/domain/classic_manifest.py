from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from expo_updates_manifest.core.common.exceptions import ClassicManifestError


class ClassicManifest:
    """Narrow view over a classic manifest ``exp`` object.

    Only the handful of fields the updates manifest depends on are exposed;
    the complete structure is kept untouched in ``raw`` so it can be embedded
    under ``extra.expoGoConfig``.
    """

    def __init__(self, raw: Mapping[str, Any]) -> None:
        self._raw = dict(raw)

    @property
    def raw(self) -> dict[str, Any]:
        return dict(self._raw)

    @property
    def bundle_url(self) -> str:
        bundle_url = self._raw.get("bundleUrl")
        if not bundle_url or not isinstance(bundle_url, str):
            raise ClassicManifestError("Classic manifest does not contain a bundleUrl")
        return bundle_url

    @property
    def runtime_version(self) -> str | None:
        return self._raw.get("runtimeVersion")

    @property
    def sdk_version(self) -> str | None:
        return self._raw.get("sdkVersion") or None

    def __repr__(self) -> str:
        return f'<ClassicManifest bundleUrl="{self._raw.get("bundleUrl")}">'
