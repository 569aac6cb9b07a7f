from __future__ import annotations

from collections.abc import Callable

from expo_updates_manifest.core.domain.classic_manifest import ClassicManifest
from expo_updates_manifest.core.services.sdk_runtime_versions import (
    get_runtime_version_for_sdk_version,
)

SdkRuntimeMapping = Callable[[str], str]


def resolve_runtime_version(
    classic_manifest: ClassicManifest,
    sdk_mapping: SdkRuntimeMapping = get_runtime_version_for_sdk_version,
) -> str | None:
    """Derive the runtime version advertised in the manifest.

    An explicit ``runtimeVersion`` wins, then one derived from
    ``sdkVersion``. ``None`` when neither is set.
    """
    if classic_manifest.runtime_version is not None:
        return classic_manifest.runtime_version
    if classic_manifest.sdk_version:
        return sdk_mapping(classic_manifest.sdk_version)
    return None
