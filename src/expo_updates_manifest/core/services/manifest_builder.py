"""
Manifest builder.

Combines the platform, project configuration, entry point, classic
manifest, runtime version and assets of a project into a single Expo
Updates manifest.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from collections.abc import Callable
from datetime import datetime, timezone

from expo_updates_manifest.core.common.exceptions import ClassicManifestError
from expo_updates_manifest.core.common.url_utils import strip_script_extension
from expo_updates_manifest.core.constants import (
    EXPO_PROTOCOL_VERSION,
    EXPO_SFV_VERSION,
    HOST_HEADER,
    JSON_CONTENT_TYPE,
    LAUNCH_ASSET_CONTENT_TYPE,
    MANIFEST_CACHE_CONTROL,
)
from expo_updates_manifest.core.domain.classic_manifest import ClassicManifest
from expo_updates_manifest.core.domain.manifest import (
    LaunchAsset,
    ManifestDocument,
    ManifestResponse,
)
from expo_updates_manifest.core.domain.request import IncomingRequest
from expo_updates_manifest.core.interfaces.classic_manifest_interface import (
    IClassicManifestProvider,
)
from expo_updates_manifest.core.interfaces.entry_point_interface import (
    IEntryPointResolver,
)
from expo_updates_manifest.core.interfaces.manifest_builder_interface import (
    IManifestBuilder,
)
from expo_updates_manifest.core.interfaces.project_config_interface import (
    IProjectConfigLoader,
)
from expo_updates_manifest.core.services.asset_url_rewriter import AssetUrlRewriter
from expo_updates_manifest.core.services.platform_resolver import resolve_platform
from expo_updates_manifest.core.services.runtime_version_resolver import (
    SdkRuntimeMapping,
    resolve_runtime_version,
)
from expo_updates_manifest.core.services.sdk_runtime_versions import (
    get_runtime_version_for_sdk_version,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
IdGenerator = Callable[[], str]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def generate_manifest_id() -> str:
    return str(uuid.uuid4())


def format_timestamp(moment: datetime) -> str:
    """Format ``moment`` as an ISO-8601 UTC timestamp with millisecond precision."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return (
        moment.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def build_manifest_headers() -> dict[str, str]:
    """Return the protocol headers in the order they are written."""
    headers: dict[str, str] = {}
    headers["expo-protocol-version"] = EXPO_PROTOCOL_VERSION
    headers["expo-sfv-version"] = EXPO_SFV_VERSION
    headers["cache-control"] = MANIFEST_CACHE_CONTROL
    headers["content-type"] = JSON_CONTENT_TYPE
    return headers


class ManifestBuilder(IManifestBuilder):
    """Builds Expo Updates manifests from the project's collaborators."""

    def __init__(
        self,
        config_loader: IProjectConfigLoader,
        entry_point_resolver: IEntryPointResolver,
        classic_manifest_provider: IClassicManifestProvider,
        asset_rewriter: AssetUrlRewriter,
        *,
        sdk_mapping: SdkRuntimeMapping = get_runtime_version_for_sdk_version,
        clock: Clock = utc_now,
        id_generator: IdGenerator = generate_manifest_id,
    ) -> None:
        self._config_loader = config_loader
        self._entry_point_resolver = entry_point_resolver
        self._classic_manifest_provider = classic_manifest_provider
        self._asset_rewriter = asset_rewriter
        self._sdk_mapping = sdk_mapping
        self._clock = clock
        self._id_generator = id_generator

    async def build_manifest_response(
        self, project_root: str, request: IncomingRequest
    ) -> ManifestResponse:
        headers = build_manifest_headers()

        platform = resolve_platform(request)
        host = request.header(HOST_HEADER)

        project_config = await asyncio.to_thread(
            self._config_loader.get_config, project_root
        )
        entry_point = await asyncio.to_thread(
            self._entry_point_resolver.resolve_entry_point,
            project_root,
            platform,
            project_config,
        )
        main_module_name = strip_script_extension(entry_point)

        classic_response = await self._classic_manifest_provider.get_manifest_response(
            project_root, platform, host
        )
        exp = classic_response.get("exp")
        if not isinstance(exp, dict):
            raise ClassicManifestError("Classic manifest response has no exp object")
        classic_manifest = ClassicManifest(exp)
        runtime_version = resolve_runtime_version(classic_manifest, self._sdk_mapping)
        bundle_url = classic_manifest.bundle_url

        assets = await self._asset_rewriter.resolve_assets(
            project_root, project_config.exp, bundle_url
        )

        body = ManifestDocument(
            id=self._id_generator(),
            created_at=format_timestamp(self._clock()),
            runtime_version=runtime_version,
            launch_asset=LaunchAsset(
                key=main_module_name,
                content_type=LAUNCH_ASSET_CONTENT_TYPE,
                url=bundle_url,
            ),
            assets=assets,
            metadata={},
            extra={"expoGoConfig": classic_manifest.raw},
        )
        logger.debug(
            "Built manifest %s for platform %s (runtime version %s)",
            body.id,
            platform,
            runtime_version,
        )
        return ManifestResponse(body=body, headers=headers)
