from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import ConfigDict, Field

from expo_updates_manifest.core.constants import LAUNCH_ASSET_CONTENT_TYPE
from expo_updates_manifest.core.interfaces.model_bases import DomainModel, InternalDTO


class LaunchAsset(DomainModel):
    """The entry JavaScript bundle reference of a manifest."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    key: str
    content_type: str = Field(
        default=LAUNCH_ASSET_CONTENT_TYPE, alias="contentType"
    )
    url: str


class ManifestDocument(DomainModel):
    """Expo Updates manifest served to update-aware clients."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    created_at: str = Field(alias="createdAt")
    runtime_version: str | None = Field(default=None, alias="runtimeVersion")
    launch_asset: LaunchAsset = Field(alias="launchAsset")
    assets: list[dict[str, Any]] = Field(default_factory=list)
    # Clients detect an expo-updates manifest by the presence of this key
    metadata: dict[str, Any] = Field(default_factory=dict)
    extra: dict[str, Any] = Field(default_factory=dict)

    def to_json_dict(self) -> dict[str, Any]:
        """Return the wire representation using protocol field names."""
        return self.model_dump(by_alias=True, mode="json")


@dataclass
class ManifestResponse(InternalDTO):
    """Manifest body plus the ordered protocol headers to send with it."""

    body: ManifestDocument
    headers: dict[str, str]
