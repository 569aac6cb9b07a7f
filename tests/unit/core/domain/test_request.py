import pytest
from pydantic import ValidationError

from expo_updates_manifest.core.common.exceptions import (
    ClassicManifestError,
    MalformedRequestError,
)
from expo_updates_manifest.core.domain.classic_manifest import ClassicManifest
from expo_updates_manifest.core.domain.manifest import LaunchAsset, ManifestDocument
from expo_updates_manifest.core.domain.request import IncomingRequest


def test_request_path_and_query() -> None:
    request = IncomingRequest(url="/update-manifest-experimental?platform=ios&x=1")

    assert request.path == "/update-manifest-experimental"
    assert request.query_param("platform") == "ios"
    assert request.query_param("missing") is None


def test_headers_are_case_insensitive() -> None:
    request = IncomingRequest(url="/", headers={"Expo-Platform": "ios", "HOST": "h"})

    assert request.header("expo-platform") == "ios"
    assert request.header("Host") == "h"


@pytest.mark.parametrize("url", [None, ""])
def test_request_without_url_is_malformed(url) -> None:
    with pytest.raises(MalformedRequestError):
        IncomingRequest(url=url).path


def test_classic_manifest_view() -> None:
    raw = {"bundleUrl": "http://h/index.bundle", "sdkVersion": "45.0.0", "extra": 1}
    manifest = ClassicManifest(raw)

    assert manifest.bundle_url == "http://h/index.bundle"
    assert manifest.sdk_version == "45.0.0"
    assert manifest.runtime_version is None
    assert manifest.raw == raw
    assert manifest.raw is not raw


def test_classic_manifest_requires_bundle_url() -> None:
    with pytest.raises(ClassicManifestError):
        ClassicManifest({"bundleUrl": None}).bundle_url


def test_manifest_document_is_immutable() -> None:
    document = ManifestDocument(
        id="abc",
        created_at="2022-01-01T00:00:00.000Z",
        launch_asset=LaunchAsset(key="index", url="http://h/index.bundle"),
    )

    assert document.to_json_dict()["metadata"] == {}
    assert document.to_json_dict()["launchAsset"]["contentType"] == (
        "application/javascript"
    )
    with pytest.raises(ValidationError):
        document.id = "other"
