from pathlib import Path

import pytest

from expo_updates_manifest.core.common.exceptions import EntryPointNotFoundError
from expo_updates_manifest.core.domain.project_config import ProjectConfig
from expo_updates_manifest.core.services.entry_point_resolver import (
    EntryPointResolver,
)


def touch(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("", encoding="utf-8")


def test_configured_entry_point_wins(tmp_path: Path) -> None:
    touch(tmp_path / "src" / "entry.js")
    touch(tmp_path / "index.js")
    config = ProjectConfig(exp={"entryPoint": "./src/entry.js"}, pkg={"main": "index.js"})

    assert (
        EntryPointResolver().resolve_entry_point(str(tmp_path), "ios", config)
        == "src/entry.js"
    )


def test_package_main_without_extension(tmp_path: Path) -> None:
    touch(tmp_path / "app" / "main.ts")
    config = ProjectConfig(exp={}, pkg={"main": "app/main"})

    assert (
        EntryPointResolver().resolve_entry_point(str(tmp_path), "ios", config)
        == "app/main.ts"
    )


def test_platform_specific_index_before_generic(tmp_path: Path) -> None:
    touch(tmp_path / "index.android.js")
    touch(tmp_path / "index.js")
    config = ProjectConfig(exp={}, pkg={})
    resolver = EntryPointResolver()

    assert resolver.resolve_entry_point(str(tmp_path), "android", config) == "index.android.js"
    assert resolver.resolve_entry_point(str(tmp_path), "ios", config) == "index.js"


def test_absolute_entry_point_inside_project(tmp_path: Path) -> None:
    touch(tmp_path / "index.js")
    config = ProjectConfig(exp={"entryPoint": str(tmp_path / "index.js")}, pkg={})

    assert (
        EntryPointResolver().resolve_entry_point(str(tmp_path), "ios", config)
        == "index.js"
    )


def test_no_entry_point_raises(tmp_path: Path) -> None:
    with pytest.raises(EntryPointNotFoundError) as exc_info:
        EntryPointResolver().resolve_entry_point(
            str(tmp_path), "ios", ProjectConfig(exp={}, pkg={"main": "missing.js"})
        )
    assert exc_info.value.platform == "ios"
