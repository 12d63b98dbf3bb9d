"""Tests for AssetFile."""
import pytest

from prefab_kit.asset_file import AssetFile


def test_derived_name_parts():
    af = AssetFile({}, "Models//Avatar.prefab")
    assert af.path == "Models/Avatar.prefab"
    assert af.name == "Avatar"
    assert af.dir_name == "Models"
    assert af.file_name == "Avatar.prefab"
    assert af.extension == ".prefab"


def test_path_is_sanitized_per_segment():
    af = AssetFile({}, "Models/Ava:tar?.prefab")
    assert af.path == "Models/Ava_tar_.prefab"
    assert af.name == "Ava_tar_"


def test_asset_without_directory():
    af = AssetFile({}, "Avatar.prefab")
    assert af.dir_name == "."
    assert af.child({}, ".Parts/Meta.asset").path == "Avatar.Parts/Meta.asset"


def test_child_is_placed_next_to_parent():
    af = AssetFile({"kind": "prefab"}, "Models/Avatar.prefab")
    child = af.child({"kind": "meta"}, ".MetaObject/Meta.asset")
    assert child.path == "Models/Avatar.MetaObject/Meta.asset"
    assert child.dir_name == "Models/Avatar.MetaObject"
    assert child.asset == {"kind": "meta"}


def test_alternate_separators_are_kept_for_children():
    af = AssetFile({}, "Models\\Avatar.prefab", separators=("/", "\\"))
    assert af.path == "Models/Avatar.prefab"
    assert af.child({}, "\\Meta.asset").path == "Models/Avatar/Meta.asset"


@pytest.mark.parametrize("asset,path", [(None, "a.asset"), ({}, ""), ({}, None)])
def test_rejects_missing_asset_or_path(asset, path):
    with pytest.raises(ValueError):
        AssetFile(asset, path)
