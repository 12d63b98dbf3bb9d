"""Tests for side-directory reference resolution."""
import pytest

from prefab_kit.asset_store import AssetStore
from prefab_kit.resolver import resolve_reference, side_dir_for

PREFAB = "Chars/Models/Avatar.prefab"
REFERENCE = "Chars/Models/Avatar.Textures/thumb.png"


@pytest.fixture
def store(tmp_path):
    root = tmp_path / "Assets"
    root.mkdir()
    return AssetStore(root)


def put(store, path, data):
    target = store.root / path
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(data)


def test_side_dir_for():
    assert side_dir_for(PREFAB, ".Textures") == "Chars/Models/Avatar.Textures"
    assert side_dir_for("Avatar.prefab", ".Textures") == "Avatar.Textures"
    assert side_dir_for("/Avatar.prefab", ".Textures") == "/Avatar.Textures"


def test_identical_content_elsewhere_wins(store):
    put(store, REFERENCE, b"pixels")
    put(store, "Shared/Icons/thumb.png", b"pixels")

    assert resolve_reference(REFERENCE, PREFAB, store) == "Shared/Icons/thumb.png"


def test_same_facility_candidate_wins(store):
    put(store, REFERENCE, b"exported copy")
    put(store, "Chars/Models/thumb.png", b"original")

    assert resolve_reference(REFERENCE, PREFAB, store) == "Chars/Models/thumb.png"


def test_unrelated_candidate_is_ignored(store):
    put(store, REFERENCE, b"exported copy")
    put(store, "Other/Place/thumb.png", b"original")

    assert resolve_reference(REFERENCE, PREFAB, store) == REFERENCE


def test_candidate_needs_same_file_name(store):
    put(store, REFERENCE, b"pixels")
    put(store, "Shared/thumb.jpg", b"pixels")

    assert resolve_reference(REFERENCE, PREFAB, store) == REFERENCE


def test_identical_candidate_at_store_root(store):
    put(store, REFERENCE, b"pixels")
    put(store, "thumb.png", b"pixels")

    assert resolve_reference(REFERENCE, PREFAB, store) == "thumb.png"


def test_store_root_is_not_a_facility(store):
    put(store, REFERENCE, b"exported copy")
    put(store, "thumb.png", b"original")

    assert resolve_reference(REFERENCE, PREFAB, store) == REFERENCE


def test_top_level_directory_facility(store):
    put(store, "Models/Avatar.Textures/thumb.png", b"exported copy")
    put(store, "Models/thumb.png", b"original")

    resolved = resolve_reference("Models/Avatar.Textures/thumb.png", "Models/Avatar.prefab", store)
    assert resolved == "Models/thumb.png"


def test_configured_separators_are_used(tmp_path):
    root = tmp_path / "Assets"
    root.mkdir()
    store = AssetStore(root, separators=("/", "\\"))
    put(store, "Models/Avatar.Textures/thumb.png", b"exported copy")
    put(store, "Models/thumb.png", b"original")

    resolved = resolve_reference("Models\\Avatar.Textures\\thumb.png", "Models\\Avatar.prefab", store, ".Textures")
    assert resolved == "Models/thumb.png"
    assert side_dir_for("Models\\Avatar.prefab", ".Textures", ("/", "\\")) == "Models/Avatar.Textures"


def test_reference_outside_side_dir_is_kept(store):
    put(store, "Chars/Models/thumb.png", b"pixels")
    put(store, "Shared/Icons/thumb.png", b"pixels")

    assert resolve_reference("Chars/Models/thumb.png", PREFAB, store) == "Chars/Models/thumb.png"


def test_custom_side_dir_suffix(store):
    put(store, "Chars/Models/Avatar.Images/thumb.png", b"pixels")
    put(store, "Shared/Icons/thumb.png", b"pixels")

    resolved = resolve_reference("Chars/Models/Avatar.Images/thumb.png", PREFAB, store, ".Images")
    assert resolved == "Shared/Icons/thumb.png"


def test_missing_inputs(store):
    assert resolve_reference("", PREFAB, store) == ""
    assert resolve_reference(REFERENCE, "", store) == REFERENCE
    assert resolve_reference(REFERENCE, PREFAB, store) == REFERENCE
