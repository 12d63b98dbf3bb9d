"""Tests for facility matching."""
import pytest

from prefab_kit.asset_path import parent_dir
from prefab_kit.facility import is_same_facility


def test_ancestor_matches():
    assert is_same_facility("/a/b/c", "/a/b") is True
    assert is_same_facility("/a/b", "/a/b/c") is True
    assert is_same_facility("/a", "/a/b/c/d") is True


def test_unrelated_paths_exhaust_root():
    assert is_same_facility("/a", "/x/y/z") is False


@pytest.mark.parametrize("d", ["/", "/a", "a", "a/b/c", ".", "", "Assets/Models"])
def test_reflexive(d):
    assert is_same_facility(d, d) is True


def test_empty_side_never_matches():
    assert is_same_facility("", "/a") is False
    assert is_same_facility("/a", None) is False
    assert is_same_facility(None, None) is True


def test_short_side_without_parent_never_matches():
    # A single relative segment has no parent to stand on
    assert is_same_facility("Assets", "Assets/Models") is False
    assert is_same_facility("/", "/a") is False


def test_relative_ancestor_matches():
    assert is_same_facility("Assets/Models", "Assets/Models/Avatar.Textures") is True


def test_siblings_do_not_match():
    assert is_same_facility("/a/x", "/a/y") is False


def test_roles_are_fixed_after_first_assignment():
    # "/a" is a common ancestor, but the longer string is walked past it
    # while the shorter "/a/c/d" is held fixed.
    # Reassigning roles at every level would instead return True here.
    assert is_same_facility("/a/bbbbbb", "/a/c/d") is False
    assert is_same_facility("/a/c/d", "/a/bbbbbb") is False


def test_prefix_is_not_enough():
    assert is_same_facility("/ab", "/a/b") is False
    assert is_same_facility("/a/b", "/a/bc") is False


def test_injected_parent_accessor():
    calls = []

    def parent_of(path):
        calls.append(path)
        return parent_dir(path)

    assert is_same_facility("/a/b/c/d", "/a/b", parent_of) is True
    assert calls == ["/a/b", "/a/b/c/d", "/a/b/c"]


def test_injected_parent_accessor_with_own_naming():
    parents = {"site:lab/room/bench": "site:lab/room", "site:lab/room": "site:lab", "site:lab": None}
    assert is_same_facility("site:lab/room/bench", "site:lab", parents.get) is False
    assert is_same_facility("site:lab/room/bench", "site:lab/room", parents.get) is True


def test_deep_paths_do_not_recurse():
    deep = "/a" * 1500
    assert is_same_facility(deep, "/a") is True
    assert is_same_facility(deep, "/b") is False
