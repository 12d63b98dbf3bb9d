"""Reference resolution for generated prefab assets.

A prefab may reference assets (typically its thumbnail) that were exported
into a side directory next to the prefab, e.g. "Models/Avatar.Textures/".
When an equivalent asset already exists elsewhere, the reference is
re-pointed to it so the side copy can be dropped.
"""

import logging
import posixpath
from typing import Iterable

from .asset_path import DEFAULT_SEPARATORS, SEPARATOR, normalize_asset_path, parent_dir
from .asset_store import AssetStore
from .facility import is_same_facility

logger = logging.getLogger(__name__)


def side_dir_for(prefab_path: str, suffix: str, separators: Iterable[str] = DEFAULT_SEPARATORS) -> str:
    """Get the side directory of a prefab ("{dir}/{name}{suffix}")."""
    canonical = normalize_asset_path(prefab_path, separators=separators)
    name = posixpath.splitext(posixpath.basename(canonical))[0]
    directory = parent_dir(canonical) or "."
    return normalize_asset_path(f"{directory}/{name}{suffix}")


def _anchored_dir(asset_path: str) -> str:
    # Directory of a store path, rooted at "/" so top-level directories have a parent
    return parent_dir(SEPARATOR + asset_path)


def resolve_reference(
    reference_path: str,
    prefab_path: str,
    store: AssetStore,
    side_dir_suffix: str = ".Textures",
) -> str:
    """Find the asset a prefab's side-directory reference should point to.

    Only references stored in the prefab's side directory are considered.
    A candidate must have the same file name as the reference, live at a
    different path, and either have identical contents or sit in the same
    facility as the reference's directory. Directories are compared
    anchored at the store root, which itself has no parent.

    Args:
        reference_path: Asset path currently referenced by the prefab.
        prefab_path: Asset path of the prefab.
        store: Store used to look up candidates.
        side_dir_suffix: Suffix of the prefab's side directory.

    Returns:
        Path of the matching candidate, or `reference_path` unchanged.
    """
    if not reference_path or not prefab_path:
        return reference_path

    reference = store.normalize(reference_path)
    if parent_dir(reference) != side_dir_for(prefab_path, side_dir_suffix, store.separators):
        logger.debug(f"Reference {reference} is not in the side directory of {prefab_path}")
        return reference_path

    if not store.exists(reference):
        return reference_path

    reference_dir = _anchored_dir(reference)
    file_name = posixpath.basename(reference)
    stem = posixpath.splitext(file_name)[0]
    reference_hash = store.content_hash(reference)

    for candidate in store.find(stem):
        if candidate == reference or posixpath.basename(candidate) != file_name:
            continue

        if store.content_hash(candidate) == reference_hash or is_same_facility(_anchored_dir(candidate), reference_dir):
            logger.info(f"Resolved reference {reference} -> {candidate}")
            return candidate

    return reference_path
