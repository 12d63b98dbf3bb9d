"""Prefab authoring toolkit package."""

from .asset_path import (
    DEFAULT_SEPARATORS,
    identity,
    normalize_asset_path,
    parent_dir,
    replace_illegal_chars,
)
from .outcome import (
    Err,
    Ok,
    Outcome,
    OutcomeError,
    err,
    format_outcome,
    ok,
    run_steps,
)
from .facility import is_same_facility
from .asset_file import AssetFile
from .asset_store import AssetStore
from .prefab_builder import BuildContext, PrefabBuilder
from .resolver import resolve_reference

__all__ = [
    # Path normalization
    "DEFAULT_SEPARATORS",
    "identity",
    "normalize_asset_path",
    "parent_dir",
    "replace_illegal_chars",
    # Outcomes
    "Err",
    "Ok",
    "Outcome",
    "OutcomeError",
    "err",
    "format_outcome",
    "ok",
    "run_steps",
    # Facility matching
    "is_same_facility",
    # Assets
    "AssetFile",
    "AssetStore",
    "BuildContext",
    "PrefabBuilder",
    "resolve_reference",
]
