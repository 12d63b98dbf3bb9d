"""In-memory asset bound to its output location."""

import posixpath
from typing import Any, Iterable

from .asset_path import DEFAULT_SEPARATORS, normalize_asset_path, replace_illegal_chars


class AssetFile:
    """An asset payload together with the sanitized path it will be saved to.

    The path is normalized with `replace_illegal_chars` applied per segment;
    the name parts are derived from the normalized path.

    Attributes:
        asset: The asset payload (a YAML-serializable mapping).
        path: Canonical asset path, e.g. "Models/Avatar.prefab".
        name: File name without extension ("Avatar").
        dir_name: Canonical directory of the asset ("Models").
        file_name: File name with extension ("Avatar.prefab").
        extension: Extension including the dot (".prefab").
    """

    def __init__(
        self,
        asset: dict[str, Any],
        path: str,
        separators: Iterable[str] = DEFAULT_SEPARATORS,
    ):
        if asset is None or not path:
            raise ValueError("AssetFile requires an asset and a non-empty path")

        self.asset = asset
        self.separators = tuple(separators)

        np = normalize_asset_path(path, replace_illegal_chars, self.separators)
        self.path = np
        self.file_name = posixpath.basename(np)
        self.name, self.extension = posixpath.splitext(self.file_name)
        self.dir_name = normalize_asset_path(posixpath.dirname(np), separators=self.separators)

    def child(self, child_asset: dict[str, Any], child_path: str) -> "AssetFile":
        """Create a sub-asset stored next to this asset.

        The child lands at "{dir_name}/{name}{child_path}", so a child path
        of ".Parts/Meta.asset" on "Models/Avatar.prefab" gives
        "Models/Avatar.Parts/Meta.asset".
        """
        return AssetFile(child_asset, f"{self.dir_name}/{self.name}{child_path}", self.separators)

    def __repr__(self) -> str:
        return f"AssetFile(path={self.path!r})"
