"""YAML-backed asset database.

Assets are YAML documents stored under a root directory. Asset paths are
canonical, "/"-separated and relative to that root.
"""

import hashlib
import logging
import posixpath
from pathlib import Path
from typing import Any, Iterable, Union

import yaml

from .asset_file import AssetFile
from .asset_path import DEFAULT_SEPARATORS, SEPARATOR, normalize_asset_path

logger = logging.getLogger(__name__)


class AssetStore:
    """Reads and writes assets under a root directory."""

    def __init__(self, root: Union[str, Path], separators: Iterable[str] = DEFAULT_SEPARATORS):
        """Initialize the store.

        Args:
            root: Directory holding the assets.
            separators: Characters recognized as separators in asset paths.
        """
        self.root = Path(root)
        self.separators = tuple(separators)

    def normalize(self, asset_path: str) -> str:
        """Canonicalize an asset path, rejecting paths outside the root.

        Raises:
            ValueError: If the path is absolute or climbs above the root.
        """
        canonical = normalize_asset_path(asset_path, separators=self.separators)
        if canonical.startswith(SEPARATOR) or canonical == ".." or canonical.startswith("../"):
            raise ValueError(f"Asset path escapes store root: {asset_path}")
        return canonical

    def disk_path(self, asset_path: str) -> Path:
        """Get the filesystem location of an asset."""
        return self.root / self.normalize(asset_path)

    def exists(self, asset_path: str) -> bool:
        try:
            return self.disk_path(asset_path).is_file()
        except ValueError:
            return False

    def is_taken(self, asset_path: str) -> bool:
        """Check whether anything (file or directory) occupies an asset path."""
        try:
            return self.disk_path(asset_path).exists()
        except ValueError:
            return False

    def load(self, asset_path: str) -> dict[str, Any]:
        """Load an asset document.

        Raises:
            FileNotFoundError: If the asset does not exist.
        """
        path = self.disk_path(asset_path)
        if not path.is_file():
            raise FileNotFoundError(f"Asset not found: {asset_path}")

        with open(path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}

    def create(self, asset_file: AssetFile) -> Path:
        """Write an asset, creating its directory when missing.

        An existing asset at the same path is overwritten.

        Returns:
            Filesystem path written.
        """
        path = self.disk_path(asset_file.path)
        if not path.parent.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
            logger.debug(f"Created asset directory: {path.parent}")

        with open(path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(asset_file.asset, f, sort_keys=False, allow_unicode=True)

        logger.info(f"Created asset: {asset_file.path}")
        return path

    def delete(self, asset_path: str) -> bool:
        """Delete an asset and any directories left empty up to the root.

        Returns:
            True if a file was removed.
        """
        path = self.disk_path(asset_path)
        if not path.is_file():
            return False

        path.unlink()
        logger.info(f"Deleted asset: {asset_path}")

        parent = path.parent
        root = self.root.resolve()
        while parent.resolve() != root and parent.is_dir() and not any(parent.iterdir()):
            parent.rmdir()
            logger.debug(f"Removed empty directory: {parent}")
            parent = parent.parent
        return True

    def generate_unique_path(self, asset_path: str) -> str:
        """Return `asset_path`, or the first free "name N.ext" variant of it.

        Example:
            >>> store.generate_unique_path("Models/Avatar.prefab")
            'Models/Avatar 1.prefab'
        """
        canonical = self.normalize(asset_path)
        if not self.is_taken(canonical):
            return canonical

        stem, ext = posixpath.splitext(canonical)
        counter = 1
        while True:
            candidate = f"{stem} {counter}{ext}"
            if not self.is_taken(candidate):
                logger.debug(f"Unique asset path for {canonical}: {candidate}")
                return candidate
            counter += 1

    def find(self, name: str) -> list[str]:
        """Find assets whose file name without extension matches `name`.

        Matching is case-insensitive.

        Returns:
            Sorted list of asset paths.
        """
        if not self.root.exists():
            return []

        wanted = name.lower()
        matches = []
        for item in self.root.rglob('*'):
            if item.is_file() and item.stem.lower() == wanted:
                matches.append(item.relative_to(self.root).as_posix())
        return sorted(matches)

    def content_hash(self, asset_path: str) -> str:
        """MD5 hex digest of the asset's file contents."""
        return hashlib.md5(self.disk_path(asset_path).read_bytes()).hexdigest()
