"""Prefab construction.

Builds a prefab asset from a source model asset by threading a build
context through a chain of fallible steps.

Pipeline flow:
    1. Check that the source can be turned into a prefab
    2. One step per configured component: stage its child assets
    3. Save the staged children and the prefab

The in-memory prefab is always released when the run ends. If any step
fails, every file the run already wrote is deleted again.
"""

from __future__ import annotations

import copy
import logging
import posixpath
from dataclasses import dataclass, field
from functools import partial
from typing import Any

from .asset_file import AssetFile
from .asset_path import normalize_asset_path, replace_illegal_chars
from .asset_store import AssetStore
from .config import Config
from .outcome import Err, Ok, Outcome, err, ok, run_steps

logger = logging.getLogger(__name__)

PREFAB_KIND = 'prefab'


@dataclass
class BuildContext:
    """State of one prefab build run."""
    prefab: AssetFile
    source_path: str
    children: list[AssetFile] = field(default_factory=list)
    written: list[str] = field(default_factory=list)
    released: bool = False

    def release(self, store: AssetStore, rollback: bool) -> None:
        """Drop the in-memory prefab, optionally deleting written files.

        Args:
            store: Store the run wrote to.
            rollback: Delete every asset recorded in `written`.
        """
        if rollback:
            for asset_path in reversed(self.written):
                store.delete(asset_path)
            if self.written:
                logger.info(f"Rolled back {len(self.written)} asset(s) for {self.prefab.path}")
            self.written.clear()

        self.children.clear()
        self.prefab.asset.clear()
        self.released = True


class PrefabBuilder:
    """Creates prefab assets from source model assets."""

    def __init__(self, config: Config, store: AssetStore):
        """Initialize the builder.

        Args:
            config: Configuration with the `prefab` section.
            store: Asset store holding the source and receiving the output.
        """
        self.config = config
        self.store = store

    @property
    def prefab_extension(self) -> str:
        return self.config.get('prefab.extension', '.prefab')

    @property
    def asset_extension(self) -> str:
        return self.config.get('prefab.asset_extension', '.asset')

    def make_prefab(self, source_path: str) -> Outcome[str]:
        """Build a prefab next to the source asset.

        Args:
            source_path: Asset path of the source model.

        Returns:
            Ok with the new prefab's asset path, or Err with the reason.
        """
        if not source_path or not self.store.exists(source_path):
            return err("Invalid asset path")

        source_path = self.store.normalize(source_path)
        source_dir = posixpath.dirname(source_path) or "."
        stem = posixpath.splitext(posixpath.basename(source_path))[0]
        new_path = self.store.generate_unique_path(normalize_asset_path(
            f"{source_dir}/{stem}{self.prefab_extension}", replace_illegal_chars, self.store.separators
        ))

        # Instantiate: the prefab starts as a copy of the source document
        instance = copy.deepcopy(self.store.load(source_path))
        if not isinstance(instance, dict):
            return err("Source asset is not a document")

        context = BuildContext(
            prefab=AssetFile(instance, new_path, self.store.separators),
            source_path=source_path,
        )
        logger.info(f"Building prefab {context.prefab.path} from {source_path}")

        outcome: Outcome[Any] = err("Prefab build interrupted")
        try:
            outcome = run_steps(ok(context), self.build_steps())
            return outcome
        finally:
            failed = not isinstance(outcome, Ok)
            if failed:
                logger.warning(f"Prefab build failed for {source_path}: {_message(outcome)}")
            context.release(self.store, rollback=failed)

    def build_steps(self) -> list:
        """Get the ordered step functions of a build."""
        components = self.config.get('prefab.components', []) or []
        steps = [self.check_source]
        steps.extend(partial(self.attach_component, spec) for spec in components)
        steps.append(self.save)
        return steps

    def check_source(self, context: BuildContext) -> Outcome[BuildContext]:
        """Fail unless the source is a plain model matching `prefab.require`."""
        document = context.prefab.asset
        if document.get('kind') == PREFAB_KIND:
            return err("Target is already a prefab")

        required = self.config.get('prefab.require', {}) or {}
        for key, expected in required.items():
            if document.get(key) != expected:
                return err(f"Target is not {key}={expected!r}")

        logger.debug(f"Source {context.source_path} accepted")
        return ok(context)

    def attach_component(self, spec: dict[str, Any], context: BuildContext) -> Outcome[BuildContext]:
        """Stage the child assets of one component and reference them from the prefab.

        Children are placed at "{prefab dir}/{prefab name}{component dir}/{asset}{ext}".
        """
        name = spec.get('name')
        if not name:
            return err("Component without a name")

        child_dir = spec.get('dir', f".{name}")
        kind = spec.get('kind', name)
        staged = {child.path for child in context.children}

        refs = []
        for asset_name in spec.get('assets', []) or []:
            child = context.prefab.child(
                {'kind': kind, 'name': asset_name},
                f"{child_dir}/{asset_name}{self.asset_extension}",
            )
            if child.path in staged:
                return err(f"Duplicate child asset: {child.path}")
            staged.add(child.path)
            context.children.append(child)
            refs.append(child.path)

        context.prefab.asset.setdefault('components', {})[name] = refs
        logger.info(f"  Attached component '{name}' ({len(refs)} asset(s))")
        return ok(context)

    def save(self, context: BuildContext) -> Outcome[str]:
        """Write the staged children and the prefab.

        Nothing is written when any target path is already occupied, so a
        rollback only ever removes files this run created.
        """
        for target in [*context.children, context.prefab]:
            if self.store.is_taken(target.path):
                return err(f"Asset already exists: {target.path}")

        context.prefab.asset['kind'] = PREFAB_KIND
        context.prefab.asset['source'] = context.source_path
        try:
            for child in context.children:
                context.written.append(child.path)
                self.store.create(child)
            context.written.append(context.prefab.path)
            self.store.create(context.prefab)
        except OSError as e:
            logger.error(f"Could not write {context.prefab.path}: {e}")
            return err(f"Could not save prefab: {context.prefab.path}")

        logger.info(f"Saved prefab {context.prefab.path}")
        return ok(context.prefab.path)


def _message(outcome: Outcome[Any]) -> str:
    return outcome.message if isinstance(outcome, Err) else "interrupted"
