"""Directory facility matching.

Two asset directories belong to the same facility when the shorter one is
reached by walking the longer one up toward the root.
"""

import logging
from typing import Callable, Optional

from .asset_path import parent_dir

logger = logging.getLogger(__name__)

ParentOf = Callable[[str], Optional[str]]


def is_same_facility(
    dir_a: Optional[str],
    dir_b: Optional[str],
    parent_of: ParentOf = parent_dir,
) -> bool:
    """Check whether two directories denote the same logical facility.

    The shorter directory (by character count; on a tie `dir_b`) is held
    fixed and the longer one ascends one level at a time until it equals
    the shorter one or runs out of parents. Roles are assigned once and
    never swapped, so this is an ancestor-or-equal test, not a common
    ancestor test.

    Args:
        dir_a: First directory path, canonical form.
        dir_b: Second directory path, canonical form.
        parent_of: Returns a directory's parent, or None at a root.

    Returns:
        True if the shorter directory is the longer one or one of its
        ancestors.

    Examples:
        >>> is_same_facility("/a/b/c", "/a/b")
        True
        >>> is_same_facility("/a", "/x/y/z")
        False
    """
    if dir_a == dir_b:
        return True

    if not dir_a or not dir_b:
        return False

    if len(dir_a) < len(dir_b):
        short_dir, long_dir = dir_a, dir_b
    else:
        short_dir, long_dir = dir_b, dir_a

    # The short side must itself have a parent to be a facility root
    if not parent_of(short_dir):
        return False

    while True:
        long_parent = parent_of(long_dir)
        if not long_parent:
            return False

        long_dir = long_parent
        logger.debug(f"Facility check: {short_dir!r} against {long_dir!r}")
        if long_dir == short_dir:
            return True
