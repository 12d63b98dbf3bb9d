"""Asset path normalization.

Canonicalizes slash-separated asset path strings without touching the
filesystem. Every asset location the tool derives (prefab outputs, child
assets, side directories) goes through `normalize_asset_path`.

Typical usage:
    >>> normalize_asset_path("Assets//Models/./Body/../Head.prefab")
    'Assets/Models/Head.prefab'
    >>> normalize_asset_path("Assets/Bad?Name.asset", replace_illegal_chars)
    'Assets/Bad_Name.asset'
"""

import os
import re
from typing import Callable, Iterable, Optional

# Canonical separator used in every normalized path
SEPARATOR = "/"

# "/" plus the platform separators when the platform defines others
DEFAULT_SEPARATORS: tuple[str, ...] = tuple(
    dict.fromkeys(c for c in (SEPARATOR, os.sep, os.altsep) if c)
)

_ILLEGAL_CHARS_PATTERN = re.compile(r'[/\\?|><:*"]')

SegmentMap = Callable[[str], str]


def identity(segment: str) -> str:
    """Return the segment unchanged."""
    return segment


def replace_illegal_chars(segment: str) -> str:
    """Replace characters that are illegal in asset file names with '_'.

    Args:
        segment: A single path segment (no separators).

    Returns:
        The sanitized segment.
    """
    return _ILLEGAL_CHARS_PATTERN.sub("_", segment)


def _split_segments(path: str, separators: Iterable[str]) -> list[str]:
    for sep in separators:
        if sep != SEPARATOR:
            path = path.replace(sep, SEPARATOR)
    return [s for s in path.split(SEPARATOR) if s]


def normalize_asset_path(
    path: Optional[str],
    segment_map: SegmentMap = identity,
    separators: Iterable[str] = DEFAULT_SEPARATORS,
) -> str:
    """Normalize an asset path string.

    Resolves "." and ".." segments, collapses runs of separators, and uses
    "/" as the only separator in the result. Absoluteness and a trailing
    separator are preserved. On an absolute path ".." never climbs above
    the root; on a relative path leading ".." segments are kept.

    `segment_map` is applied to each non-empty segment before the segment
    is interpreted, so a sanitizer can rewrite segments ahead of
    structural resolution.

    Args:
        path: Path string to normalize. None and "" give ".".
        segment_map: Function applied to every raw segment.
        separators: Characters recognized as separators.

    Returns:
        The canonical path string.

    Examples:
        >>> normalize_asset_path("a//./b/../c/")
        'a/c/'
        >>> normalize_asset_path("/../../a")
        '/a'
        >>> normalize_asset_path("../../a")
        '../../a'
    """
    if not path:
        return "."

    separators = tuple(separators) or (SEPARATOR,)

    is_absolute = path[0] in separators
    if is_absolute and len(path) == 1:
        return SEPARATOR

    has_trailing_separator = path[-1] in separators

    stack: list[str] = []
    for entry in _split_segments(path, separators):
        segment = segment_map(entry)
        if segment == "..":
            if is_absolute:
                if stack:
                    stack.pop()
            elif stack and stack[-1] != "..":
                stack.pop()
            else:
                stack.append(segment)
        elif segment != ".":
            stack.append(segment)

    if not stack:
        if is_absolute:
            return SEPARATOR
        return "./" if has_trailing_separator else "."

    result = SEPARATOR.join(stack)
    if has_trailing_separator:
        result += SEPARATOR
    if is_absolute:
        result = SEPARATOR + result
    return result


def parent_dir(
    path: Optional[str],
    separators: Iterable[str] = DEFAULT_SEPARATORS,
) -> Optional[str]:
    """Return the canonical parent directory of a path.

    A trailing separator is ignored, so "a/b/" has parent "a".

    Args:
        path: Path string.
        separators: Characters recognized as separators.

    Returns:
        The parent directory, or None when the path has no parent
        (the root "/", or a single relative segment such as "a" or "..").
    """
    canonical = normalize_asset_path(path, separators=separators)
    if canonical == SEPARATOR:
        return None

    canonical = canonical.rstrip(SEPARATOR)
    idx = canonical.rfind(SEPARATOR)
    if idx < 0:
        return None
    if idx == 0:
        return SEPARATOR
    return canonical[:idx]
