"""
Helpers for locations: absolute, '/'-separated path strings in a single namespace.

Everything here is lexical. Nothing touches the filesystem, so symlinks are
never resolved and a location may name something that does not exist.
"""

import posixpath

from dir_browser_mcp.browser.errors import MalformedLocationError
from dir_browser_mcp.models.location import Breadcrumb

SEPARATOR = "/"
ROOT = SEPARATOR


def is_well_formed(location: str) -> bool:
    """Check that a location is rooted, has no trailing separator, no empty/dot segments and no NUL."""
    if not isinstance(location, str) or not location.startswith(SEPARATOR):
        return False
    if location == ROOT:
        return True
    segments = location.split(SEPARATOR)[1:]
    return all(segment not in ("", ".", "..") and "\0" not in segment for segment in segments)


def ensure_well_formed(location: str) -> str:
    if not is_well_formed(location):
        raise MalformedLocationError(location)
    return location


def normalize_location(raw: str, base: str = ROOT) -> str:
    """
    Turn a user-provided path into a well-formed location.

    Relative paths are resolved against `base`. Redundant separators, '.' and
    '..' segments are collapsed; '..' above the root stays at the root.

    Args:
        raw: The path string provided by the user.
        base: The location relative paths are resolved against.

    Returns:
        A well-formed location.

    Raises:
        MalformedLocationError: If `raw` is empty or contains NUL, or `base` is malformed.
    """
    ensure_well_formed(base)
    if not isinstance(raw, str) or not raw.strip():
        raise MalformedLocationError(str(raw))

    joined = posixpath.join(base, raw)
    normalized = posixpath.normpath(joined)
    # POSIX keeps a leading '//' as implementation-defined; this namespace does not.
    if normalized.startswith("//"):
        normalized = SEPARATOR + normalized.lstrip(SEPARATOR)
    return ensure_well_formed(normalized)


def join_location(parent: str, name: str) -> str:
    """Concatenate a parent location and a child name with the separator."""
    if parent == ROOT:
        return ROOT + name
    return parent + SEPARATOR + name


def parent_location(location: str) -> str | None:
    """Return the parent of `location`, or None for the root."""
    ensure_well_formed(location)
    if location == ROOT:
        return None
    head = location.rsplit(SEPARATOR, 1)[0]
    return head or ROOT


def split_segments(location: str) -> list[str]:
    ensure_well_formed(location)
    return [segment for segment in location.split(SEPARATOR) if segment]


def breadcrumbs(location: str) -> list[Breadcrumb]:
    """
    Decompose a location into clickable segments.

    `/a/b/c` becomes `a -> /a`, `b -> /a/b`, `c -> /a/b/c`; the root has none.
    """
    crumbs = []
    current = ROOT
    for segment in split_segments(location):
        current = join_location(current, segment)
        crumbs.append(Breadcrumb(name=segment, path=current))
    return crumbs
