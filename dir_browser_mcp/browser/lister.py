"""
Listing of a directory's immediate children.

`list_directory` adapts a raw read primitive into an ordered, validated
sequence of Entry objects. It keeps no state between calls.
"""

import logging
import os
from collections.abc import Callable, Iterable

from pydantic import ValidationError

from dir_browser_mcp.browser.collation import entry_sort_key
from dir_browser_mcp.browser.errors import (
    AccessDeniedError,
    IOFailureError,
    ListingError,
    LocationNotFoundError,
    NotADirectoryLocationError,
)
from dir_browser_mcp.models.entry import Entry
from dir_browser_mcp.utils.path_utils import join_location

logger = logging.getLogger(__name__)

# (name, is_dir) pairs for the immediate children of a location.
ReadChildren = Callable[[str], Iterable[tuple[str, bool]]]


def scandir_children(location: str) -> Iterable[tuple[str, bool]]:
    """Read primitive backed by the host filesystem. `is_dir` follows symlinks."""
    with os.scandir(location) as it:
        return [(entry.name, entry.is_dir()) for entry in it]


def _map_os_error(location: str, exc: OSError) -> ListingError:
    if isinstance(exc, FileNotFoundError):
        return LocationNotFoundError(location)
    if isinstance(exc, NotADirectoryError):
        return NotADirectoryLocationError(location)
    if isinstance(exc, PermissionError):
        return AccessDeniedError(location)
    return IOFailureError(location, f"I/O failure while listing '{location}': {exc}")


def list_directory(location: str, read_children: ReadChildren = scandir_children) -> list[Entry]:
    """
    List the immediate children of `location`.

    Directories come first, then everything else; each group is ordered by
    `collation.collation_key`. The caller is responsible for passing a
    well-formed location.

    Args:
        location: The directory to list.
        read_children: The read primitive. Defaults to the host filesystem.

    Returns:
        A new list of Entry objects. Never partial.

    Raises:
        LocationNotFoundError: If the location does not exist.
        NotADirectoryLocationError: If the location is not a directory.
        AccessDeniedError: If the read primitive refused access.
        IOFailureError: On any other read failure, or if the primitive
            returned an invalid name or two children with the same name.
    """
    try:
        raw = list(read_children(location))
    except ListingError:
        logger.warning("Listing failed for %s", location, exc_info=True)
        raise
    except OSError as e:
        error = _map_os_error(location, e)
        logger.warning("Listing failed for %s: %s", location, error)
        raise error from e
    except ValueError as e:
        # os.scandir rejects paths it cannot encode, e.g. with an embedded NUL.
        logger.warning("Listing failed for %s: %s", location, e)
        raise IOFailureError(location, f"Cannot read '{location}': {e}") from e

    seen: set[str] = set()
    for name, _ in raw:
        if name in seen:
            logger.warning("Duplicate child name %r in %s", name, location)
            raise IOFailureError(location, f"Duplicate entry '{name}' while listing '{location}'.")
        seen.add(name)

    raw.sort(key=lambda item: entry_sort_key(item[0], item[1]))
    try:
        entries = [
            Entry(name=name, path=join_location(location, name), is_dir=bool(is_dir))
            for name, is_dir in raw
        ]
    except ValidationError as e:
        logger.warning("Invalid child name in %s: %s", location, e)
        raise IOFailureError(location, f"Invalid entry name while listing '{location}'.") from e
    logger.debug("Listed %s: %d entries", location, len(entries))
    return entries
