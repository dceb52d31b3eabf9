"""Error taxonomy of the directory browsing core."""

import errno


class BrowserError(Exception):
    """Base class for every condition reported by the browsing core."""

    # errno-style code surfaced by the tool layer as the exit code.
    code: int = -1


class ListingError(BrowserError):
    """A directory could not be listed. Listing is all-or-nothing."""

    code = errno.EIO

    def __init__(self, location: str, message: str | None = None) -> None:
        self.location = location
        super().__init__(message or f"Cannot list '{location}'.")


class LocationNotFoundError(ListingError):
    code = errno.ENOENT

    def __init__(self, location: str) -> None:
        super().__init__(location, f"'{location}' does not exist.")


class NotADirectoryLocationError(ListingError):
    code = errno.ENOTDIR

    def __init__(self, location: str) -> None:
        super().__init__(location, f"'{location}' is not a directory.")


class AccessDeniedError(ListingError):
    code = errno.EACCES

    def __init__(self, location: str) -> None:
        super().__init__(location, f"Access denied: '{location}'.")


class IOFailureError(ListingError):
    """Any other read failure, transient or device-level."""

    code = errno.EIO


class NoHistoryError(BrowserError):
    """Back/forward requested with nothing in that direction. Nothing was changed."""

    def __init__(self, direction: str) -> None:
        self.direction = direction
        super().__init__(f"No {direction} history.")


class AtRootError(BrowserError):
    """Moving up from the root location. Nothing was changed."""

    def __init__(self) -> None:
        super().__init__("Already at the root location.")


class MalformedLocationError(BrowserError, ValueError):
    def __init__(self, location: str) -> None:
        self.location = location
        super().__init__(
            f"'{location}' is not a well-formed location: it must be absolute, "
            "without trailing separators, empty, '.' or '..' segments, or NUL characters."
        )
