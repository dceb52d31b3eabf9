"""
Back/forward navigation over locations.

The Navigator owns a single History and exposes the only legal transitions
on it. It never reads the filesystem: listing the new current location is the
caller's job, and a failed listing never rolls the history back on its own.
Instances are not thread-safe; callers serialize access (see `lock`).
"""

import logging
from threading import Lock

from dir_browser_mcp.browser.errors import AtRootError, NoHistoryError
from dir_browser_mcp.models.session import History, HistorySnapshot
from dir_browser_mcp.utils.path_utils import ROOT, ensure_well_formed, parent_location

logger = logging.getLogger(__name__)


class Navigator:
    """Current location plus browser-style history with a cursor."""

    def __init__(self, start: str = ROOT) -> None:
        self._history = History(locations=[ensure_well_formed(start)], cursor=0)
        # Held by callers for one whole gesture (move + list); never taken internally.
        self.lock = Lock()

    def current_location(self) -> str:
        return self._history.current

    def can_go_back(self) -> bool:
        return self._history.cursor > 0

    def can_go_forward(self) -> bool:
        return self._history.cursor < len(self._history.locations) - 1

    def history(self) -> HistorySnapshot:
        return HistorySnapshot(
            locations=tuple(self._history.locations),
            cursor=self._history.cursor,
        )

    def navigate_to(self, target: str) -> str:
        """
        Visit `target`.

        Everything after the cursor is discarded, `target` is appended and
        becomes current. Visiting the current location again still adds an
        entry.

        Raises:
            MalformedLocationError: If `target` is not well-formed. History is untouched.
        """
        ensure_well_formed(target)
        kept = self._history.locations[: self._history.cursor + 1]
        dropped = len(self._history.locations) - len(kept)
        self._history.locations = [*kept, target]
        self._history.cursor = len(kept)
        logger.debug("Navigated to %s (dropped %d forward entries)", target, dropped)
        return target

    def go_back(self) -> str:
        """Move the cursor one step back. Raises NoHistoryError at the oldest entry."""
        if not self.can_go_back():
            raise NoHistoryError("back")
        self._history.cursor -= 1
        logger.debug("Went back to %s", self._history.current)
        return self._history.current

    def go_forward(self) -> str:
        """Move the cursor one step forward. Raises NoHistoryError at the newest entry."""
        if not self.can_go_forward():
            raise NoHistoryError("forward")
        self._history.cursor += 1
        logger.debug("Went forward to %s", self._history.current)
        return self._history.current

    def go_up(self) -> str:
        """Visit the parent of the current location. Raises AtRootError at the root."""
        parent = parent_location(self.current_location())
        if parent is None:
            raise AtRootError()
        return self.navigate_to(parent)
