import logging
from threading import Lock

from dir_browser_mcp.browser.navigator import Navigator
from dir_browser_mcp.utils.path_utils import ROOT

logger = logging.getLogger(__name__)


class SessionManager:
    """Manages one Navigator per user session."""

    def __init__(self, start_location: str = ROOT) -> None:
        # Simple dict as an in-process session storage. History is never persisted.
        self._storage: dict[str, Navigator] = {}
        self._lock = Lock()
        self._start_location = start_location

    def get_navigator(self, session_id: str = "default") -> Navigator:
        """Returns or creates the navigator for a given session."""
        navigator = self._storage.get(session_id)
        if navigator is None:
            with self._lock:
                # Another thread may have created it while we were waiting for the lock
                navigator = self._storage.get(session_id)
                if navigator is None:
                    logger.info("Creating navigator for session %s at %s", session_id, self._start_location)
                    navigator = Navigator(self._start_location)
                    self._storage[session_id] = navigator
        return navigator
