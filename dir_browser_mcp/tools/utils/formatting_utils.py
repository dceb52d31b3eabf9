import json
from typing import Iterable

from dir_browser_mcp.models.entry import Entry
from dir_browser_mcp.models.location import Breadcrumb
from dir_browser_mcp.models.session import HistorySnapshot


def entries_payload(location: str, entries: list[Entry]) -> dict:
    """Listing of one directory as a JSON-ready dict."""
    return {
        "status": "success" if entries else "empty",
        "location": location,
        "count": len(entries),
        "entries": [
            {
                "name": entry.name,
                "type": "directory" if entry.is_dir else "file",
                "path": entry.path,
            }
            for entry in entries
        ],
    }


def history_payload(snapshot: HistorySnapshot) -> dict:
    return {
        "locations": list(snapshot.locations),
        "cursor": snapshot.cursor,
        "current": snapshot.current,
        "can_go_back": snapshot.can_go_back,
        "can_go_forward": snapshot.can_go_forward,
    }


def format_entry_list(location: str, entries: list[Entry]) -> str:
    """
    Format a directory listing as structured JSON for LLM consumption.

    Entries keep the order they were listed in.
    """
    return json.dumps(entries_payload(location, entries), indent=2)


def format_history(snapshot: HistorySnapshot) -> str:
    return json.dumps(history_payload(snapshot), indent=2)


def format_breadcrumbs(location: str, crumbs: Iterable[Breadcrumb]) -> str:
    return json.dumps(
        {
            "location": location,
            "breadcrumbs": [{"name": crumb.name, "path": crumb.path} for crumb in crumbs],
        },
        indent=2,
    )


def format_navigation(snapshot: HistorySnapshot, entries: list[Entry]) -> str:
    """
    Format the outcome of a move: the new history state and the listing of
    the new current location.
    """
    return json.dumps(
        {
            "history": history_payload(snapshot),
            "listing": entries_payload(snapshot.current, entries),
        },
        indent=2,
    )
