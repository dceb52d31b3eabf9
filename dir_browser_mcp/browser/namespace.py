"""In-memory namespace usable as a read primitive in place of the filesystem."""

from collections.abc import Iterable, Mapping
from typing import Any

from dir_browser_mcp.browser.errors import (
    AccessDeniedError,
    LocationNotFoundError,
    NotADirectoryLocationError,
)
from dir_browser_mcp.utils.path_utils import split_segments


class MappingNamespace:
    """
    A virtual directory tree built from nested mappings.

    A mapping is a directory; any other value is a leaf. Directory names in
    `denied` (full locations) refuse to be read.

        ns = MappingNamespace({"docs": {"a.txt": None}, "notes.md": None})
        list_directory("/docs", ns.read_children)
    """

    def __init__(self, tree: Mapping[str, Any], denied: Iterable[str] = ()) -> None:
        self._tree = tree
        self._denied = frozenset(denied)

    def _lookup(self, location: str) -> Any:
        node: Any = self._tree
        for segment in split_segments(location):
            if not isinstance(node, Mapping):
                raise NotADirectoryLocationError(location)
            if segment not in node:
                raise LocationNotFoundError(location)
            node = node[segment]
        return node

    def read_children(self, location: str) -> list[tuple[str, bool]]:
        node = self._lookup(location)
        if not isinstance(node, Mapping):
            raise NotADirectoryLocationError(location)
        if location in self._denied:
            raise AccessDeniedError(location)
        return [(name, isinstance(child, Mapping)) for name, child in node.items()]
