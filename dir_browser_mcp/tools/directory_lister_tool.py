import logging
from typing_extensions import override

from dir_browser_mcp.browser.errors import BrowserError
from dir_browser_mcp.browser.lister import ReadChildren, list_directory, scandir_children
from dir_browser_mcp.browser.navigator import Navigator
from dir_browser_mcp.models.entry import Entry
from dir_browser_mcp.utils.path_utils import normalize_location

from .base import Tool, ToolCallArguments, ToolError, ToolExecResult, ToolParameter
from .utils.constants import HIDDEN_PREFIX, INVALID_ARGUMENT_CODE, NAVIGATOR_ARGUMENT
from .utils.formatting_utils import format_entry_list

logger = logging.getLogger(__name__)


class DirectoryListerTool(Tool):
    """
    Lists the immediate children of a directory, directories first.

    Listing never moves the session's navigator; relative paths are resolved
    against its current location.
    """

    def __init__(
        self,
        read_children: ReadChildren = scandir_children,
        show_hidden: bool = True,
        model_provider: str | None = None,
    ) -> None:
        super().__init__(model_provider)
        self._read_children = read_children
        self._show_hidden = show_hidden

    @override
    def get_name(self) -> str:
        return "directory_lister"

    @override
    def get_description(self) -> str:
        return """Lists the immediate children of a directory.
Directories are listed first, then files, each group in natural name order.
Each entry carries its name, its type ('directory' or 'file') and the full path to pass to `navigator.cd`.
Only directories can be navigated into."""

    @override
    def get_parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="path",
                type="string",
                description="Relative or absolute path of the directory. Defaults to the current location.",
                required=False,
            ),
        ]

    @override
    async def execute(self, arguments: ToolCallArguments) -> ToolExecResult:
        navigator = arguments.get(NAVIGATOR_ARGUMENT)
        if not isinstance(navigator, Navigator):
            return ToolExecResult(
                error="Navigator not found in arguments. This is an internal server error.",
                error_code=INVALID_ARGUMENT_CODE,
            )

        try:
            with navigator.lock:
                location = self._resolve(navigator, arguments.get("path"))
            entries = self.list_entries(location)
        except ToolError as e:
            return ToolExecResult(error=e.message, error_code=INVALID_ARGUMENT_CODE)
        except BrowserError as e:
            return ToolExecResult(error=str(e), error_code=e.code)

        return ToolExecResult(output=format_entry_list(location, entries))

    def list_entries(self, location: str) -> list[Entry]:
        """List `location` with the configured read primitive and hidden-entry filter."""
        entries = list_directory(location, self._read_children)
        if not self._show_hidden:
            entries = [entry for entry in entries if not entry.name.startswith(HIDDEN_PREFIX)]
        return entries

    def _resolve(self, navigator: Navigator, path: object) -> str:
        if path is None:
            return navigator.current_location()
        if not isinstance(path, str):
            raise ToolError("Path must be a string.")
        return normalize_location(path, navigator.current_location())
