import logging
from typing_extensions import override

from dir_browser_mcp.browser.errors import BrowserError, ListingError
from dir_browser_mcp.browser.navigator import Navigator
from dir_browser_mcp.utils.path_utils import breadcrumbs, normalize_location

from .base import Tool, ToolCallArguments, ToolError, ToolExecResult, ToolParameter
from .directory_lister_tool import DirectoryListerTool
from .utils.constants import INVALID_ARGUMENT_CODE, NAVIGATOR_ARGUMENT
from .utils.formatting_utils import format_breadcrumbs, format_history, format_navigation

logger = logging.getLogger(__name__)

NavigatorSubCommands = ["pwd", "cd", "back", "forward", "up", "history", "breadcrumbs"]


class NavigatorTool(Tool):
    """
    Moves the session's navigator and lists where it lands.

    Every move is one gesture under the navigator's lock: change the history,
    then list the new current location. `cd` checks the target is listable
    before committing it. `back`, `forward` and `up` commit first; if the new
    location cannot be listed the error is reported and the history is kept.
    """

    def __init__(self, lister: DirectoryListerTool, model_provider: str | None = None) -> None:
        super().__init__(model_provider)
        self._lister = lister

    @override
    def get_name(self) -> str:
        return "navigator"

    @override
    def get_description(self) -> str:
        return """Navigates between directories with browser-style back/forward history.
- `pwd`: Show the current location.
- `cd`: Visit a directory (relative or absolute `path`). Forward history is discarded.
- `back` / `forward`: Step through the history.
- `up`: Visit the parent directory.
- `history`: Show the visited locations and the cursor.
- `breadcrumbs`: Split the current location into clickable segments.
Moves return the new history state together with the listing of the new location."""

    @override
    def get_parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="subcommand",
                type="string",
                description=f"The command to run. Allowed options are: {', '.join(NavigatorSubCommands)}.",
                required=True,
                enum=NavigatorSubCommands,
            ),
            ToolParameter(
                name="path",
                type="string",
                description="Relative or absolute path, required for `cd`.",
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

        subcommand = arguments.get("subcommand")
        if not isinstance(subcommand, str):
            return ToolExecResult(error="Subcommand must be a string.", error_code=INVALID_ARGUMENT_CODE)

        try:
            with navigator.lock:
                match subcommand:
                    case "pwd":
                        return ToolExecResult(output=navigator.current_location())
                    case "history":
                        return ToolExecResult(output=format_history(navigator.history()))
                    case "breadcrumbs":
                        location = navigator.current_location()
                        return ToolExecResult(output=format_breadcrumbs(location, breadcrumbs(location)))
                    case "cd":
                        return self._cd_handler(navigator, arguments)
                    case "back":
                        navigator.go_back()
                        return self._list_current(navigator)
                    case "forward":
                        navigator.go_forward()
                        return self._list_current(navigator)
                    case "up":
                        navigator.go_up()
                        return self._list_current(navigator)
                    case _:
                        return ToolExecResult(
                            error=f"Unknown subcommand: {subcommand}", error_code=INVALID_ARGUMENT_CODE
                        )
        except ToolError as e:
            return ToolExecResult(error=e.message, error_code=INVALID_ARGUMENT_CODE)
        except BrowserError as e:
            return ToolExecResult(error=str(e), error_code=e.code)

    def _cd_handler(self, navigator: Navigator, args: ToolCallArguments) -> ToolExecResult:
        path = args.get("path")
        if not isinstance(path, str):
            raise ToolError("Path is required for cd and must be a string.")

        target = normalize_location(path, navigator.current_location())
        # Only listable directories are committed to the history.
        entries = self._lister.list_entries(target)
        navigator.navigate_to(target)
        logger.info("Session moved to %s", target)
        return ToolExecResult(output=format_navigation(navigator.history(), entries))

    def _list_current(self, navigator: Navigator) -> ToolExecResult:
        location = navigator.current_location()
        logger.info("Session moved to %s", location)
        try:
            entries = self._lister.list_entries(location)
        except ListingError as e:
            # The move stands; reconciling an unlistable location is up to the caller.
            return ToolExecResult(
                error=f"Moved to '{location}', but it cannot be listed: {e}",
                error_code=e.code,
            )
        return ToolExecResult(output=format_navigation(navigator.history(), entries))
