"""
MCP server definition for the Directory Browser MCP.
"""

import logging
from typing import Any, Optional

from fastapi.middleware.cors import CORSMiddleware
from starlette.applications import Starlette
from starlette.middleware import Middleware

from mcp.server.fastmcp import Context, FastMCP

from dir_browser_mcp.prompts import get_all_prompts
from dir_browser_mcp.tools.base import Tool, ToolExecResult
from dir_browser_mcp.tools.utils.constants import NAVIGATOR_ARGUMENT
from dir_browser_mcp.utils.config import ServiceConfig
from dir_browser_mcp.utils.dependencies import (
    get_base_config,
    get_directory_lister_tool_provider,
    get_navigator_tool_provider,
    get_session_manager,
)


# Get a module-level logger
logger = logging.getLogger(__name__)


class CustomFastMCP(FastMCP):
    """Custom FastMCP server with CORS middleware."""

    def _add_cors_middleware(self, app: Starlette) -> Starlette:
        """A helper to add CORS middleware to a Starlette app."""
        app.user_middleware.insert(
            0,
            Middleware(
                CORSMiddleware,
                allow_origin_regex=".*",  # Allow any origin
                allow_credentials=True,
                allow_methods=["*"],
                allow_headers=["*"],
            ),
        )
        app.middleware_stack = app.build_middleware_stack()
        return app

    def sse_app(self, mount_path: str | None = None) -> Starlette:
        """Overrides the default sse_app to inject CORS middleware."""
        app = super().sse_app(mount_path)
        return self._add_cors_middleware(app)

    def streamable_http_app(self) -> Starlette:
        """Overrides the default streamable_http_app to inject CORS middleware."""
        app = super().streamable_http_app()
        return self._add_cors_middleware(app)


def build_server(config: ServiceConfig) -> CustomFastMCP:
    """Build and configure the FastMCP server instance.

    Args:
        config: The server's service configuration.

    Returns:
        A configured CustomFastMCP instance.
    """
    logger.info(
        "Initializing FastMCP server",
        extra={"host": config.MCP_HOST, "port": config.MCP_PORT},
    )
    return CustomFastMCP(
        "dir-browser-mcp",
        host=config.MCP_HOST,
        port=config.MCP_PORT,
    )


def to_response(result: ToolExecResult) -> dict[str, Any]:
    """Convert a tool result into the structured dict returned to MCP clients."""
    if result.error:
        return {"status": "error", "error": result.error, "exit_code": result.error_code}
    return {"status": "success", "result": result.output, "exit_code": result.error_code}


async def run_session_tool(tool: Tool, session_id: str, args: dict[str, Any]) -> dict[str, Any]:
    """Run a tool against the navigator of `session_id`."""
    navigator = get_session_manager(server_config).get_navigator(session_id)
    # Filter out None values so the tool applies its own defaults
    args = {k: v for k, v in args.items() if v is not None}
    args[NAVIGATOR_ARGUMENT] = navigator
    result = await tool.execute(args)
    return to_response(result)


# Get the base configuration for server initialization.
# This is also imported by main.py to run the server.
server_config = get_base_config()
mcp_app = build_server(server_config)


# --- Prompt Handlers ---
@mcp_app.prompt(title="Agent System Prompt for the Directory Browser")
def get_system_prompt() -> str:
    """Provides the main system prompt for the agent."""
    prompts = get_all_prompts()
    return prompts["agent-system-prompt"]

# --- Tool Definitions ---

@mcp_app.tool(name="directory_lister")
async def directory_lister_tool(
    context: Context,
    path: Optional[str] = None,
    session_id: str = "default",
) -> dict[str, Any]:
    """
    Lists the immediate children of a directory, directories first, then files.

    Args:
        path: Relative or absolute path of the directory. Defaults to the current location.
        session_id: The browsing session whose current location relative paths resolve against.

    Returns:
        A dictionary containing the ordered entries of the directory.
    """
    logger.info(f"Listing '{path or '.'}' for session '{session_id}'")
    try:
        tool = get_directory_lister_tool_provider(server_config)
        return await run_session_tool(tool, session_id, {"path": path})
    except Exception as e:
        logger.error(f"Error executing directory_lister: {e}", exc_info=True)
        return {"status": "error", "error": str(e), "exit_code": 1}


@mcp_app.tool(name="navigator")
async def navigator_tool(
    context: Context,
    subcommand: str,
    path: Optional[str] = None,
    session_id: str = "default",
) -> dict[str, Any]:
    """
    Navigates between directories with browser-style back/forward history.

    Args:
        subcommand: One of 'pwd', 'cd', 'back', 'forward', 'up', 'history', 'breadcrumbs'.
        path: Relative or absolute target directory, required for 'cd'.
        session_id: The browsing session to act on. Each session has its own history.

    Returns:
        A dictionary containing the new history state and the listing of the new location
        for moves, or the requested information otherwise.
    """
    logger.info(f"Executing navigator subcommand '{subcommand}' for session '{session_id}'")
    try:
        tool = get_navigator_tool_provider(get_directory_lister_tool_provider(server_config))
        return await run_session_tool(tool, session_id, {"subcommand": subcommand, "path": path})
    except Exception as e:
        logger.error(f"Error executing navigator subcommand: {e}", exc_info=True)
        return {"status": "error", "error": str(e), "exit_code": 1}
