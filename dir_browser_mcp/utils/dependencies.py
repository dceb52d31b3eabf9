"""
Configuration and dependency management for the Directory Browser MCP server.
"""

import logging
from functools import lru_cache

from fastapi import Depends

from dir_browser_mcp.utils.config import ServiceConfig

logger = logging.getLogger(__name__)


@lru_cache
def get_base_config() -> ServiceConfig:
    """
    Retrieves the base server configuration from environment variables.

    This function is cached to avoid repeatedly reading and parsing environment
    variables and .env files, which improves performance.

    Returns:
        A cached instance of the ServiceConfig.
    """
    return ServiceConfig()


# --- Providers ---

from ..tools.directory_lister_tool import DirectoryListerTool
from ..tools.navigator_tool import NavigatorTool
from .session_manager import SessionManager


@lru_cache
def get_session_manager(config: ServiceConfig = Depends(get_base_config)) -> SessionManager:
    """Returns the singleton SessionManager; new sessions start at the configured location."""
    logger.info("Initializing SessionManager singleton.")
    return SessionManager(start_location=config.BROWSER_START_LOCATION)


@lru_cache
def get_directory_lister_tool_provider(
    config: ServiceConfig = Depends(get_base_config),
) -> DirectoryListerTool:
    """Returns a cached instance of the DirectoryListerTool backed by the host filesystem."""
    logger.info("Initializing DirectoryListerTool singleton.")
    return DirectoryListerTool(show_hidden=config.BROWSER_SHOW_HIDDEN)


@lru_cache
def get_navigator_tool_provider(
    lister: DirectoryListerTool = Depends(get_directory_lister_tool_provider),
) -> NavigatorTool:
    """
    Returns a cached instance of the NavigatorTool, using FastAPI's dependency
    injection to provide the DirectoryListerTool.
    """
    logger.info("Initializing NavigatorTool singleton with DirectoryListerTool dependency.")
    return NavigatorTool(lister=lister)
