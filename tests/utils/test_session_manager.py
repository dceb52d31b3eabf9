#!/usr/bin/env python3
"""
Unit тесты для session_manager.py и dependencies.py
"""

from concurrent.futures import ThreadPoolExecutor

from dir_browser_mcp.tools.directory_lister_tool import DirectoryListerTool
from dir_browser_mcp.utils.config import ServiceConfig
from dir_browser_mcp.utils.dependencies import (
    get_directory_lister_tool_provider,
    get_navigator_tool_provider,
    get_session_manager,
)
from dir_browser_mcp.utils.session_manager import SessionManager


class TestSessionManager:
    """Тесты для SessionManager"""

    def test_same_session_same_navigator(self):
        manager = SessionManager()
        assert manager.get_navigator("s1") is manager.get_navigator("s1")

    def test_sessions_have_independent_histories(self):
        """Тест: у каждой сессии своя история"""
        manager = SessionManager(start_location="/home")
        manager.get_navigator("s1").navigate_to("/tmp")

        assert manager.get_navigator("s1").current_location() == "/tmp"
        assert manager.get_navigator("s2").current_location() == "/home"

    def test_concurrent_creation_yields_one_navigator(self):
        manager = SessionManager()
        with ThreadPoolExecutor(max_workers=8) as pool:
            navigators = list(pool.map(lambda _: manager.get_navigator("shared"), range(32)))
        assert all(n is navigators[0] for n in navigators)


class TestDependencies:
    """Тесты провайдеров зависимостей"""

    def test_config_from_environment(self, monkeypatch):
        monkeypatch.setenv("BROWSER_START_LOCATION", "/srv")
        monkeypatch.setenv("BROWSER_SHOW_HIDDEN", "false")
        config = ServiceConfig()
        assert config.BROWSER_START_LOCATION == "/srv"
        assert config.BROWSER_SHOW_HIDDEN is False
        assert config.MCP_TRANSPORT == "stdio"

    def test_session_manager_uses_start_location(self):
        config = ServiceConfig(BROWSER_START_LOCATION="/var")
        manager = get_session_manager(config)
        assert manager.get_navigator("fresh").current_location() == "/var"
        assert get_session_manager(config) is manager

    def test_navigator_tool_shares_lister(self):
        config = ServiceConfig(BROWSER_SHOW_HIDDEN=False)
        lister = get_directory_lister_tool_provider(config)
        assert isinstance(lister, DirectoryListerTool)
        assert get_navigator_tool_provider(lister) is get_navigator_tool_provider(lister)
