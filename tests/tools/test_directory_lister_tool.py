#!/usr/bin/env python3
"""
Unit тесты для directory_lister_tool.py
"""

import errno
import json

import pytest

from dir_browser_mcp.browser.namespace import MappingNamespace
from dir_browser_mcp.browser.navigator import Navigator
from dir_browser_mcp.tools.directory_lister_tool import DirectoryListerTool

TREE = {
    "docs": {"reports": {}, "b.txt": None, "A.txt": None, ".cache": {}},
    "secret": {"x": None},
    "hello.txt": None,
}


class TestDirectoryListerTool:
    """Тесты для DirectoryListerTool"""

    @pytest.fixture
    def namespace(self):
        return MappingNamespace(TREE, denied=["/secret"])

    @pytest.fixture
    def lister_tool(self, namespace):
        """Создает экземпляр DirectoryListerTool поверх виртуального дерева"""
        return DirectoryListerTool(read_children=namespace.read_children)

    @pytest.fixture
    def navigator(self):
        navigator = Navigator()
        navigator.navigate_to("/docs")
        return navigator

    @pytest.mark.asyncio
    async def test_lists_current_location_by_default(self, lister_tool, navigator):
        result = await lister_tool.execute({"_navigator": navigator})

        assert result.error is None
        payload = json.loads(result.output)
        assert payload["location"] == "/docs"
        assert [e["name"] for e in payload["entries"]] == [".cache", "reports", "A.txt", "b.txt"]
        assert payload["entries"][1] == {"name": "reports", "type": "directory", "path": "/docs/reports"}

    @pytest.mark.asyncio
    async def test_relative_path_does_not_move_navigator(self, lister_tool, navigator):
        """Тест: листинг не меняет историю"""
        result = await lister_tool.execute({"_navigator": navigator, "path": ".."})

        payload = json.loads(result.output)
        assert payload["location"] == "/"
        assert payload["count"] == 3
        assert navigator.current_location() == "/docs"
        assert len(navigator.history().locations) == 2

    @pytest.mark.asyncio
    async def test_empty_directory(self, lister_tool, navigator):
        result = await lister_tool.execute({"_navigator": navigator, "path": "reports"})
        payload = json.loads(result.output)
        assert payload["status"] == "empty"
        assert payload["entries"] == []

    @pytest.mark.asyncio
    async def test_hidden_entries_filtered_when_configured(self, namespace, navigator):
        tool = DirectoryListerTool(read_children=namespace.read_children, show_hidden=False)
        result = await tool.execute({"_navigator": navigator})
        names = [e["name"] for e in json.loads(result.output)["entries"]]
        assert ".cache" not in names

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "path, code",
        [
            ("/missing", errno.ENOENT),
            ("/hello.txt", errno.ENOTDIR),
            ("/secret", errno.EACCES),
        ],
    )
    async def test_listing_errors(self, lister_tool, navigator, path, code):
        """Тест: ошибки листинга возвращаются как результат с кодом"""
        result = await lister_tool.execute({"_navigator": navigator, "path": path})
        assert result.output is None
        assert result.error_code == code
        assert path in result.error

    @pytest.mark.asyncio
    async def test_invalid_arguments(self, lister_tool, navigator):
        result = await lister_tool.execute({"_navigator": navigator, "path": 42})
        assert result.error == "Path must be a string."
        assert result.error_code == -1

        result = await lister_tool.execute({})
        assert "internal server error" in result.error

    def test_json_definition(self, lister_tool):
        definition = lister_tool.json_definition()
        assert definition["name"] == "directory_lister"
        assert definition["parameters"]["required"] == []
        assert "path" in definition["parameters"]["properties"]
