#!/usr/bin/env python3
"""
Unit тесты для path_utils.py
"""

import pytest

from dir_browser_mcp.browser.errors import MalformedLocationError
from dir_browser_mcp.models.location import Breadcrumb
from dir_browser_mcp.utils.path_utils import (
    breadcrumbs,
    is_well_formed,
    join_location,
    normalize_location,
    parent_location,
)


class TestPathUtils:
    """Тесты для утилит путей"""

    @pytest.mark.parametrize("location", ["/", "/a", "/a/b", "/a b/c.d", "/.hidden"])
    def test_well_formed(self, location):
        assert is_well_formed(location)

    @pytest.mark.parametrize("location", ["", "a", "a/b", "/a/", "//a", "/a//b", "/a/./b", "/a/..", "/a\x00b", None])
    def test_malformed(self, location):
        assert not is_well_formed(location)

    @pytest.mark.parametrize(
        "raw, base, expected",
        [
            ("docs", "/", "/docs"),
            ("reports", "/docs", "/docs/reports"),
            ("..", "/docs/reports", "/docs"),
            ("../..", "/docs", "/"),
            ("/pictures/", "/docs", "/pictures"),
            ("./a//b/", "/x", "/x/a/b"),
            ("//abs", "/x", "/abs"),
            (".", "/x", "/x"),
        ],
    )
    def test_normalize_location(self, raw, base, expected):
        """Тест нормализации относительных и неаккуратных путей"""
        assert normalize_location(raw, base) == expected
        assert is_well_formed(expected)

    @pytest.mark.parametrize("raw", ["", "   ", "a\x00b"])
    def test_normalize_rejects_empty(self, raw):
        with pytest.raises(MalformedLocationError):
            normalize_location(raw, "/")

    def test_join_location(self):
        assert join_location("/", "a") == "/a"
        assert join_location("/a", "b") == "/a/b"

    def test_parent_location(self):
        assert parent_location("/a/b") == "/a"
        assert parent_location("/a") == "/"
        assert parent_location("/") is None

    def test_breadcrumbs(self):
        """Тест разбиения пути на сегменты"""
        assert breadcrumbs("/a/b/c") == [
            Breadcrumb(name="a", path="/a"),
            Breadcrumb(name="b", path="/a/b"),
            Breadcrumb(name="c", path="/a/b/c"),
        ]

    def test_root_has_no_breadcrumbs(self):
        assert breadcrumbs("/") == []

    def test_breadcrumbs_of_malformed_location(self):
        with pytest.raises(MalformedLocationError):
            breadcrumbs("/a/")
