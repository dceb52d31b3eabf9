#!/usr/bin/env python3
"""
Unit тесты для collation.py
"""

import pytest

from dir_browser_mcp.browser.collation import collation_key, entry_sort_key


class TestCollation:
    """Тесты для порядка имен"""

    def test_case_variants_sort_adjacently(self):
        """Тест: регистр не разделяет имена, строчные идут первыми"""
        names = ["Banana", "apple", "banana", "Apple"]
        assert sorted(names, key=collation_key) == ["apple", "Apple", "banana", "Banana"]

    def test_uppercase_does_not_jump_ahead_of_lowercase_letters(self):
        """Тест: в отличие от байтового порядка 'Zebra' идет после 'apple'"""
        assert sorted(["apple", "Zebra"], key=collation_key) == ["apple", "Zebra"]
        assert sorted(["apple", "Zebra"]) == ["Zebra", "apple"]

    def test_accents_sort_next_to_base_letter(self):
        """Тест: акценты сравниваются только после базовых букв"""
        names = ["fig", "éclair", "eclair", "date"]
        assert sorted(names, key=collation_key) == ["date", "eclair", "éclair", "fig"]

    def test_distinct_names_never_tie(self):
        """Тест: разные имена всегда дают разные ключи"""
        names = ["a", "A", "\u00e1", "\u00c1", "a\u0301"]
        keys = [collation_key(name) for name in names]
        assert len(set(keys)) == len(names)

    @pytest.mark.parametrize(
        "first, second",
        [
            (("zeta", True), ("alpha", False)),
            (("Zeta", True), ("apple", False)),
            (("b", True), ("c", True)),
            (("b", False), ("c", False)),
        ],
    )
    def test_directories_before_files(self, first, second):
        """Тест: директории всегда перед файлами"""
        assert entry_sort_key(*first) < entry_sort_key(*second)

    def test_punctuation_and_symbols_before_digits_before_letters(self):
        """Тест: пунктуация и символы идут перед цифрами, цифры перед буквами"""
        names = ["zeta", "~notes", "1file", "@home"]
        assert sorted(names, key=collation_key) == ["@home", "~notes", "1file", "zeta"]

    @pytest.mark.parametrize("name", ["~backup", "{tmp}", "@scope", "_cache", " spaced"])
    def test_non_alphanumeric_names_sort_before_digits_and_letters(self, name):
        assert collation_key(name) < collation_key("0")
        assert collation_key(name) < collation_key("apple")

    def test_class_compares_per_character(self):
        """Тест: класс символа учитывается в каждой позиции, не только в первой"""
        assert sorted(["a1", "a~", "ab"], key=collation_key) == ["a~", "a1", "ab"]
