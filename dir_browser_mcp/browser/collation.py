"""
Locale-independent name collation for directory listings.

The key is a fixed three-level comparison, so the same names order the same
way on every host regardless of the process locale:

1. base characters: accents stripped, case folded ("Éclair" ~ "eclair");
   compared character by character, whitespace before punctuation before
   symbols before digits before letters ("@home" < "~notes" < "1file" < "zeta");
2. accents: case folded, accents kept ("eclair" < "éclair");
3. case: lowercase before uppercase at the first difference ("apple" < "Apple").

The raw name is the last component, so two distinct names never compare equal.
"""

import unicodedata

_WHITESPACE, _PUNCTUATION, _SYMBOL, _DIGIT, _LETTER = range(5)


def _char_class(ch: str) -> int:
    category = unicodedata.category(ch)
    if category[0] in "ZC":
        return _WHITESPACE
    if category[0] == "P":
        return _PUNCTUATION
    if category[0] == "S":
        return _SYMBOL
    if category[0] == "N":
        return _DIGIT
    return _LETTER


def _strip_marks(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def _base_level(text: str) -> tuple[tuple[int, str], ...]:
    return tuple((_char_class(ch), ch) for ch in _strip_marks(text).casefold())


def _case_level(text: str) -> tuple[int, ...]:
    # 0 for anything that is not uppercase, so lowercase wins ties.
    return tuple(1 if ch.isupper() else 0 for ch in text)


def collation_key(name: str) -> tuple:
    """Sort key for a single entry name."""
    composed = unicodedata.normalize("NFC", name)
    return (
        _base_level(composed),
        composed.casefold(),
        _case_level(composed),
        name,
    )


def entry_sort_key(name: str, is_dir: bool) -> tuple:
    """Directories first, then files, each group by `collation_key`."""
    return (not is_dir, collation_key(name))
