# lexdb/core/domain/category.py
"""
Grammatical categories (parts of speech) and the 9-digit global synset id.

Each category carries:
    - key:    display name ("noun", "adj sat", ...)
    - code:   one-character code used in index/data lines (n, v, a, s, r)
    - prefix: leading digit of the global synset id (1..4)
    - file_stem: suffix of its index/data file names

Adjective satellites live in the adjective files and share the adjective
prefix, so the prefix alone maps back to ADJECTIVE.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from .exceptions import UnknownCategoryError, UnknownSynsetIdError

# prefix * 10^8 + offset
SYNSET_ID_BASE = 100_000_000


class Category(Enum):
    NOUN = ("noun", "n", 1, "noun")
    VERB = ("verb", "v", 2, "verb")
    ADJECTIVE = ("adj", "a", 3, "adj")
    ADJECTIVE_SATELLITE = ("adj sat", "s", 3, "adj")
    ADVERB = ("adv", "r", 4, "adv")

    def __init__(self, key: str, code: str, prefix: int, file_stem: str):
        self.key = key
        self.code = code
        self.prefix = prefix
        self.file_stem = file_stem

    def __str__(self) -> str:
        return self.key

    def __hash__(self) -> int:
        return hash(self.code)

    @property
    def file_category(self) -> "Category":
        """The category whose index/data files hold this category's records."""
        return Category.ADJECTIVE if self is Category.ADJECTIVE_SATELLITE else self

    @classmethod
    def from_code(cls, code: str) -> "Category":
        """Look a category up by its one-character code."""
        if isinstance(code, Category):
            return code
        hit = _BY_CODE.get(code) if isinstance(code, str) else None
        if hit is None:
            raise UnknownCategoryError(code)
        return hit


_BY_CODE = {c.code: c for c in Category}
_BY_PREFIX = {1: Category.NOUN, 2: Category.VERB, 3: Category.ADJECTIVE, 4: Category.ADVERB}

# Categories that own a pair of files, in the order the files are scanned.
FILE_CATEGORIES: Tuple[Category, ...] = (
    Category.ADJECTIVE,
    Category.ADVERB,
    Category.NOUN,
    Category.VERB,
)


def synset_id(category: Category, offset: int) -> int:
    """Encode (category, offset) as the 9-digit global synset id."""
    return category.prefix * SYNSET_ID_BASE + offset


def decode_synset_id(value: int) -> Tuple[Category, int]:
    """
    Split a 9-digit global synset id into (category, offset).

    Raises:
        UnknownSynsetIdError: the leading digit is not one of 1, 2, 3, 4.
    """
    if value < 0:
        raise UnknownSynsetIdError(value)
    prefix, offset = divmod(value, SYNSET_ID_BASE)
    hit = _BY_PREFIX.get(prefix)
    if hit is None:
        raise UnknownSynsetIdError(value)
    return hit, offset


__all__ = ["Category", "FILE_CATEGORIES", "SYNSET_ID_BASE", "synset_id", "decode_synset_id"]
