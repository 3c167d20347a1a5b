# tests/test_category.py
"""
Categories, global synset ids and pointer symbol names.
"""

from __future__ import annotations

import pytest

from lexdb.core.domain.category import FILE_CATEGORIES, Category, decode_synset_id, synset_id
from lexdb.core.domain.exceptions import UnknownCategoryError, UnknownSynsetIdError
from lexdb.core.domain.pointers import UNKNOWN_POINTER, describe_pointer


@pytest.mark.parametrize(
    "code,expected",
    [
        ("n", Category.NOUN),
        ("v", Category.VERB),
        ("a", Category.ADJECTIVE),
        ("s", Category.ADJECTIVE_SATELLITE),
        ("r", Category.ADVERB),
    ],
)
def test_from_code(code: str, expected: Category) -> None:
    assert Category.from_code(code) is expected


@pytest.mark.parametrize("bad", ["x", "", "noun", "N", None])
def test_from_code_rejects_unknown_codes(bad) -> None:
    with pytest.raises(UnknownCategoryError):
        Category.from_code(bad)


def test_unknown_category_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        Category.from_code("q")


def test_from_code_passes_categories_through() -> None:
    assert Category.from_code(Category.VERB) is Category.VERB


def test_display_keys() -> None:
    assert [str(c) for c in Category] == ["noun", "verb", "adj", "adj sat", "adv"]


def test_satellites_share_adjective_files() -> None:
    assert Category.ADJECTIVE_SATELLITE.file_category is Category.ADJECTIVE
    assert Category.NOUN.file_category is Category.NOUN
    assert Category.ADJECTIVE_SATELLITE not in FILE_CATEGORIES
    assert len(FILE_CATEGORIES) == 4


def test_synset_id_encoding() -> None:
    assert synset_id(Category.NOUN, 2958343) == 102958343
    assert synset_id(Category.VERB, 1) == 200000001
    assert synset_id(Category.ADJECTIVE_SATELLITE, 1740) == synset_id(Category.ADJECTIVE, 1740)
    assert synset_id(Category.ADVERB, 99) == 400000099


def test_decode_synset_id() -> None:
    assert decode_synset_id(102958343) == (Category.NOUN, 2958343)
    # prefix 3 always decodes to the adjective category
    assert decode_synset_id(300001740) == (Category.ADJECTIVE, 1740)
    assert decode_synset_id(400000000) == (Category.ADVERB, 0)


@pytest.mark.parametrize("bad", [0, 99_999_999, 500000001, -1])
def test_decode_rejects_bad_prefix(bad: int) -> None:
    with pytest.raises(UnknownSynsetIdError):
        decode_synset_id(bad)


def test_describe_pointer_per_category() -> None:
    assert describe_pointer(Category.NOUN, "@") == "Hypernym"
    assert describe_pointer(Category.VERB, "*") == "Entailment"
    assert describe_pointer(Category.ADJECTIVE, "&") == "Similar to"
    assert describe_pointer(Category.ADVERB, "\\") == "Derived from adjective"
    assert describe_pointer(Category.NOUN, ";r") == "Domain of synset - Region"


def test_describe_pointer_satellite_uses_adjective_names() -> None:
    assert describe_pointer(Category.ADJECTIVE_SATELLITE, "&") == "Similar to"


def test_describe_pointer_unknown_and_empty() -> None:
    assert describe_pointer(Category.ADVERB, "@") == UNKNOWN_POINTER
    assert describe_pointer(Category.NOUN, "") == ""
