# lexdb/core/domain/pointers.py
"""Human-readable names for pointer (relation) symbols, per category."""

from __future__ import annotations

from typing import Dict

from .category import Category

UNKNOWN_POINTER = "[Unknown]"

_DOMAIN_OF_SYNSET = {
    ";c": "Domain of synset - Topic",
    ";r": "Domain of synset - Region",
    ";u": "Domain of synset - Usage",
}

_POINTER_NAMES: Dict[Category, Dict[str, str]] = {
    Category.NOUN: {
        "!": "Antonym",
        "@": "Hypernym",
        "@i": "Instance Hypernym",
        "~": "Hyponym",
        "~i": "Instance Hyponym",
        "#m": "Member holonym",
        "#s": "Substance holonym",
        "#p": "Part holonym",
        "%m": "Member meronym",
        "%s": "Substance meronym",
        "%p": "Part meronym",
        "=": "Attribute",
        "+": "Derivationally related form",
        "-c": "Member of this domain - Topic",
        "-r": "Member of this domain - Region",
        "-u": "Member of this domain - Usage",
        **_DOMAIN_OF_SYNSET,
    },
    Category.VERB: {
        "!": "Antonym",
        "@": "Hypernym",
        "~": "Hyponym",
        "*": "Entailment",
        ">": "Cause",
        "^": "Also see",
        "$": "Verb Group",
        "+": "Derivationally related form",
        **_DOMAIN_OF_SYNSET,
    },
    Category.ADJECTIVE: {
        "!": "Antonym",
        "&": "Similar to",
        "<": "Participle of verb",
        "\\": "Pertainym (pertains to noun)",
        "=": "Attribute",
        "^": "Also see",
        **_DOMAIN_OF_SYNSET,
    },
    Category.ADVERB: {
        "!": "Antonym",
        "\\": "Derived from adjective",
        **_DOMAIN_OF_SYNSET,
    },
}


def describe_pointer(category: Category, symbol: str) -> str:
    """
    Return the relation name for `symbol` as used in `category`'s files.

    An empty symbol yields "", a symbol the category does not use yields
    "[Unknown]". Satellites use the adjective table.
    """
    if not symbol:
        return ""
    return _POINTER_NAMES[category.file_category].get(symbol, UNKNOWN_POINTER)


__all__ = ["describe_pointer", "UNKNOWN_POINTER"]
