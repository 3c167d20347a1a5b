# lexdb/core/domain/exceptions.py
"""
Error taxonomy for the lexical database.

Parse-level errors also derive from ValueError so that callers treating a
bad numeric field as a plain ValueError keep working.
"""

from __future__ import annotations

from typing import Optional


class LexiconError(Exception):
    """Base exception for lexical database problems."""


class InvalidRootPathError(LexiconError):
    """Raised when the dictionary directory is unset, missing or lacks data.noun."""

    def __init__(self, root: Optional[str], reason: str):
        self.root = root
        self.reason = reason
        super().__init__(f"The data path is either not set or is invalid ({reason}): {root!r}")


class MalformedLineError(LexiconError, ValueError):
    """Raised when an accepted index/data line does not match its grammar."""

    def __init__(self, message: str, line: Optional[str] = None):
        self.line = line
        super().__init__(message if line is None else f"{message}: {line[:80]!r}")


class UnknownCategoryError(LexiconError, ValueError):
    """Raised for a category code outside n, v, a, s, r."""

    def __init__(self, code: object):
        self.code = code
        super().__init__(f"Unknown type of part of speech: {code!r}")


class UnknownSynsetIdError(LexiconError, ValueError):
    """Raised when a 9-digit synset id carries a prefix outside 1-4."""

    def __init__(self, synset_id: int):
        self.synset_id = synset_id
        super().__init__(f"No such synset id: {synset_id}")


class SynsetLoadError(LexiconError):
    """Raised by strict loading when a synset body cannot be read or parsed."""

    def __init__(self, category: object, offset: int, reason: str):
        self.category = category
        self.offset = offset
        self.reason = reason
        super().__init__(f"Cannot load synset {category}:{offset:08d} ({reason})")


__all__ = [
    "LexiconError",
    "InvalidRootPathError",
    "MalformedLineError",
    "UnknownCategoryError",
    "UnknownSynsetIdError",
    "SynsetLoadError",
]
