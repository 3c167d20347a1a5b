# lexdb/adapters/persistence/wordnet/filters.py
"""
Lemma filters for index scans.

Any callable taking the normalized lemma and returning a bool works as a
filter; these two cover the common cases.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Pattern


@dataclass(frozen=True)
class ExactMatchFilter:
    word: str
    ignore_case: bool = False

    def __call__(self, lemma: str) -> bool:
        if lemma is None:
            return False
        if self.ignore_case:
            return lemma.casefold() == self.word.casefold()
        return lemma == self.word


@dataclass(frozen=True)
class WildcardFilter:
    """
    Shell-style pattern: "*" matches any run of characters, "?" exactly one.
    Other characters (including "[") match literally.
    """

    pattern: str
    ignore_case: bool = False
    _regex: Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        escaped = "".join(
            ".*" if ch == "*" else "." if ch == "?" else re.escape(ch) for ch in self.pattern
        )
        flags = re.IGNORECASE if self.ignore_case else 0
        object.__setattr__(self, "_regex", re.compile(rf"\A{escaped}\Z", flags | re.DOTALL))

    def __call__(self, lemma: str) -> bool:
        if lemma is None:
            return False
        return self._regex.match(lemma) is not None


__all__ = ["ExactMatchFilter", "WildcardFilter"]
