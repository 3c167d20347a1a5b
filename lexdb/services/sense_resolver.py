# lexdb/services/sense_resolver.py
"""
Sense-number resolution.

A word's sense number is the 1-based position of its synset in the word's
own index entry. The data files do not store it, so every resolution goes
back to the index file: one scan with an exact, case-sensitive lemma match
and a limit of one term. This is the expensive path of the library; the
result is memoized on the WordData that asked for it.
"""

from __future__ import annotations

from typing import Callable, Optional

import structlog

from lexdb.core.domain.category import Category
from lexdb.core.domain.models import SENSE_NOT_FOUND, IndexTerm

logger = structlog.get_logger()

TermLookup = Callable[[str, Category], Optional[IndexTerm]]


class SenseNumberResolver:
    def __init__(self, lookup: TermLookup):
        self._lookup = lookup

    def __call__(self, word: str, category: Category, offset: int) -> int:
        return self.sense_number(word, category, offset)

    def sense_number(self, word: str, category: Category, offset: int) -> int:
        """
        Return the rank of `offset` among the senses of `word`, or 0.

        0 signals an inconsistency between the data and index files (the word
        is missing from the index, or its entry does not list the synset). It
        is logged, never raised.
        """
        term = self._lookup(word, category)
        if term is None:
            logger.debug("sense_term_missing", word=word, category=category.key, offset=offset)
            return SENSE_NOT_FOUND

        rank = term.sense_number_of(offset)
        if rank == SENSE_NOT_FOUND:
            logger.debug("sense_offset_missing", word=word, category=category.key, offset=offset)
        return rank


__all__ = ["SenseNumberResolver", "TermLookup"]
