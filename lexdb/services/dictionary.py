# lexdb/services/dictionary.py
"""
Dictionary facade over one dictionary directory.

A Dictionary is a plain value: it holds its root path, the cached result of
validating that path, and the loading policy. Build one per configuration
(directly or via `Dictionary.from_settings`); nothing is shared globally.

It also acts as the SynsetSource for every handle it hands out, so handles
resolve against the same directory and policy that produced them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Optional, Union

import structlog

from lexdb.adapters.persistence.wordnet.data_parser import iter_data_file, parse_data_line, read_data_line
from lexdb.adapters.persistence.wordnet.files import PathLike, check_root, data_filename, index_filename
from lexdb.adapters.persistence.wordnet.filters import ExactMatchFilter
from lexdb.adapters.persistence.wordnet.index_parser import iter_index_file
from lexdb.core.domain.category import FILE_CATEGORIES, Category, decode_synset_id
from lexdb.core.domain.exceptions import InvalidRootPathError, SynsetLoadError, UnknownSynsetIdError
from lexdb.core.domain.models import IndexTerm, Synset, SynsetHandle
from lexdb.core.ports import TermFilter
from lexdb.shared.config import Settings
from lexdb.shared.logging_setup import init_logging
from lexdb.services.sense_resolver import SenseNumberResolver

logger = structlog.get_logger()

CategoryLike = Union[Category, str]


class Dictionary:
    def __init__(
        self,
        root: Optional[PathLike] = None,
        *,
        strict_loading: bool = False,
        eager_sense_numbers: bool = False,
        encoding: str = "utf-8",
    ):
        self._root: Optional[str] = None
        self._valid: Optional[bool] = None
        self._invalid_reason = ""
        self.root = root

        self.strict_loading = strict_loading
        self.eager_sense_numbers = eager_sense_numbers
        self.encoding = encoding

        self._senses = SenseNumberResolver(self.lookup)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Dictionary":
        """Build a dictionary from configuration; also sets up logging once."""
        init_logging(settings.LOG_LEVEL, settings.LOG_FORMAT.value)
        return cls(
            settings.WORDNET_DIR,
            strict_loading=settings.STRICT_SYNSET_LOADING,
            eager_sense_numbers=settings.EAGER_SENSE_NUMBERS,
            encoding=settings.FILE_ENCODING,
        )

    # ------------------------------------------------------------------
    # Root path
    # ------------------------------------------------------------------

    @property
    def root(self) -> Optional[str]:
        return self._root

    @root.setter
    def root(self, value: Optional[PathLike]) -> None:
        # Reassigning the path is the only thing that invalidates the cache.
        self._root = None if value is None else str(value)
        self._valid = None
        self._invalid_reason = ""

    def is_valid(self) -> bool:
        if self._valid is None:
            valid, reason = check_root(self._root)
            if not valid:
                logger.warning("wordnet_root_invalid", root=self._root, reason=reason)
            self._valid = valid
            self._invalid_reason = "" if valid else reason
        return self._valid

    def _require_root(self) -> Path:
        if not self.is_valid():
            raise InvalidRootPathError(self._root, self._invalid_reason)
        return Path(self._root)

    def index_path(self, category: CategoryLike) -> Path:
        return self._require_root() / index_filename(Category.from_code(category))

    def data_path(self, category: CategoryLike) -> Path:
        return self._require_root() / data_filename(Category.from_code(category))

    # ------------------------------------------------------------------
    # Index terms
    # ------------------------------------------------------------------

    def iter_index_terms(
        self,
        category: CategoryLike,
        limit: Optional[int] = None,
        term_filter: Optional[TermFilter] = None,
    ) -> Iterator[IndexTerm]:
        """
        Stream the index terms of one category in file (lemma) order.

        Raises InvalidRootPathError immediately, before iteration starts,
        when the root path is unusable.
        """
        path = self.index_path(category)
        return iter_index_file(
            path,
            limit=limit,
            term_filter=term_filter,
            source=self,
            encoding=self.encoding,
        )

    def index_terms(
        self,
        category: CategoryLike,
        limit: Optional[int] = None,
        term_filter: Optional[TermFilter] = None,
    ) -> List[IndexTerm]:
        return list(self.iter_index_terms(category, limit, term_filter))

    def all_index_terms(
        self,
        limit: Optional[int] = None,
        term_filter: Optional[TermFilter] = None,
    ) -> List[IndexTerm]:
        """
        Index terms of every category, merged, sorted by lemma and cut to `limit`.

        Each category contributes at most `limit` terms before the merge.
        """
        if limit == 0:
            return []

        terms: List[IndexTerm] = []
        for category in FILE_CATEGORIES:
            terms.extend(self.iter_index_terms(category, limit, term_filter))

        terms.sort(key=lambda t: t.sort_key)
        if limit is not None and 0 < limit < len(terms):
            del terms[limit:]
        return terms

    def lookup(self, lemma: str, category: CategoryLike) -> Optional[IndexTerm]:
        """The index entry whose lemma equals `lemma` exactly (case-sensitive)."""
        return next(self.iter_index_terms(category, 1, ExactMatchFilter(lemma)), None)

    # ------------------------------------------------------------------
    # Synsets
    # ------------------------------------------------------------------

    def synset(self, offset: int, category: CategoryLike) -> SynsetHandle:
        """An unresolved handle for the record at `offset`; nothing is read yet."""
        return SynsetHandle(Category.from_code(category), offset, self)

    def synset_by_id(self, synset_id: int) -> Optional[SynsetHandle]:
        """Handle for a 9-digit global id, or None when its prefix is not 1-4."""
        try:
            category, offset = decode_synset_id(synset_id)
        except UnknownSynsetIdError:
            return None
        return self.synset(offset, category)

    def synsets(self, category: CategoryLike) -> Iterator[Synset]:
        """Stream every record of the category's data file, fully parsed."""
        path = self.data_path(category)
        return iter_data_file(path, source=self, encoding=self.encoding)

    # ------------------------------------------------------------------
    # SynsetSource
    # ------------------------------------------------------------------

    def fetch_synset(self, category: Category, offset: int) -> Synset:
        path = self.data_path(category)
        line = read_data_line(path, offset, self.encoding)
        if line is None:
            raise SynsetLoadError(category, offset, "offset is past the end of the file")

        synset = parse_data_line(line, self, eager_senses=self.eager_sense_numbers)
        if synset is None:
            raise SynsetLoadError(category, offset, "no record starts at this offset")
        if synset.offset != offset:
            raise SynsetLoadError(category, offset, f"line holds record {synset.offset:08d}")
        return synset

    def sense_number(self, word: str, category: Category, offset: int) -> int:
        return self._senses.sense_number(word, category, offset)

    def __repr__(self) -> str:
        return f"Dictionary(root={self._root!r})"


__all__ = ["Dictionary"]
