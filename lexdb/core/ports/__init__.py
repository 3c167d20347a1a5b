# lexdb/core/ports/__init__.py
"""
Ports: the capabilities the domain needs from the outside world.

- TermFilter: any predicate over a lemma string, used to restrict index scans.
- SynsetSource: reads and parses one synset record by (category, offset) and
  resolves sense numbers. The dictionary facade is the production adapter;
  tests plug in counting or failing fakes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from lexdb.core.domain.category import Category
    from lexdb.core.domain.models import Synset

TermFilter = Callable[[str], bool]


@runtime_checkable
class SynsetSource(Protocol):
    # When true, a failed lazy load raises instead of degrading.
    strict_loading: bool

    def fetch_synset(self, category: "Category", offset: int) -> "Synset":
        """
        Read and parse the record stored at `offset` in the category's data file.

        Raises OSError / ValueError (or SynsetLoadError) when the record
        cannot be produced.
        """
        ...

    def sense_number(self, word: str, category: "Category", offset: int) -> int:
        """1-based rank of `offset` in the index entry for `word`, 0 if absent."""
        ...


__all__ = ["TermFilter", "SynsetSource"]
