# lexdb/core/domain/models.py
"""
Domain records for the lexical database.

    IndexTerm   - one index-file line: a lemma and its ranked synset references
    Synset      - a fully parsed data-file record (value type)
    SynsetHandle- a (category, offset) reference that resolves its Synset once
    WordData    - one member word of a synset
    Pointer     - a typed relation to another synset (held as a handle)
    FrameData   - a verb sentence frame reference

Handles only carry the (category, offset) key plus the capability to read it;
they never own the record they point to. Two handles naming the same global
synset id are equal whether or not either has been resolved.
"""

from __future__ import annotations

import re
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Tuple

import structlog

from .category import Category, synset_id
from .exceptions import SynsetLoadError
from .pointers import describe_pointer

if TYPE_CHECKING:
    from lexdb.core.ports import SynsetSource

logger = structlog.get_logger()

# Sense-number memo states on WordData
SENSE_NOT_LOADED = -1
SENSE_NOT_FOUND = 0

_EXAMPLE_RE = re.compile(r'"([^"]*)"')


# ---------------------------------------------------------------------------
# Leaf records
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class FrameData:
    frame_number: int
    # 0 means the frame applies to every word in the synset
    word_index: int

    def describe(self) -> str:
        return f"Frame-Number: {self.frame_number}  Word-Number: {self.word_index}"


@dataclass(slots=True)
class WordData:
    """
    A member word of a synset.

    `sense_number` is a memo: -1 until resolved, 0 when the word's index
    entry does not list the owning synset, otherwise the 1-based rank.
    """

    word: str
    lex_id: int
    syntactic_marker: Optional[str]
    category: Category
    offset: int
    sense_number: int = SENSE_NOT_LOADED
    source: Optional["SynsetSource"] = field(default=None, repr=False, compare=False)

    def resolve_sense_number(self) -> int:
        """Compute the sense number on first request and keep it."""
        if self.sense_number == SENSE_NOT_LOADED and self.source is not None:
            self.sense_number = self.source.sense_number(self.word, self.category, self.offset)
        return self.sense_number

    def describe(self) -> str:
        if self.sense_number < 0:
            sense = ": <Not loaded>"
        elif self.sense_number == SENSE_NOT_FOUND:
            sense = ": <Not found>"
        else:
            sense = f" #{self.sense_number}"
        return (
            f"Word: {self.word}  Lexicon-ID: {self.lex_id}  Syntactic-Marker: {self.syntactic_marker}\n"
            f"POS: {self.category}  Offset: {self.offset}  Sense{sense}"
        )


# ---------------------------------------------------------------------------
# Synset value and handle
# ---------------------------------------------------------------------------


@dataclass(frozen=True, eq=False)
class Synset:
    """
    A fully populated synset record.

    Equality and hashing use (category, offset, lex_file_num) only.
    """

    category: Category
    offset: int
    lex_file_num: int = 0
    words: Tuple[WordData, ...] = ()
    pointers: Tuple["Pointer", ...] = ()
    frames: Tuple[FrameData, ...] = ()
    gloss: Optional[str] = None

    @classmethod
    def unresolved(cls, category: Category, offset: int) -> "Synset":
        """The default shape of a synset whose body could not be loaded."""
        return cls(category=category, offset=offset)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Synset):
            return NotImplemented
        return (
            self.category is other.category
            and self.offset == other.offset
            and self.lex_file_num == other.lex_file_num
        )

    def __hash__(self) -> int:
        return hash((self.category, self.offset, self.lex_file_num))

    @property
    def synset_id(self) -> int:
        return synset_id(self.category, self.offset)

    @property
    def lemmas(self) -> List[str]:
        return [w.word for w in self.words]

    @property
    def definition(self) -> Optional[str]:
        """Gloss text before the first quoted example."""
        if self.gloss is None:
            return None
        head = self.gloss.split('"', 1)[0]
        return head.strip().rstrip(";").strip()

    @property
    def examples(self) -> List[str]:
        if not self.gloss:
            return []
        return _EXAMPLE_RE.findall(self.gloss)

    def related(self, symbol: str) -> List["SynsetHandle"]:
        """Targets of every pointer carrying `symbol`, in declaration order."""
        if not symbol or not symbol.strip():
            return []
        return [p.target for p in self.pointers if p.symbol == symbol]

    def describe(self) -> str:
        lines = [
            f"Synset-Offset: {self.offset}  Lex-FileNum: {self.lex_file_num}"
            f"  POS: {self.category}  Num-Words: {len(self.words)}",
            f"Num-Ptrs: {len(self.pointers)}  Num-Frames: {len(self.frames)}",
            f"Gloss: {self.gloss}",
        ]

        lines.append(f"List of Words ({len(self.words)})")
        for i, word in enumerate(self.words, start=1):
            lines.append(f"  #{i}: {word.describe()}")

        lines.append(f"List of Pointers ({len(self.pointers)})")
        for i, ptr in enumerate(self.pointers, start=1):
            lines.append(f"  #{i}: {ptr.describe()} ({ptr.description})")

        if self.frames:
            lines.append(f"List of Frames ({len(self.frames)})")
            for i, frame in enumerate(self.frames, start=1):
                lines.append(f"  #{i}: {frame.describe()}")
        else:
            lines.append("List-Frames: (no frames)")

        return "\n".join(lines)


class SynsetHandle:
    """
    Reference to a synset by (category, offset).

    `resolve()` reads the record through the source the first time it is
    called and returns the cached Synset afterwards. The transition from
    unresolved to resolved happens at most once, under a lock, and a failed
    read is not retried: the handle keeps the default shape and records the
    failure in `load_error`. If the source is strict, every call to
    `resolve()` on a failed handle raises SynsetLoadError instead.

    InvalidRootPathError from the source is fatal and propagates untouched;
    the handle stays unresolved in that case.
    """

    __slots__ = ("category", "offset", "load_error", "_source", "_lock", "_body")

    def __init__(self, category: Category, offset: int, source: Optional["SynsetSource"] = None):
        self.category = category
        self.offset = offset
        self.load_error: Optional[Exception] = None
        self._source = source
        self._lock = threading.Lock()
        self._body: Optional[Synset] = None

    @property
    def synset_id(self) -> int:
        return synset_id(self.category, self.offset)

    @property
    def is_resolved(self) -> bool:
        return self._body is not None

    def resolve(self) -> Synset:
        # Fast path (no lock) once the body is in place.
        if self._body is None:
            with self._lock:
                if self._body is None:
                    self._body = self._load()

        if self.load_error is not None and self._strict():
            raise SynsetLoadError(self.category, self.offset, str(self.load_error)) from self.load_error
        return self._body

    def _strict(self) -> bool:
        return self._source is not None and bool(self._source.strict_loading)

    def _load(self) -> Synset:
        if self._source is None:
            return self._degrade(SynsetLoadError(self.category, self.offset, "no data source"))
        if self.offset <= 0:
            return self._degrade(SynsetLoadError(self.category, self.offset, "offset must be positive"))

        try:
            return self._source.fetch_synset(self.category, self.offset)
        except (OSError, ValueError, SynsetLoadError) as exc:
            return self._degrade(exc)

    def _degrade(self, exc: Exception) -> Synset:
        self.load_error = exc
        logger.warning(
            "synset_load_failed",
            category=self.category.key,
            offset=self.offset,
            error=str(exc),
        )
        return Synset.unresolved(self.category, self.offset)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SynsetHandle):
            return NotImplemented
        return self.synset_id == other.synset_id

    def __hash__(self) -> int:
        return hash(self.synset_id)

    def __repr__(self) -> str:
        state = "resolved" if self.is_resolved else "unresolved"
        return f"SynsetHandle({self.category.key}, {self.offset:08d}, {state})"


@dataclass(frozen=True, slots=True)
class Pointer:
    symbol: str
    category: Category
    target: SynsetHandle
    source_word: int
    # 0 on both ends means the relation holds between whole synsets
    target_word: int
    # category of the synset that declares the pointer
    source_category: Category

    @property
    def offset(self) -> int:
        return self.target.offset

    @property
    def is_lexical(self) -> bool:
        return self.source_word != 0 or self.target_word != 0

    @property
    def description(self) -> str:
        return describe_pointer(self.source_category, self.symbol)

    def describe(self) -> str:
        return (
            f"Symbol: {self.symbol}  Synset-Offset: {self.target.offset}  POS: {self.category}"
            f"  Source-Word-Number: {self.source_word}  Target-Word-Number: {self.target_word}"
        )


# ---------------------------------------------------------------------------
# Index term
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class IndexTerm:
    """
    One index-file entry. `synsets[i]` is sense i+1, most frequent first.
    Terms sort by lemma; a missing lemma sorts last.
    """

    lemma: Optional[str]
    category: Category
    synset_count: int
    tag_sense_count: int
    pointer_symbols: Tuple[str, ...]
    synsets: Tuple[SynsetHandle, ...]

    @property
    def pointer_count(self) -> int:
        return len(self.pointer_symbols)

    @property
    def offsets(self) -> Tuple[int, ...]:
        return tuple(h.offset for h in self.synsets)

    def sense_number_of(self, offset: int) -> int:
        """1-based position of `offset` among this term's synsets, 0 if absent."""
        for rank, handle in enumerate(self.synsets, start=1):
            if handle.offset == offset:
                return rank
        return SENSE_NOT_FOUND

    @property
    def sort_key(self) -> Tuple[bool, str]:
        return (self.lemma is None, self.lemma or "")

    # Ordering compares lemmas only; equality stays field-wise.
    def __lt__(self, other: "IndexTerm") -> bool:
        if not isinstance(other, IndexTerm):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __le__(self, other: "IndexTerm") -> bool:
        if not isinstance(other, IndexTerm):
            return NotImplemented
        return self.sort_key <= other.sort_key

    def __gt__(self, other: "IndexTerm") -> bool:
        if not isinstance(other, IndexTerm):
            return NotImplemented
        return self.sort_key > other.sort_key

    def __ge__(self, other: "IndexTerm") -> bool:
        if not isinstance(other, IndexTerm):
            return NotImplemented
        return self.sort_key >= other.sort_key

    def describe(self) -> str:
        lines = [
            f"Lemma: {self.lemma}  POS: {self.category}  Tag-Sense-Count: {self.tag_sense_count}",
            f"List of Synsets ({self.synset_count})",
        ]
        for i, handle in enumerate(self.synsets, start=1):
            lines.append(f"  #{i}: {handle.offset}")
        lines.append(f"List of Pointers ({self.pointer_count})")
        for i, symbol in enumerate(self.pointer_symbols, start=1):
            lines.append(f"  #{i}: {symbol} ({describe_pointer(self.category, symbol)})")
        return "\n".join(lines)


__all__ = [
    "SENSE_NOT_LOADED",
    "SENSE_NOT_FOUND",
    "FrameData",
    "WordData",
    "Synset",
    "SynsetHandle",
    "Pointer",
    "IndexTerm",
]
