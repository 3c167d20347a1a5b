# lexdb/adapters/persistence/wordnet/index_parser.py
"""
Index-file parsing.

Line layout (space separated):

    lemma  pos  synset_cnt  p_cnt  [ptr_symbol...]  sense_cnt  tagsense_cnt  synset_offset...

    car n 5 3 @ ~ + 1 12 00635850 00467995 00468229 00468418 00468742

- lemma underscores become spaces ("motor_car" -> "motor car")
- p_cnt pointer symbols follow p_cnt
- sense_cnt is redundant with synset_cnt and ignored
- exactly synset_cnt decimal offsets close the line, most frequent sense first

Lines starting with a space are licence/header text and are skipped.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional

import structlog

from lexdb.core.domain.category import Category
from lexdb.core.domain.models import IndexTerm, SynsetHandle
from lexdb.core.ports import SynsetSource, TermFilter

from .fields import is_record_line, normalize_lemma, take, take_category, take_int
from .tokenizer import LineSplitter

logger = structlog.get_logger()


def parse_index_line(line: Optional[str], source: Optional[SynsetSource] = None) -> Optional[IndexTerm]:
    """
    Parse one index-file line.

    Returns None for blank or indented lines. A line that passes that check
    is expected to be well formed; a count/token mismatch raises
    MalformedLineError and an unknown category code UnknownCategoryError.
    """
    if not is_record_line(line):
        return None
    line = line.rstrip("\r\n")

    st = LineSplitter(line, " ")

    lemma = normalize_lemma(take(st, "lemma", line))
    category = take_category(st, "category code", line)

    synset_count = take_int(st, "synset count", line)
    pointer_count = take_int(st, "pointer count", line)
    symbols = tuple(take(st, "pointer symbol", line) for _ in range(pointer_count))

    take(st, "sense count", line)
    tag_sense_count = take_int(st, "tag sense count", line)

    synsets = tuple(
        SynsetHandle(category, take_int(st, "synset offset", line), source)
        for _ in range(synset_count)
    )

    return IndexTerm(
        lemma=lemma,
        category=category,
        synset_count=synset_count,
        tag_sense_count=tag_sense_count,
        pointer_symbols=symbols,
        synsets=synsets,
    )


def iter_index_file(
    path: Path,
    *,
    limit: Optional[int] = None,
    term_filter: Optional[TermFilter] = None,
    source: Optional[SynsetSource] = None,
    encoding: str = "utf-8",
) -> Iterator[IndexTerm]:
    """
    Stream the index terms of one file, in file order.

    `term_filter` is applied to the normalized lemma; `limit` caps the number
    of accepted terms (None or a negative value means no cap, 0 yields
    nothing). A file that cannot be opened or read is logged and ends the
    stream early instead of raising.
    """
    if limit == 0:
        return

    accepted = 0
    try:
        with path.open("r", encoding=encoding, errors="replace") as f:
            for raw in f:
                term = parse_index_line(raw, source)
                if term is None:
                    continue
                if term_filter is not None and not term_filter(term.lemma):
                    continue

                yield term
                accepted += 1
                if limit is not None and 0 < limit <= accepted:
                    break
    except OSError as e:
        logger.error("index_file_read_failed", path=str(path), error=str(e))
        return

    logger.debug("index_scan_complete", path=str(path), terms=accepted)


__all__ = ["parse_index_line", "iter_index_file"]
