# lexdb/adapters/persistence/wordnet/data_parser.py
"""
Data-file parsing.

Line layout (space separated):

    synset_offset  lex_filenum  ss_type  w_cnt  word lex_id [word lex_id...]
    p_cnt  [ptr...]  [frames...]  |  gloss

    00468418 05 n 03 scooter 0 motor_scooter 0 ... | a wheeled vehicle ...

Encodings:
    - synset_offset, lex_filenum, p_cnt: decimal
    - w_cnt, lex_id: hexadecimal
    - each pointer: symbol, target offset (decimal), target pos code, and a
      four hex digit source/target field: high byte = source word number,
      low byte = target word number (0000 = whole synset)
    - verbs only: f_cnt (decimal) then f_cnt groups of "+ f_num w_num"
      with w_num in hexadecimal
    - adjectives may suffix a word with a syntactic marker: "galore(ip)"

The gloss is whatever follows the "|" token, verbatim apart from trailing
whitespace.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

import structlog

from lexdb.core.domain.category import Category
from lexdb.core.domain.exceptions import MalformedLineError
from lexdb.core.domain.models import FrameData, Pointer, Synset, SynsetHandle, WordData
from lexdb.core.ports import SynsetSource

from .fields import is_record_line, normalize_lemma, take, take_category, take_int
from .tokenizer import LineSplitter

logger = structlog.get_logger()

GLOSS_MARKER = "|"

_MARKER_RE = re.compile(r"^(?P<word>.+)\((?P<marker>[^()]+)\)$")


def split_syntactic_marker(word: str) -> Tuple[str, Optional[str]]:
    """'galore(ip)' -> ('galore', 'ip'); words without a marker pass through."""
    m = _MARKER_RE.match(word)
    if m is None:
        return word, None
    return m.group("word"), m.group("marker")


def _parse_words(
    st: LineSplitter,
    line: str,
    category: Category,
    offset: int,
    source: Optional[SynsetSource],
    eager_senses: bool,
) -> List[WordData]:
    count = take_int(st, "word count", line, 16)
    words: List[WordData] = []
    for _ in range(count):
        word = normalize_lemma(take(st, "word", line))
        lex_id = take_int(st, "lex id", line, 16)

        marker = None
        if category is Category.ADJECTIVE:
            word, marker = split_syntactic_marker(word)

        wd = WordData(word, lex_id, marker, category, offset, source=source)
        if eager_senses:
            wd.resolve_sense_number()
        words.append(wd)
    return words


def _parse_pointers(
    st: LineSplitter,
    line: str,
    category: Category,
    source: Optional[SynsetSource],
) -> List[Pointer]:
    count = take_int(st, "pointer count", line)
    pointers: List[Pointer] = []
    for _ in range(count):
        symbol = take(st, "pointer symbol", line)
        target_offset = take_int(st, "pointer offset", line)
        target_category = take_category(st, "pointer category", line)

        source_target = take(st, "pointer source/target", line)
        if len(source_target) != 4:
            raise MalformedLineError(f"bad pointer source/target {source_target!r}", line)
        try:
            source_word = int(source_target[:2], 16)
            target_word = int(source_target[2:], 16)
        except ValueError:
            raise MalformedLineError(f"bad pointer source/target {source_target!r}", line) from None

        pointers.append(
            Pointer(
                symbol=symbol,
                category=target_category,
                target=SynsetHandle(target_category, target_offset, source),
                source_word=source_word,
                target_word=target_word,
                source_category=category,
            )
        )
    return pointers


def _parse_frames(st: LineSplitter, line: str) -> List[FrameData]:
    count = take_int(st, "frame count", line)
    frames: List[FrameData] = []
    for _ in range(count):
        take(st, "frame separator", line)
        frame_number = take_int(st, "frame number", line)
        word_index = take_int(st, "frame word number", line, 16)
        frames.append(FrameData(frame_number, word_index))
    return frames


def parse_data_line(
    line: Optional[str],
    source: Optional[SynsetSource] = None,
    *,
    eager_senses: bool = False,
) -> Optional[Synset]:
    """
    Parse one data-file line into a fully populated Synset.

    Returns None for blank or indented lines. Pointer targets become
    unresolved handles bound to `source`; so do the member words, which use
    it for sense-number lookups. With `eager_senses` every word's sense
    number is resolved before returning (one index scan per word).
    """
    if not is_record_line(line):
        return None
    line = line.rstrip("\r\n")

    st = LineSplitter(line, " ")

    offset = take_int(st, "synset offset", line)
    lex_file_num = take_int(st, "lex file number", line)
    category = take_category(st, "category code", line)

    words = _parse_words(st, line, category, offset, source, eager_senses)
    pointers = _parse_pointers(st, line, category, source)
    frames = _parse_frames(st, line) if category is Category.VERB else []

    gloss = None
    if st.next_token() == GLOSS_MARKER:
        gloss = st.rest_of_line().rstrip()

    return Synset(
        category=category,
        offset=offset,
        lex_file_num=lex_file_num,
        words=tuple(words),
        pointers=tuple(pointers),
        frames=tuple(frames),
        gloss=gloss,
    )


def iter_data_file(
    path: Path,
    *,
    source: Optional[SynsetSource] = None,
    encoding: str = "utf-8",
) -> Iterator[Synset]:
    """
    Stream every synset of a data file, in file order.

    A file that cannot be opened or read is logged and ends the stream.
    """
    count = 0
    try:
        with path.open("r", encoding=encoding, errors="replace") as f:
            for raw in f:
                synset = parse_data_line(raw, source)
                if synset is None:
                    continue
                count += 1
                yield synset
    except OSError as e:
        logger.error("data_file_read_failed", path=str(path), error=str(e))
        return

    logger.debug("data_scan_complete", path=str(path), synsets=count)


def read_data_line(path: Path, offset: int, encoding: str = "utf-8") -> Optional[str]:
    """
    Return the line starting at byte `offset` of a data file, or None past EOF.

    Opens the file for each call; OSError propagates to the caller.
    """
    with path.open("rb") as f:
        f.seek(offset)
        raw = f.readline()
    if not raw:
        return None
    return raw.decode(encoding, errors="replace")


__all__ = [
    "GLOSS_MARKER",
    "split_syntactic_marker",
    "parse_data_line",
    "iter_data_file",
    "read_data_line",
]
