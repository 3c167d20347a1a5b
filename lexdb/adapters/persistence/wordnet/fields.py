# lexdb/adapters/persistence/wordnet/fields.py
"""Token-level helpers shared by the index-line and data-line parsers."""

from __future__ import annotations

from typing import Optional

from lexdb.core.domain.category import Category
from lexdb.core.domain.exceptions import MalformedLineError

from .tokenizer import LineSplitter


def is_record_line(line: Optional[str]) -> bool:
    """Header/licence lines are indented; blank lines carry nothing."""
    return bool(line) and not line[0].isspace()


def normalize_lemma(token: str) -> str:
    return token.replace("_", " ")


def take(st: LineSplitter, what: str, line: str) -> str:
    token = st.next_token()
    if not token:
        raise MalformedLineError(f"missing {what}", line)
    return token


def take_int(st: LineSplitter, what: str, line: str, base: int = 10) -> int:
    token = take(st, what, line)
    try:
        return int(token, base)
    except ValueError:
        raise MalformedLineError(f"bad {what} {token!r}", line) from None


def take_category(st: LineSplitter, what: str, line: str) -> Category:
    token = take(st, what, line)
    return Category.from_code(token)
