# lexdb/adapters/persistence/wordnet/tokenizer.py
"""
Single-delimiter line splitter.

str.split() is not enough for the data-file grammar: after the "|" marker
the rest of the line is one free-text field that must be taken verbatim.
The cursor only moves forward.
"""

from __future__ import annotations

from typing import Optional


class LineSplitter:
    __slots__ = ("_text", "_delim", "_pos")

    def __init__(self, text: Optional[str], delim: str = " "):
        if len(delim) != 1:
            raise ValueError("delimiter must be a single character")
        self._text = text or ""
        self._delim = delim
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    def _skip_delimiters(self) -> None:
        text, delim, n = self._text, self._delim, len(self._text)
        pos = self._pos
        while pos < n and text[pos] == delim:
            pos += 1
        self._pos = pos

    def next_token(self) -> str:
        """Next maximal run of non-delimiter characters, or "" at the end."""
        self._skip_delimiters()
        start = self._pos
        end = self._text.find(self._delim, start)
        if end < 0:
            end = len(self._text)
        self._pos = end
        return self._text[start:end]

    def rest_of_line(self) -> str:
        """Everything after the next run of delimiters; moves the cursor to the end."""
        self._skip_delimiters()
        rest = self._text[self._pos:]
        self._pos = len(self._text)
        return rest

    def has_more(self) -> bool:
        self._skip_delimiters()
        return self._pos < len(self._text)


__all__ = ["LineSplitter"]
