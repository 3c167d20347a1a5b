# lexdb/adapters/persistence/wordnet/files.py
"""
On-disk layout of a dictionary directory.

    <root>/
      index.noun  index.verb  index.adj  index.adv
      data.noun   data.verb   data.adj   data.adv

File names are fixed. A root is valid when it is a directory containing
data.noun.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple, Union

from lexdb.core.domain.category import Category

MARKER_FILE = "data.noun"

PathLike = Union[str, Path]


def index_filename(category: Category) -> str:
    return f"index.{category.file_category.file_stem}"


def data_filename(category: Category) -> str:
    return f"data.{category.file_category.file_stem}"


def check_root(root: Optional[PathLike]) -> Tuple[bool, str]:
    """Return (valid, reason) for a candidate dictionary directory."""
    if root is None or str(root) == "":
        return False, "path is not set"
    path = Path(root)
    if not path.is_dir():
        return False, "not a directory"
    if not (path / MARKER_FILE).is_file():
        return False, f"{MARKER_FILE} is missing"
    return True, "ok"


__all__ = ["MARKER_FILE", "index_filename", "data_filename", "check_root"]
