"""
lexdb
=====

Read-only access to a lexical database stored as WordNet-style flat files:
one index file and one data file per part of speech.

    from lexdb import Category, Dictionary, WildcardFilter

    wn = Dictionary("/usr/share/wordnet/dict")
    for term in wn.index_terms(Category.NOUN, limit=5, term_filter=WildcardFilter("car*")):
        first = term.synsets[0].resolve()
        print(term.lemma, first.gloss)
"""

from lexdb.adapters.persistence.wordnet.filters import ExactMatchFilter, WildcardFilter
from lexdb.core.domain.category import Category, decode_synset_id, synset_id
from lexdb.core.domain.exceptions import (
    InvalidRootPathError,
    LexiconError,
    MalformedLineError,
    SynsetLoadError,
    UnknownCategoryError,
    UnknownSynsetIdError,
)
from lexdb.core.domain.models import FrameData, IndexTerm, Pointer, Synset, SynsetHandle, WordData
from lexdb.core.domain.pointers import describe_pointer
from lexdb.services.dictionary import Dictionary

__all__ = [
    "Category",
    "Dictionary",
    "ExactMatchFilter",
    "FrameData",
    "IndexTerm",
    "InvalidRootPathError",
    "LexiconError",
    "MalformedLineError",
    "Pointer",
    "Synset",
    "SynsetHandle",
    "SynsetLoadError",
    "UnknownCategoryError",
    "UnknownSynsetIdError",
    "WordData",
    "decode_synset_id",
    "describe_pointer",
    "synset_id",
]
