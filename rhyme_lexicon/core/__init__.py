"""Pronunciation data model and the queries that run over it."""

from .cmudict_loader import (
    CMUDictLoader,
    DICT_PATH_ENV,
    LexiconParseError,
    normalize_word,
    parse_lexicon,
)
from .lexicon import DEFAULT_LEXICON, PhoneticLexicon
from .phones import rhyming_part, stresses, syllable_count
from .rhymes import RhymeResolver
from .search import PatternSearchEngine, SearchPattern, anchor_pattern
from .store import Entry, PronunciationStore

__all__ = [
    "CMUDictLoader",
    "DICT_PATH_ENV",
    "DEFAULT_LEXICON",
    "Entry",
    "LexiconParseError",
    "PatternSearchEngine",
    "PhoneticLexicon",
    "PronunciationStore",
    "RhymeResolver",
    "SearchPattern",
    "anchor_pattern",
    "normalize_word",
    "parse_lexicon",
    "rhyming_part",
    "stresses",
    "syllable_count",
]
