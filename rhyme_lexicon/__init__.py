"""Query the CMU pronouncing dictionary: pronunciations, stresses and rhymes.

The module-level functions run against :data:`DEFAULT_LEXICON`, which loads
its dictionary on first use. ``RHYME_LEXICON_DICT_PATH`` is read at that first
query, not at import, so it may be set any time before then. Build a
:class:`PhoneticLexicon` to query a different dictionary.

``RHYME_LEXICON_LOG_LEVEL``, when set, is applied to the package logger on
import; call :func:`configure_logging` to also get a stderr handler.
"""

from __future__ import annotations

from typing import List

from .core import (
    CMUDictLoader,
    DEFAULT_LEXICON,
    Entry,
    LexiconParseError,
    PhoneticLexicon,
    PronunciationStore,
    SearchPattern,
    parse_lexicon,
    rhyming_part,
    stresses,
    syllable_count,
)
from .utils import apply_environment_level, configure_logging

__version__ = "0.1.0"

apply_environment_level()


def phones_for_word(word: str) -> List[str]:
    """Return the CMU pronunciations of ``word`` (empty when unknown)."""

    return DEFAULT_LEXICON.phones_for_word(word)


entries_for_word = phones_for_word


def stresses_for_word(word: str) -> List[str]:
    """Return the stress pattern of each pronunciation of ``word``."""

    return DEFAULT_LEXICON.stresses_for_word(word)


def search(pattern: SearchPattern) -> List[str]:
    """Return words whose pronunciation matches ``pattern``.

    Strings get word-boundary anchors added before and after; compiled
    patterns are used as given.
    """

    return DEFAULT_LEXICON.search(pattern)


def search_stresses(pattern: str) -> List[str]:
    """Return words whose stress pattern matches ``pattern``."""

    return DEFAULT_LEXICON.search_stresses(pattern)


def rhymes(word: str) -> List[str]:
    """Return words rhyming with ``word``.

    Empty when ``word`` is not in the dictionary or nothing rhymes with it.
    """

    return DEFAULT_LEXICON.rhymes(word)


__all__ = [
    "configure_logging",
    "CMUDictLoader",
    "DEFAULT_LEXICON",
    "Entry",
    "LexiconParseError",
    "PhoneticLexicon",
    "PronunciationStore",
    "entries_for_word",
    "parse_lexicon",
    "phones_for_word",
    "rhymes",
    "rhyming_part",
    "search",
    "search_stresses",
    "stresses",
    "stresses_for_word",
    "syllable_count",
]
