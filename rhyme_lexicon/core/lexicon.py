"""Facade wiring the store, search engine and rhyme resolver together."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from .cmudict_loader import CMUDictLoader, parse_lexicon
from .rhymes import RhymeResolver
from .search import PatternSearchEngine, SearchPattern
from .store import PronunciationStore


class PhoneticLexicon:
    """Query interface over one pronunciation dictionary.

    The dictionary is loaded on the first query, either from the wrapped
    ``CMUDictLoader`` or from an already built ``PronunciationStore``.
    """

    def __init__(
        self,
        *,
        loader: Optional[CMUDictLoader] = None,
        store: Optional[PronunciationStore] = None,
    ) -> None:
        if loader is not None and store is not None:
            raise ValueError("pass either a loader or a store, not both")
        if loader is None and store is None:
            loader = CMUDictLoader()
        self.loader = loader
        self._store = store
        self._search_engine: Optional[PatternSearchEngine] = None
        self._resolver: Optional[RhymeResolver] = None

    @classmethod
    def from_text(cls, text: str) -> "PhoneticLexicon":
        return cls(store=PronunciationStore(parse_lexicon(text)))

    @classmethod
    def from_path(cls, dict_path: Path | str) -> "PhoneticLexicon":
        return cls(loader=CMUDictLoader(dict_path))

    @property
    def store(self) -> PronunciationStore:
        if self._store is None:
            self._store = self.loader.load()
        return self._store

    @property
    def search_engine(self) -> PatternSearchEngine:
        if self._search_engine is None:
            self._search_engine = PatternSearchEngine(self.store)
        return self._search_engine

    @property
    def resolver(self) -> RhymeResolver:
        if self._resolver is None:
            self._resolver = RhymeResolver(self.store, self.search_engine)
        return self._resolver

    def phones_for_word(self, word: str) -> List[str]:
        return self.store.phones_for_word(word)

    entries_for_word = phones_for_word

    def stresses_for_word(self, word: str) -> List[str]:
        return self.store.stresses_for_word(word)

    def search(self, pattern: SearchPattern) -> List[str]:
        return self.search_engine.search(pattern)

    def search_stresses(self, pattern: str) -> List[str]:
        return self.search_engine.search_stresses(pattern)

    def rhymes(self, word: str) -> List[str]:
        return self.resolver.rhymes(word)


DEFAULT_LEXICON = PhoneticLexicon()

__all__ = ["PhoneticLexicon", "DEFAULT_LEXICON"]
