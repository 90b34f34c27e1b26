"""Rhyme lookup built from the store, the rhyming part and pattern search."""

from __future__ import annotations

import re
from typing import List

from rhyme_lexicon.utils.observability import get_logger, observe_query, start_span

from .phones import rhyming_part
from .search import PatternSearchEngine
from .store import PronunciationStore

_logger = get_logger(__name__).bind(component="rhymes")


class RhymeResolver:
    """Find words that share a rhyming part with any pronunciation of a word."""

    def __init__(self, store: PronunciationStore, search_engine: PatternSearchEngine) -> None:
        self.store = store
        self.search_engine = search_engine

    def rhymes_for_phones(self, phones: str) -> List[str]:
        """Words whose pronunciation ends with the rhyming part of ``phones``."""

        part = rhyming_part(phones)
        if not part:
            return []
        return self.search_engine.search(re.escape(part) + "$")

    def rhymes(self, word: str) -> List[str]:
        """Return the words rhyming with ``word``, never ``word`` itself.

        Results for every pronunciation of ``word`` are merged in the order
        first found and each rhyming word appears once, even when several of
        its pronunciations match. Unknown words have no rhymes.
        """

        with start_span("rhyme_lexicon.rhymes", {"rhymes.word": word}) as span, observe_query(
            "rhymes"
        ):
            pronunciations = self.store.phones_for_word(word)
            found: dict[str, None] = {}
            for phones in pronunciations:
                found.update(dict.fromkeys(self.rhymes_for_phones(phones)))
            found.pop(word, None)
            results = list(found)
            span.set_attribute("rhymes.pronunciations", len(pronunciations))
            span.set_attribute("rhymes.matches", len(results))

        _logger.debug(
            "Rhyme lookup finished",
            context={"word": word, "pronunciations": len(pronunciations), "matches": len(results)},
        )
        return results


__all__ = ["RhymeResolver"]
