"""Regular-expression scans over pronunciations and stress patterns."""

from __future__ import annotations

import re
from typing import Callable, List, Union

from rhyme_lexicon.utils.observability import get_logger, observe_query, start_span

from .store import Entry, PronunciationStore

SearchPattern = Union[str, re.Pattern[str]]

_logger = get_logger(__name__).bind(component="search")


def anchor_pattern(pattern: str) -> re.Pattern[str]:
    """Compile ``pattern`` between word-boundary anchors.

    The anchors keep a pattern such as ``"AH1"`` from matching inside a
    longer phone. Invalid expressions raise :class:`re.error`.
    """

    return re.compile(r"\b" + pattern + r"\b")


class PatternSearchEngine:
    """Return the words of every entry whose phones or stresses match."""

    def __init__(self, store: PronunciationStore) -> None:
        self.store = store

    def _scan(
        self,
        operation: str,
        regex: re.Pattern[str],
        field: Callable[[Entry], str],
    ) -> List[str]:
        with start_span(
            f"rhyme_lexicon.{operation}", {"search.pattern": regex.pattern}
        ) as span, observe_query(operation):
            matches = [entry.word for entry in self.store if regex.search(field(entry))]
            span.set_attribute("search.matches", len(matches))

        _logger.debug(
            "Lexicon scan finished",
            context={"operation": operation, "pattern": regex.pattern, "matches": len(matches)},
        )
        return matches

    def search(self, pattern: SearchPattern) -> List[str]:
        """Find words whose pronunciation matches ``pattern``.

        A string is wrapped in word-boundary anchors before compiling. A
        precompiled pattern is used untouched, so add your own anchors to it.
        Words appear in dictionary order, once per matching pronunciation.
        """

        regex = pattern if isinstance(pattern, re.Pattern) else anchor_pattern(pattern)
        return self._scan("search", regex, lambda entry: entry.phones)

    def search_stresses(self, pattern: str) -> List[str]:
        """Find words whose stress string (e.g. ``"010"``) matches ``pattern``."""

        return self._scan("search_stresses", anchor_pattern(pattern), lambda entry: entry.stresses)


__all__ = ["PatternSearchEngine", "SearchPattern", "anchor_pattern"]
