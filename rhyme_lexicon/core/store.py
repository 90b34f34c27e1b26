"""In-memory pronunciation entries and word lookups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple

from .phones import stresses


@dataclass(frozen=True)
class Entry:
    """One pronunciation of a normalised (lowercase, variant-free) word."""

    word: str
    phones: str

    @property
    def stresses(self) -> str:
        return stresses(self.phones)


class PronunciationStore:
    """Read-only sequence of entries kept in dictionary source order.

    Several entries may share a word, one per pronunciation variant. Lookups
    are linear scans; nothing is indexed or mutated after construction.
    """

    def __init__(self, entries: Iterable[Entry] = ()) -> None:
        self._entries: Tuple[Entry, ...] = tuple(entries)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> "PronunciationStore":
        return cls(Entry(word, phones) for word, phones in pairs)

    @property
    def entries(self) -> Sequence[Entry]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def phones_for_word(self, word: str) -> List[str]:
        """Return every pronunciation recorded for ``word``.

        The comparison is exact, so callers pass the normalised lowercase
        form. An unknown word yields an empty list.
        """

        return [entry.phones for entry in self._entries if entry.word == word]

    entries_for_word = phones_for_word

    def stresses_for_word(self, word: str) -> List[str]:
        """Return the stress string of each pronunciation of ``word``."""

        return [stresses(phones) for phones in self.phones_for_word(word)]

    def words(self) -> List[str]:
        """Distinct words in the order they first appear."""

        return list(dict.fromkeys(entry.word for entry in self._entries))


__all__ = ["Entry", "PronunciationStore"]
