"""Parsing and loading of CMU pronouncing dictionary text."""

from __future__ import annotations

import os
import re
import threading
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import pronouncing

from rhyme_lexicon.utils.observability import ENTRIES_LOADED, get_logger, start_span

from .store import Entry, PronunciationStore

DICT_PATH_ENV = "RHYME_LEXICON_DICT_PATH"
DICT_FILENAME = "cmudict-0.7b"

_WORD_VARIANT_PATTERN = re.compile(r"\(\d\)$")
_FIELD_SEPARATOR = "  "
_COMMENT_PREFIX = ";"

_logger = get_logger(__name__).bind(component="cmudict_loader")


class LexiconParseError(ValueError):
    """Raised when a dictionary data line lacks the word/phones separator."""

    def __init__(self, line_number: int, line: str) -> None:
        super().__init__(
            f"line {line_number}: expected WORD{_FIELD_SEPARATOR}PHONES, got {line!r}"
        )
        self.line_number = line_number
        self.line = line


def normalize_word(raw_word: str) -> str:
    """Drop a trailing ``(N)`` variant marker and lowercase ``raw_word``."""

    return _WORD_VARIANT_PATTERN.sub("", raw_word).lower()


def parse_lexicon(text: str) -> List[Entry]:
    """Parse CMU dictionary text into entries, preserving line order.

    Lines are separated by ``\\n`` only (a trailing ``\\r`` is dropped). Empty
    lines and ``;`` comment lines are skipped. Every other line must hold a
    word and its phones separated by two spaces, so a whitespace-only line is
    malformed; alternate pronunciations such as ``PROJECT(1)`` are stored
    under the bare word.
    """

    entries: List[Entry] = []
    for line_number, line in enumerate(text.split("\n"), start=1):
        line = line.removesuffix("\r")
        if not line or line.startswith(_COMMENT_PREFIX):
            continue
        raw_word, separator, phones = line.partition(_FIELD_SEPARATOR)
        if not separator:
            raise LexiconParseError(line_number, line)
        entries.append(Entry(normalize_word(raw_word), phones.strip()))
    return entries


def _read_text(path: Path) -> str:
    raw = path.read_bytes()
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        # cmudict-0.7b carries a handful of Latin-1 encoded words.
        return raw.decode("latin-1")


def _bundled_pairs() -> Iterable[Tuple[str, str]]:
    pronouncing.init_cmu()
    # The bundled cmudict.dict appends "# comment" annotations to some lines.
    return (
        (normalize_word(word), phones.split("#", 1)[0].strip())
        for word, phones in pronouncing.pronunciations
    )


class CMUDictLoader:
    """Lazy loader that builds the pronunciation store on first use.

    The dictionary comes from ``dict_path`` when given, then from the
    ``RHYME_LEXICON_DICT_PATH`` environment variable, then from a
    ``cmudict-0.7b`` file beside the package. Without any of those the CMU
    dictionary bundled with :mod:`pronouncing` is used.

    The environment variable and the local file are looked up when
    ``dict_path`` is read, so a loader created before the variable is set
    still honours it on its first load.
    """

    def __init__(self, dict_path: Optional[Path | str] = None) -> None:
        self._explicit_path: Optional[Path] = Path(dict_path) if dict_path is not None else None
        self._store: Optional[PronunciationStore] = None
        self._lock = threading.Lock()

    @property
    def dict_path(self) -> Optional[Path]:
        if self._explicit_path is not None:
            return self._explicit_path
        env_path = os.environ.get(DICT_PATH_ENV)
        if env_path:
            return Path(env_path)
        return self._find_local_dictionary()

    @staticmethod
    def _find_local_dictionary() -> Optional[Path]:
        module_path = Path(__file__).resolve()
        candidates = [
            module_path.parents[1] / DICT_FILENAME,
            module_path.parents[2] / DICT_FILENAME,
        ]
        for candidate in candidates:
            if candidate.is_file():
                return candidate
        return None

    @property
    def loaded(self) -> bool:
        return self._store is not None

    @property
    def source(self) -> str:
        return str(self.dict_path) if self.dict_path is not None else "pronouncing"

    def load(self) -> PronunciationStore:
        """Return the store, reading the dictionary the first time only."""

        if self._store is not None:
            return self._store

        with self._lock:
            if self._store is None:
                self._store = self._build_store()
        return self._store

    def _build_store(self) -> PronunciationStore:
        dict_path = self.dict_path
        source = str(dict_path) if dict_path is not None else "pronouncing"
        with start_span("rhyme_lexicon.load", {"lexicon.source": source}) as span:
            if dict_path is not None:
                if not dict_path.is_file():
                    _logger.error("Dictionary file missing", context={"path": source})
                    raise FileNotFoundError(f"CMU dictionary not found: {dict_path}")
                store = PronunciationStore(parse_lexicon(_read_text(dict_path)))
            else:
                store = PronunciationStore.from_pairs(_bundled_pairs())

            span.set_attribute("lexicon.entries", len(store))

        ENTRIES_LOADED.inc(len(store))
        _logger.info(
            "Pronunciation dictionary loaded",
            context={"source": source, "entries": len(store)},
        )
        return store


__all__ = [
    "CMUDictLoader",
    "DICT_PATH_ENV",
    "LexiconParseError",
    "normalize_word",
    "parse_lexicon",
]
