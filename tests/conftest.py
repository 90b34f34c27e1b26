import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from rhyme_lexicon import PhoneticLexicon


SAMPLE_DICTIONARY = """\
;;; # CMUdict  --  Major Version: 0.07
;;; sample entries used by the test-suite

ABOVE  AH0 B AH1 V
CAT  K AE1 T
HAT  HH AE1 T
PROJECT  P R AA1 JH EH0 K T
PROJECT(1)  P R AH0 JH EH1 K T
OBJECT  AA1 B JH EH0 K T
OBJECT(1)  AH0 B JH EH1 K T
REJECT  R IH0 JH EH1 K T
TOMATO  T AH0 M EY1 T OW2
TOMATO(1)  T AH0 M AA1 T OW2
POTATO  P AH0 T EY1 T OW2
THE  DH AH0
THE(1)  DH AH1
THE(2)  DH IY0
A  AH0
LOVE  L AH1 V
GLOVE  G L AH1 V
SCAT  S K AE1 T
CAT'S  K AE1 T S
"""


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_DICTIONARY


@pytest.fixture
def lexicon() -> PhoneticLexicon:
    """Lexicon built from the inline sample dictionary."""

    return PhoneticLexicon.from_text(SAMPLE_DICTIONARY)


@pytest.fixture
def sample_dict_path(tmp_path) -> Path:
    path = tmp_path / "cmudict-0.7b"
    path.write_text(SAMPLE_DICTIONARY, encoding="utf-8")
    return path
