"""Pure helpers over a single CMU-style phone string."""

from __future__ import annotations

import re

__all__ = ["STRESS_DIGITS", "RHYME_STRESSES", "syllable_count", "stresses", "rhyming_part"]


STRESS_DIGITS = "012"
RHYME_STRESSES = "12"

_STRESS_PATTERN = re.compile(r"[012]")
_NON_STRESS_PATTERN = re.compile(r"[^012]")


def syllable_count(phones: str) -> int:
    """Count the syllables in a string of space-separated phones.

    Every stress digit in the string counts as one vowel, so
    ``syllable_count("AH0 B AH1 V") == 2``. An empty string has no syllables.
    """

    if not phones:
        return 0
    return len(_STRESS_PATTERN.findall(phones))


def stresses(phones: str) -> str:
    """Return only the stress digits of ``phones``, in order."""

    return _NON_STRESS_PATTERN.sub("", phones)


def rhyming_part(phones: str) -> str:
    """Return ``phones`` from the last primary or secondary stressed vowel on.

    Falls back to the whole pronunciation when no vowel carries stress 1 or 2.
    """

    phone_list = phones.split()
    start = 0
    for index in range(len(phone_list) - 1, -1, -1):
        if phone_list[index][-1] in RHYME_STRESSES:
            start = index
            break
    return " ".join(phone_list[start:])
