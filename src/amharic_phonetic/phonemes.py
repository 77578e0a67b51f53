"""
Phoneme segmentation of Latin-spelled Amharic words.

A word is scanned once, left to right, with one character of lookahead.
Consonants accumulate until a vowel closes the syllable; a consonant that
can't extend the pending run flushes it as a vowel-less (6th-order) token.
Only the special clusters (ts, sh, gn, ch) may grow past one consonant,
and only when a vowel follows or the word ends right after them.

    >>> segment("gebeya")
    ['ge', 'be', 'ya']
    >>> segment("Tsehay")
    ['tse', 'ha', 'y']
"""

from __future__ import annotations

import string
from enum import Enum

VOWELS: frozenset[str] = frozenset("aeiou")

SPECIAL_CLUSTERS: frozenset[str] = frozenset({"ts", "sh", "gn", "ch"})

_LATIN_LETTERS = frozenset(string.ascii_lowercase)


def get_vowels() -> frozenset[str]:
    """Return the vowel set used by the default segmenter."""
    return VOWELS


def get_special_clusters() -> frozenset[str]:
    """Return the consonant clusters that form a phoneme on their own."""
    return SPECIAL_CLUSTERS


def normalize(word: str) -> str:
    """Trim surrounding whitespace and lower-case."""
    return word.strip().lower()


def find_invalid_chars(word: str) -> list[tuple[int, str]]:
    """Return (position, char) for every character outside a-z.

    Positions refer to the normalized word.
    """
    return [
        (i, ch) for i, ch in enumerate(normalize(word))
        if ch not in _LATIN_LETTERS
    ]


class _ScanState(Enum):
    EMPTY = "empty"
    ACCUMULATING = "accumulating"


def segment(
    word: str,
    vowels: frozenset[str] = VOWELS,
    clusters: frozenset[str] = SPECIAL_CLUSTERS,
) -> list[str]:
    """Split a word into phoneme tokens, in left-to-right order.

    Any character that is not a vowel is treated as a consonant, so the
    scan never fails; rejecting foreign characters is left to the caller
    (see ``find_invalid_chars``).
    """
    chars = normalize(word)
    last = len(chars) - 1
    tokens: list[str] = []

    state = _ScanState.EMPTY
    buffer = ""

    for i, ch in enumerate(chars):
        if ch in vowels:
            if state is _ScanState.EMPTY:
                # Bare vowel is its own syllable
                tokens.append(ch)
            else:
                tokens.append(buffer + ch)
                state, buffer = _ScanState.EMPTY, ""
            continue

        if state is _ScanState.EMPTY:
            state, buffer = _ScanState.ACCUMULATING, ch
            continue

        candidate = buffer + ch
        if candidate in clusters and i < last and chars[i + 1] in vowels:
            # Cluster waits for its vowel
            buffer = candidate
        elif candidate in clusters and i == last:
            tokens.append(candidate)
            state, buffer = _ScanState.EMPTY, ""
        else:
            tokens.append(buffer)
            buffer = ch

    if state is _ScanState.ACCUMULATING:
        tokens.append(buffer)

    return tokens
