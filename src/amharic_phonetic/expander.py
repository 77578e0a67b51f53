"""
Glyph expansion: phoneme tokens -> every candidate Amharic spelling.

Each token resolves to one or more glyphs; the candidates are the
Cartesian product of those choices, concatenated in token order.

Output order is fixed: earlier tokens vary slowest, and each token's
glyphs are tried in the order the table lists them.  With "ge" -> (ጌ, ገ)
and "be" -> (ቤ, በ), "gebeya" yields ጌቤያ, ጌበያ, ገቤያ, ገበያ.

The number of candidates is the product of the per-token alternative
counts.  Nothing here caps it; use ``count_candidates`` to check first.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Mapping

from amharic_phonetic.errors import UnmappedPhonemeError
from amharic_phonetic.mapping import PHONETIC_MAP, Entry

logger = logging.getLogger(__name__)


def resolve(
    token: str,
    table: Mapping[str, Entry] = PHONETIC_MAP,
    word: str | None = None,
) -> Entry:
    """Look up a token, raising UnmappedPhonemeError if it has no entry."""
    entry = table.get(token)
    if entry is None:
        raise UnmappedPhonemeError(token, word)
    return entry


def count_candidates(
    tokens: Iterable[str],
    table: Mapping[str, Entry] = PHONETIC_MAP,
    word: str | None = None,
) -> int:
    """Number of candidates ``expand`` would return, without building them.

    An empty token sequence counts as zero.
    """
    sizes = [len(resolve(tok, table, word).glyphs) for tok in tokens]
    if not sizes:
        return 0
    return math.prod(sizes)


def expand(
    tokens: Iterable[str],
    table: Mapping[str, Entry] = PHONETIC_MAP,
    word: str | None = None,
) -> list[str]:
    """Expand tokens into every full-word candidate.

    Every token is resolved before any expansion, so an unmapped token
    fails the request without doing the combinatorial work.
    """
    alternatives = [resolve(tok, table, word).glyphs for tok in tokens]
    if not alternatives:
        return []

    partials = list(alternatives[0])
    for glyphs in alternatives[1:]:
        partials = [prefix + glyph for prefix in partials for glyph in glyphs]

    logger.debug(
        "Expanded %d token(s) into %d candidate(s)", len(alternatives), len(partials),
    )
    return partials
