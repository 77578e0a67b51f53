"""
Latin-spelled Amharic -> candidate Amharic spellings.

Ties the segmenter and the glyph expander together behind one object,
with optional strict input checking and a candidate ceiling read from
TOML configuration.

Usage:
    from amharic_phonetic.translator import PhonemeTranslator, translate

    translate("gebeya")                 # ['ጌቤያ', 'ጌበያ', 'ገቤያ', 'ገበያ']

    tr = PhonemeTranslator.from_config()   # loads amharic_phonetic.toml
    tr.translate("selam")

    # Or configure directly:
    tr = PhonemeTranslator(strict=True, max_candidates=1024)
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Mapping

from amharic_phonetic.errors import CandidateLimitError, InvalidInputError
from amharic_phonetic.expander import count_candidates, expand
from amharic_phonetic.mapping import PHONETIC_MAP, Entry, get_ambiguous_keys
from amharic_phonetic.phonemes import (
    SPECIAL_CLUSTERS,
    VOWELS,
    find_invalid_chars,
    segment as _segment,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = "amharic_phonetic.toml"


class PhonemeTranslator:
    """Segments a Latin-spelled word and expands it into Amharic candidates.

    Holds no per-request state; one instance can serve any number of
    callers concurrently.

    strict:          reject characters outside a-z with InvalidInputError
                     instead of letting them surface as unmapped phonemes
    max_candidates:  refuse words whose expansion exceeds this many
                     candidates (None or 0 = unbounded)
    """

    def __init__(
        self,
        table: Mapping[str, Entry] | None = None,
        strict: bool = False,
        max_candidates: int | None = None,
    ):
        self.table = PHONETIC_MAP if table is None else table
        self.strict = strict
        self.max_candidates = max_candidates

    @property
    def max_candidates(self) -> int | None:
        return self._max_candidates

    @max_candidates.setter
    def max_candidates(self, limit: int | None) -> None:
        if limit is not None and limit < 0:
            raise ValueError(f"max_candidates must be >= 0, got {limit!r}")
        self._max_candidates = limit or None

    @property
    def vowels(self) -> frozenset[str]:
        return VOWELS

    @property
    def special_clusters(self) -> frozenset[str]:
        return SPECIAL_CLUSTERS

    @classmethod
    def from_config(cls, config_path: str | Path = DEFAULT_CONFIG) -> PhonemeTranslator:
        """Build a translator from the [translator] table of a TOML file.

            [translator]
            strict = true
            max_candidates = 4096   # 0 or absent = unbounded
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        with config_path.open("rb") as f:
            cfg = tomllib.load(f)

        tr_cfg = cfg.get("translator", {})
        if not isinstance(tr_cfg, dict):
            raise ValueError(f"[translator] must be a table, got {tr_cfg!r}")

        strict = tr_cfg.get("strict", False)
        if not isinstance(strict, bool):
            raise ValueError(f"[translator] strict must be a boolean, got {strict!r}")

        limit = tr_cfg.get("max_candidates", 0)
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
            raise ValueError(
                f"[translator] max_candidates must be a non-negative integer, got {limit!r}"
            )

        logger.debug("Loaded translator config from %s", config_path)
        return cls(strict=strict, max_candidates=limit)

    # ── Pipeline ─────────────────────────────────────────────────────────

    def segment(self, word: str) -> list[str]:
        """Split a word into phoneme tokens."""
        if self.strict:
            self._check_input(word)
        return _segment(word)

    def count(self, word: str) -> int:
        """Number of candidates ``translate`` would return for this word."""
        return count_candidates(self.segment(word), self.table, word)

    def translate(self, word: str) -> list[str]:
        """Return every candidate Amharic spelling of a word.

        Empty (or whitespace-only) input gives an empty list.
        """
        tokens = self.segment(word)
        if self.max_candidates is not None:
            n = count_candidates(tokens, self.table, word)
            if n > self.max_candidates:
                logger.warning(
                    "Refusing %r: %d candidates exceeds limit %d",
                    word, n, self.max_candidates,
                )
                raise CandidateLimitError(word, n, self.max_candidates)

        logger.debug("Segmented %r into %s", word, tokens)
        return expand(tokens, self.table, word)

    def _check_input(self, word: str) -> None:
        invalid = find_invalid_chars(word)
        if invalid:
            raise InvalidInputError(word, invalid)

    # ── Introspection ────────────────────────────────────────────────────

    def summary(self) -> str:
        ambiguous = len(get_ambiguous_keys(self.table))
        limit = f"{self.max_candidates:,}" if self.max_candidates else "unbounded"
        lines = ["Phoneme Translator (Latin -> Amharic)"]
        lines.append(f"  Table:        {len(self.table)} phonemes ({ambiguous} ambiguous)")
        lines.append(f"  Vowels:       {' '.join(sorted(self.vowels))}")
        lines.append(f"  Clusters:     {' '.join(sorted(self.special_clusters))}")
        lines.append(f"  Strict input: {'yes' if self.strict else 'no'}")
        lines.append(f"  Max results:  {limit}")
        return "\n".join(lines)


_default = PhonemeTranslator()


def segment(word: str) -> list[str]:
    """Split a word into phoneme tokens with the default rules."""
    return _default.segment(word)


def translate(word: str) -> list[str]:
    """Every candidate Amharic spelling of a word, using the built-in table.

    Raises UnmappedPhonemeError if any token has no mapping.
    """
    return _default.translate(word)
