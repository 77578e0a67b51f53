"""amharic-phonetic: Latin-spelled Amharic words to candidate Amharic-script spellings."""

from amharic_phonetic.errors import (
    TranslationError, UnmappedPhonemeError, InvalidInputError, CandidateLimitError,
)
from amharic_phonetic.mapping import PHONETIC_MAP, Single, Alternatives
from amharic_phonetic.phonemes import (
    VOWELS, SPECIAL_CLUSTERS, get_vowels, get_special_clusters,
)
from amharic_phonetic.expander import expand, count_candidates
from amharic_phonetic.translator import PhonemeTranslator, segment, translate

__all__ = [
    "segment", "translate", "PhonemeTranslator",
    "expand", "count_candidates",
    "PHONETIC_MAP", "Single", "Alternatives",
    "VOWELS", "SPECIAL_CLUSTERS", "get_vowels", "get_special_clusters",
    "TranslationError", "UnmappedPhonemeError", "InvalidInputError",
    "CandidateLimitError",
]
