"""
Latin-to-Amharic (Ge'ez script) phonetic mapping table for amharic_phonetic.

Principles:
- Keys are phoneme tokens as produced by the segmenter: a bare consonant
  (6th-order form), a consonant or cluster plus vowel, or a bare vowel
- Most "Ce" syllables are ambiguous between the 5th order (ጌ, [e]) and
  the 1st order (ገ, [ə]); Latin spelling does not distinguish them
- Where two Amharic consonants merge in Latin typing (t/ጥ, ch/ጭ, c/ክ)
  every candidate is listed
- Alternatives are ordered; the order is the order candidates come out in

Usage:
    from amharic_phonetic.mapping import PHONETIC_MAP, Single, Alternatives
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping


# ── Entry types ─────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Single:
    """An unambiguous token: exactly one glyph."""

    glyph: str

    @property
    def glyphs(self) -> tuple[str, ...]:
        return (self.glyph,)

    @property
    def ambiguous(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Alternatives:
    """Mutually exclusive glyphs for the same sound, in preference order."""

    choices: tuple[str, ...]

    def __post_init__(self):
        if not self.choices:
            raise ValueError("Alternatives needs at least one glyph")

    @property
    def glyphs(self) -> tuple[str, ...]:
        return self.choices

    @property
    def ambiguous(self) -> bool:
        return len(self.choices) > 1


Entry = Single | Alternatives


def _alt(*glyphs: str) -> Alternatives:
    return Alternatives(tuple(glyphs))


# ── Core mapping table ──────────────────────────────────────────────────────
# Each row: (latin_token, entry, notes)
#
# Grouped by consonant series; within a series: bare consonant, then
# a / e / i / o / u.

MAPPING = [
    # h-series
    ("h",   Single("ህ"),          "hoy  - 6th order"),
    ("ha",  Single("ሃ"),          "ha"),
    ("he",  _alt("ሄ", "ሀ"),       "AMBIG: he/hə"),
    ("hi",  Single("ሂ"),          "hi"),
    ("ho",  Single("ሆ"),          "ho"),
    ("hu",  Single("ሁ"),          "hu"),

    # l-series
    ("l",   Single("ል"),          "lawe - 6th order"),
    ("la",  Single("ላ"),          "la"),
    ("le",  _alt("ሌ", "ለ"),       "AMBIG: le/lə"),
    ("li",  Single("ሊ"),          "li"),
    ("lo",  Single("ሎ"),          "lo"),
    ("lu",  Single("ሉ"),          "lu"),

    # m-series
    ("m",   Single("ም"),          "may  - 6th order"),
    ("ma",  Single("ማ"),          "ma"),
    ("me",  _alt("ሜ", "መ"),       "AMBIG: me/mə"),
    ("mi",  Single("ሚ"),          "mi"),
    ("mo",  Single("ሞ"),          "mo"),
    ("mu",  Single("ሙ"),          "mu"),

    # s-series
    ("s",   Single("ስ"),          "sat  - 6th order"),
    ("sa",  Single("ሳ"),          "sa"),
    ("se",  _alt("ሴ", "ሰ"),       "AMBIG: se/sə"),
    ("si",  Single("ሲ"),          "si"),
    ("so",  Single("ሶ"),          "so"),
    ("su",  Single("ሱ"),          "su"),

    # r-series
    ("r",   Single("ር"),          "rəʾs - 6th order"),
    ("ra",  Single("ራ"),          "ra"),
    ("re",  _alt("ሬ", "ረ"),       "AMBIG: re/rə"),
    ("ri",  Single("ሪ"),          "ri"),
    ("ro",  Single("ሮ"),          "ro"),
    ("ru",  Single("ሩ"),          "ru"),

    # sh-series (special cluster)
    ("sh",  Single("ሽ"),          "šat  - 6th order"),
    ("sha", Single("ሻ"),          "sha"),
    ("she", _alt("ሼ", "ሸ"),       "AMBIG: she/shə"),
    ("shi", Single("ሺ"),          "shi"),
    ("sho", Single("ሾ"),          "sho"),
    ("shu", Single("ሹ"),          "shu"),

    # q-series
    ("q",   Single("ቅ"),          "qaf  - 6th order"),
    ("qa",  Single("ቃ"),          "qa"),
    ("qe",  _alt("ቄ", "ቀ"),       "AMBIG: qe/qə"),
    ("qi",  Single("ቂ"),          "qi"),
    ("qo",  Single("ቆ"),          "qo"),
    ("qu",  Single("ቁ"),          "qu"),

    # b-series
    ("b",   Single("ብ"),          "bet  - 6th order"),
    ("ba",  Single("ባ"),          "ba"),
    ("be",  _alt("ቤ", "በ"),       "AMBIG: be/bə"),
    ("bi",  Single("ቢ"),          "bi"),
    ("bo",  Single("ቦ"),          "bo"),
    ("bu",  Single("ቡ"),          "bu"),

    # t-series: plain ተ and ejective ጠ both typed as "t"
    ("t",   _alt("ት", "ጥ"),       "AMBIG: tawe/ṭait"),
    ("ta",  _alt("ታ", "ጣ"),       "AMBIG: ta/ṭa"),
    ("te",  _alt("ቴ", "ተ", "ጤ", "ጠ"), "AMBIG: te/tə/ṭe/ṭə"),
    ("ti",  _alt("ቲ", "ጢ"),       "AMBIG: ti/ṭi"),
    ("to",  _alt("ቶ", "ጦ"),       "AMBIG: to/ṭo"),
    ("tu",  _alt("ቱ", "ጡ"),       "AMBIG: tu/ṭu"),

    # ch-series (special cluster): plain ቸ and ejective ጨ
    ("ch",  _alt("ች", "ጭ"),       "AMBIG: čat/č̣at"),
    ("cha", _alt("ቻ", "ጫ"),       "AMBIG: cha/č̣a"),
    ("che", _alt("ቼ", "ቸ", "ጬ", "ጨ"), "AMBIG: che/chə/č̣e/č̣ə"),
    ("chi", _alt("ቺ", "ጪ"),       "AMBIG: chi/č̣i"),
    ("cho", _alt("ቾ", "ጮ"),       "AMBIG: cho/č̣o"),
    ("chu", _alt("ቹ", "ጩ"),       "AMBIG: chu/č̣u"),

    # c as alternate input: either ch-sounds or k-sounds depending on writer
    ("c",   _alt("ች", "ክ"),       "AMBIG: ch/k"),
    ("ca",  _alt("ቻ", "ካ"),       "AMBIG: cha/ka"),
    ("ce",  _alt("ቼ", "ቸ", "ኬ", "ከ"), "AMBIG: che/chə/ke/kə"),
    ("ci",  _alt("ቺ", "ኪ"),       "AMBIG: chi/ki"),
    ("co",  _alt("ቾ", "ኮ"),       "AMBIG: cho/ko"),
    ("cu",  _alt("ቹ", "ኩ"),       "AMBIG: chu/ku"),

    # n-series
    ("n",   Single("ን"),          "nahas - 6th order"),
    ("na",  Single("ና"),          "na"),
    ("ne",  _alt("ኔ", "ነ"),       "AMBIG: ne/nə"),
    ("ni",  Single("ኒ"),          "ni"),
    ("no",  Single("ኖ"),          "no"),
    ("nu",  Single("ኑ"),          "nu"),

    # gn-series (special cluster): palatal nasal ኘ
    ("gn",  Single("ኝ"),          "ñ    - 6th order"),
    ("gna", Single("ኛ"),          "ña"),
    ("gne", _alt("ኜ", "ኘ"),       "AMBIG: ñe/ñə"),
    ("gni", Single("ኚ"),          "ñi"),
    ("gno", Single("ኞ"),          "ño"),
    ("gnu", Single("ኙ"),          "ñu"),

    # Bare vowels (alef carrier). "e" is a one-glyph Alternatives on
    # purpose; it still yields exactly one candidate.
    ("a",   Single("ኣ"),          "a"),
    ("e",   _alt("ኤ"),            "e"),
    ("i",   Single("ኢ"),          "i"),
    ("o",   Single("ኦ"),          "o"),
    ("u",   Single("ኡ"),          "u"),

    # k-series
    ("k",   Single("ክ"),          "kaf  - 6th order"),
    ("ka",  Single("ካ"),          "ka"),
    ("ke",  _alt("ኬ", "ከ"),       "AMBIG: ke/kə"),
    ("ki",  Single("ኪ"),          "ki"),
    ("ko",  Single("ኮ"),          "ko"),
    ("ku",  Single("ኩ"),          "ku"),

    # w-series
    ("w",   Single("ው"),          "wawe - 6th order"),
    ("wa",  Single("ዋ"),          "wa"),
    ("we",  _alt("ዌ", "ወ"),       "AMBIG: we/wə"),
    ("wi",  Single("ዊ"),          "wi"),
    ("wo",  Single("ዎ"),          "wo"),
    ("wu",  Single("ዉ"),          "wu"),

    # z-series
    ("z",   Single("ዝ"),          "zay  - 6th order"),
    ("za",  Single("ዛ"),          "za"),
    ("ze",  _alt("ዜ", "ዘ"),       "AMBIG: ze/zə"),
    ("zi",  Single("ዚ"),          "zi"),
    ("zo",  Single("ዞ"),          "zo"),
    ("zu",  Single("ዙ"),          "zu"),

    # x as alternate for z
    ("x",   Single("ዝ"),          "zay  - (alias)"),
    ("xa",  Single("ዛ"),          "za   - (alias)"),
    ("xe",  _alt("ዜ", "ዘ"),       "AMBIG: ze/zə (alias)"),
    ("xi",  Single("ዚ"),          "zi   - (alias)"),
    ("xo",  Single("ዞ"),          "zo   - (alias)"),
    ("xu",  Single("ዙ"),          "zu   - (alias)"),

    # y-series
    ("y",   Single("ይ"),          "yaman - 6th order"),
    ("ya",  Single("ያ"),          "ya"),
    ("ye",  _alt("ዬ", "የ"),       "AMBIG: ye/yə"),
    ("yi",  Single("ዪ"),          "yi"),
    ("yo",  Single("ዮ"),          "yo"),
    ("yu",  Single("ዩ"),          "yu"),

    # d-series
    ("d",   Single("ድ"),          "dant - 6th order"),
    ("da",  Single("ዳ"),          "da"),
    ("de",  _alt("ዴ", "ደ"),       "AMBIG: de/də"),
    ("di",  Single("ዲ"),          "di"),
    ("do",  Single("ዶ"),          "do"),
    ("du",  Single("ዱ"),          "du"),

    # j-series
    ("j",   Single("ጅ"),          "ǧ    - 6th order"),
    ("ja",  Single("ጃ"),          "ja"),
    ("je",  _alt("ጄ", "ጀ"),       "AMBIG: je/jə"),
    ("ji",  Single("ጂ"),          "ji"),
    ("jo",  Single("ጆ"),          "jo"),
    ("ju",  Single("ጁ"),          "ju"),

    # g-series
    ("g",   Single("ግ"),          "gaml - 6th order"),
    ("ga",  Single("ጋ"),          "ga"),
    ("ge",  _alt("ጌ", "ገ"),       "AMBIG: ge/gə"),
    ("gi",  Single("ጊ"),          "gi"),
    ("go",  Single("ጎ"),          "go"),
    ("gu",  Single("ጉ"),          "gu"),

    # ts-series (special cluster): ṣädäy ጸ
    ("ts",  Single("ጽ"),          "ṣ    - 6th order"),
    ("tsa", Single("ጻ"),          "ṣa"),
    ("tse", _alt("ጼ", "ጸ"),       "AMBIG: ṣe/ṣə"),
    ("tsi", Single("ጺ"),          "ṣi"),
    ("tso", Single("ጾ"),          "ṣo"),
    ("tsu", Single("ጹ"),          "ṣu"),

    # f-series
    ("f",   Single("ፍ"),          "af   - 6th order"),
    ("fa",  Single("ፋ"),          "fa"),
    ("fe",  _alt("ፌ", "ፈ"),       "AMBIG: fe/fə"),
    ("fi",  Single("ፊ"),          "fi"),
    ("fo",  Single("ፎ"),          "fo"),
    ("fu",  Single("ፉ"),          "fu"),

    # p-series
    ("p",   Single("ፕ"),          "psa  - 6th order"),
    ("pa",  Single("ፓ"),          "pa"),
    ("pe",  _alt("ፔ", "ፐ"),       "AMBIG: pe/pə"),
    ("pi",  Single("ፒ"),          "pi"),
    ("po",  Single("ፖ"),          "po"),
    ("pu",  Single("ፑ"),          "pu"),

    # v-series
    ("v",   Single("ቭ"),          "vä   - 6th order"),
    ("va",  Single("ቫ"),          "va"),
    ("ve",  _alt("ቬ", "ቨ"),       "AMBIG: ve/və"),
    ("vi",  Single("ቪ"),          "vi"),
    ("vo",  Single("ቮ"),          "vo"),
    ("vu",  Single("ቩ"),          "vu"),
]


# ── Table construction ──────────────────────────────────────────────────────


def build_table(
    rows: Iterable[tuple[str, Entry, str]],
) -> Mapping[str, Entry]:
    """Build a read-only token -> entry table from (latin, entry, note) rows.

    Raises ValueError on a duplicate key or a key that isn't lower-case.
    """
    table: dict[str, Entry] = {}
    for latin, entry, _note in rows:
        if latin in table:
            raise ValueError(f"Duplicate phoneme key: {latin!r}")
        if latin != latin.lower():
            raise ValueError(f"Phoneme keys must be lower-case: {latin!r}")
        table[latin] = entry
    return MappingProxyType(table)


PHONETIC_MAP: Mapping[str, Entry] = build_table(MAPPING)


# ── Convenience accessors ───────────────────────────────────────────────────

def get_ambiguous_keys(table: Mapping[str, Entry] = PHONETIC_MAP) -> set[str]:
    """Return the set of latin keys that produce multiple candidates."""
    return {lat for lat, entry in table.items() if entry.ambiguous}
