"""Exceptions raised by segmentation and translation."""

from __future__ import annotations


class TranslationError(ValueError):
    """Base class for every failure of a translation request."""


class UnmappedPhonemeError(TranslationError):
    """A segmented token has no entry in the phonetic mapping table.

    The whole request fails: a candidate with a hole in it would be wrong
    output, not partial output.
    """

    def __init__(self, token: str, word: str | None = None):
        self.token = token
        self.word = word
        msg = f"No Amharic mapping for phoneme {token!r}"
        if word is not None:
            msg += f" (in {word!r})"
        super().__init__(msg)


class InvalidInputError(TranslationError):
    """Input contains characters outside the Latin letters a-z."""

    def __init__(self, word: str, invalid: list[tuple[int, str]]):
        self.word = word
        self.invalid = invalid  # (position, char) after normalization
        shown = ", ".join(f"{ch!r}@{pos}" for pos, ch in invalid)
        super().__init__(f"Invalid characters in {word!r}: {shown}")


class CandidateLimitError(TranslationError):
    """Expansion would produce more candidates than the configured ceiling."""

    def __init__(self, word: str, count: int, limit: int):
        self.word = word
        self.count = count
        self.limit = limit
        super().__init__(
            f"{word!r} expands to {count:,} candidates (limit {limit:,})"
        )
