"""Tests for glyph expansion (expander.py)."""

import math

import pytest
from amharic_phonetic.errors import UnmappedPhonemeError
from amharic_phonetic.expander import count_candidates, expand, resolve
from amharic_phonetic.mapping import PHONETIC_MAP, Alternatives, Single, build_table


# ── resolve ───────────────────────────────────────────────────────────────────

def test_resolve_known_token():
    assert resolve("ya") == Single("ያ")


def test_resolve_unknown_token():
    with pytest.raises(UnmappedPhonemeError) as exc:
        resolve("1", word="b1")
    assert exc.value.token == "1"
    assert exc.value.word == "b1"


# ── expand ────────────────────────────────────────────────────────────────────

def test_expand_empty():
    assert expand([]) == []


def test_expand_single_token():
    assert expand(["sh"]) == ["ሽ"]


def test_expand_order_outer_partials_inner_alternatives():
    assert expand(["ge", "be", "ya"]) == ["ጌቤያ", "ጌበያ", "ገቤያ", "ገበያ"]


def test_expand_first_token_ambiguous():
    assert expand(["te"]) == ["ቴ", "ተ", "ጤ", "ጠ"]


def test_expand_fails_whole_request_on_unmapped():
    with pytest.raises(UnmappedPhonemeError):
        expand(["ge", "zz", "ya"])


def test_expand_custom_table():
    table = build_table([
        ("a", Alternatives(("1", "2")), ""),
        ("b", Single("x"), ""),
    ])
    assert expand(["a", "b", "a"], table) == ["1x1", "1x2", "2x1", "2x2"]


def test_expand_is_deterministic():
    tokens = ["te", "che", "ge"]
    assert expand(tokens) == expand(tokens)


@pytest.mark.parametrize("tokens", [
    ["ge", "be", "ya"],
    ["te", "te"],
    ["ch", "a", "c"],
    ["se", "la", "m"],
])
def test_expand_size_and_length(tokens):
    out = expand(tokens)
    expected = math.prod(len(PHONETIC_MAP[t].glyphs) for t in tokens)
    assert len(out) == expected
    assert all(len(c) == len(tokens) for c in out)
    assert len(set(out)) == len(out)


# ── count_candidates ──────────────────────────────────────────────────────────

def test_count_candidates():
    assert count_candidates(["ge", "te"]) == 8
    assert count_candidates(["te", "te", "te"]) == 64


def test_count_candidates_empty():
    assert count_candidates([]) == 0


def test_count_candidates_unmapped():
    with pytest.raises(UnmappedPhonemeError):
        count_candidates(["ge", "?"])
