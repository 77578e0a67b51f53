#!/usr/bin/env python3
"""
Latin-to-Amharic phonetic translator CLI.

Loads settings from amharic_phonetic.toml when present, or override with flags:

    python -m amharic_phonetic.cli gebeya
    python -m amharic_phonetic.cli gebeya selam --segment
    python -m amharic_phonetic.cli tetete --max-candidates 100
    python -m amharic_phonetic.cli --table
"""

import argparse
import logging
import sys
from pathlib import Path

from amharic_phonetic.errors import TranslationError
from amharic_phonetic.mapping import MAPPING
from amharic_phonetic.translator import DEFAULT_CONFIG, PhonemeTranslator


def _find_default_config() -> Path | None:
    """Look for amharic_phonetic.toml in CWD."""
    candidate = Path(DEFAULT_CONFIG)
    if candidate.exists():
        return candidate
    return None


def _setup_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root = logging.getLogger("amharic_phonetic")
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.propagate = False


def _print_table() -> None:
    print("=== Amharic Phonetic Table ===\n")
    for lat, entry, note in MAPPING:
        candidates = " / ".join(entry.glyphs)
        ambig = " [AMBIG]" if entry.ambiguous else ""
        print(f"  {lat:>4s} → {candidates}{ambig}  ({note})")
    print(f"\nTotal entries: {len(MAPPING)}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Translate Latin-spelled Amharic words into Amharic script"
    )
    parser.add_argument(
        "words",
        nargs="*",
        help="Word(s) to translate",
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help=f"Path to TOML config file (default: auto-detect {DEFAULT_CONFIG})",
    )
    parser.add_argument(
        "--segment",
        action="store_true",
        help="Also print the phoneme tokens of each word",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject characters outside a-z (overrides config)",
    )
    parser.add_argument(
        "--max-candidates",
        type=int,
        metavar="N",
        help="Refuse words that expand to more than N candidates (overrides config)",
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="Print the phonetic mapping table",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Debug logging to stderr",
    )
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)

    if args.table:
        _print_table()
        if not args.words:
            return 0

    if not args.words:
        parser.error("no words given")
    if args.max_candidates is not None and args.max_candidates < 0:
        parser.error("--max-candidates must be >= 0")

    # ── Build translator ─────────────────────────────────────────────────

    config_path = Path(args.config) if args.config else _find_default_config()
    if config_path is not None:
        try:
            translator = PhonemeTranslator.from_config(config_path)
        except (FileNotFoundError, ValueError) as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1
    else:
        translator = PhonemeTranslator()

    if args.strict:
        translator.strict = True
    if args.max_candidates is not None:
        translator.max_candidates = args.max_candidates

    # ── Translate ────────────────────────────────────────────────────────

    status = 0
    for word in args.words:
        try:
            if args.segment:
                print(f"{word}: {' - '.join(translator.segment(word))}")
            candidates = translator.translate(word)
        except TranslationError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            status = 1
            continue

        print(f"═══ '{word}' ({len(candidates)} candidate(s)) ═══")
        for c in candidates:
            print(f"  {c}")
        print()

    return status


if __name__ == "__main__":
    sys.exit(main())
