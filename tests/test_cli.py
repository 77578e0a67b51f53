"""Tests for the command-line interface (cli.py)."""

import logging

import pytest
from amharic_phonetic.cli import main


def test_translate_word(isolated_cwd, capsys):
    assert main(["gebeya"]) == 0
    out = capsys.readouterr().out
    assert "'gebeya' (4 candidate(s))" in out
    assert "ገበያ" in out


def test_segment_flag(isolated_cwd, capsys):
    assert main(["gebeya", "--segment"]) == 0
    assert "gebeya: ge - be - ya" in capsys.readouterr().out


def test_multiple_words(isolated_cwd, capsys):
    assert main(["sh", "selam"]) == 0
    out = capsys.readouterr().out
    assert "ሽ" in out
    assert "ሰላም" in out


def test_unmapped_reports_error(isolated_cwd, capsys):
    assert main(["b1", "sh"]) == 1
    captured = capsys.readouterr()
    assert "ERROR" in captured.err
    assert "ሽ" in captured.out


def test_strict_flag(isolated_cwd, capsys):
    assert main(["b1", "--strict"]) == 1
    assert "Invalid characters" in capsys.readouterr().err


def test_max_candidates_flag(isolated_cwd, capsys):
    assert main(["tete", "--max-candidates", "4"]) == 1
    assert "limit 4" in capsys.readouterr().err


def test_table(isolated_cwd, capsys):
    assert main(["--table"]) == 0
    out = capsys.readouterr().out
    assert "Total entries" in out
    assert "[AMBIG]" in out


def test_no_words_is_usage_error(isolated_cwd):
    with pytest.raises(SystemExit):
        main([])


def test_config_autodetect(isolated_cwd, capsys):
    (isolated_cwd / "amharic_phonetic.toml").write_text(
        "[translator]\nmax_candidates = 2\n", encoding="utf-8",
    )
    assert main(["gete"]) == 1
    assert "limit 2" in capsys.readouterr().err


def test_flag_overrides_config(isolated_cwd, capsys):
    (isolated_cwd / "amharic_phonetic.toml").write_text(
        "[translator]\nmax_candidates = 2\n", encoding="utf-8",
    )
    assert main(["gete", "--max-candidates", "0"]) == 0


def test_missing_config(isolated_cwd, capsys):
    assert main(["gete", "--config", "missing.toml"]) == 1
    assert "Config not found" in capsys.readouterr().err


def test_log_records_not_duplicated_on_root(isolated_cwd, capsys):
    main(["tete", "--max-candidates", "4"])
    assert logging.getLogger("amharic_phonetic").propagate is False
    err = capsys.readouterr().err
    assert err.count("Refusing 'tete'") == 1
