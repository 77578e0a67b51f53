"""Shared test fixtures."""

import logging
from pathlib import Path

import pytest


@pytest.fixture
def write_config(tmp_path):
    """Write an amharic_phonetic.toml into tmp_path and return its path."""

    def _write(body: str, name: str = "amharic_phonetic.toml") -> Path:
        p = tmp_path / name
        p.write_text(body, encoding="utf-8")
        return p

    return _write


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch) -> Path:
    """Run in an empty directory so no amharic_phonetic.toml is auto-detected."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers the CLI attaches so they don't outlive captured streams."""
    yield
    logger = logging.getLogger("amharic_phonetic")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
