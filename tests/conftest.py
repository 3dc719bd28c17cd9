"""
Pytest configuration and shared fixtures for the docsim test suite.

Every test runs with a fresh settings cache and without DOCSIM_* variables
from the developer's environment leaking in.
"""

import os
from pathlib import Path

import pytest

from docsim.core.config import Settings, get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    for key in list(os.environ):
        if key.startswith("DOCSIM_"):
            monkeypatch.delenv(key, raising=False)
    # no stray .env file is picked up from the working directory
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def small_corpus() -> list[str]:
    """Three short documents with known pairwise overlaps (min_length=2)."""
    return ["abcde", "abcxy", "xycde"]


@pytest.fixture
def five_documents() -> list[str]:
    return [
        "the quick brown fox jumps over the lazy dog",
        "the quick brown fox leaps over a lazy dog",
        "lorem ipsum dolor sit amet",
        "a lazy dog sleeps under the brown tree",
        "lorem ipsum dolor sit amet, consectetur",
    ]


@pytest.fixture
def corpus_dir(tmp_path: Path, five_documents) -> Path:
    folder = tmp_path / "dataset"
    folder.mkdir()
    # written out of order; the loader must sort by file name
    for index in reversed(range(len(five_documents))):
        (folder / f"doc{index}.txt").write_text(five_documents[index], encoding="utf-8")
    return folder
