"""Shared fixtures for the linguatree test suite."""

import pytest

from linguatree.configuration import Settings


@pytest.fixture
def isolated_settings(monkeypatch, tmp_path):
    """Settings built from a clean environment rooted at tmp_path."""
    for name in (
        "LINGUATREE_LOCALES_DIR",
        "LINGUATREE_FALLBACK_LOCALE",
        "LINGUATREE_DEFAULT_LOCALE",
        "LINGUATREE_BACKUP_SUFFIX",
        "PREFIX",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return Settings()
