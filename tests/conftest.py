"""Shared pytest fixtures for personal finance tests."""

import pytest

from personal_finance.core.config import reset_config_cache


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Each test reads/writes a temp config.json. Resets the cached config after."""
    path = tmp_path / "config.json"
    monkeypatch.setenv("PF_CONFIG", str(path))
    reset_config_cache()
    yield path
    reset_config_cache()
