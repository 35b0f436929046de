"""Shared fixtures for the equivalence test suite."""

import pytest

from equivalence import IdentityHasher, ValueHasher


@pytest.fixture
def identity_hasher():
    """A fresh identity hasher."""
    return IdentityHasher()


@pytest.fixture
def value_hasher():
    """A value hasher without registered overrides."""
    return ValueHasher()


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep tests away from configuration files in the environment and cwd."""
    monkeypatch.delenv("EQUIVALENCE_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
