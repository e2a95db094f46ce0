"""Shared fixtures: deterministic ids and clock, and a scratch store."""

import itertools

import pytest

from stackman import ids
from stackman.store import Store


@pytest.fixture
def fixed_ids(monkeypatch):
    """Make new ids "id-1", "id-2"... and the clock tick 1000ms per call."""
    counter = itertools.count(1)
    clock = itertools.count(1_700_000_000_000, 1000)
    monkeypatch.setattr(ids, "new_id", lambda: f"id-{next(counter)}")
    monkeypatch.setattr(ids, "now_ms", lambda: next(clock))


@pytest.fixture
def store(tmp_path):
    """An empty store in a temp directory."""
    return Store(tmp_path / "stackman.db")
