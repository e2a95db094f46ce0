"""Shared fixtures for CLI tests."""

import asyncio
from argparse import Namespace

import pytest

from stackman import config
from stackman.store import Store
from stackman.sync import load_workspace


@pytest.fixture
def home(tmp_path):
    """An empty data directory; the first command seeds it."""
    return tmp_path / "home"


@pytest.fixture
def make_args(home):
    """Build handler args the way the parser would."""

    def make(**kwargs):
        values = {"home": str(home), "json": False, "verbose": False}
        values.update(kwargs)
        return Namespace(**values)

    return make


@pytest.fixture
def stored(home):
    """Read the stored workspace back from disk."""

    def read():
        return asyncio.run(load_workspace(Store(config.db_path(str(home)))))

    return read
