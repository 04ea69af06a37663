"""Shared fixtures: workspace directories on disk and an in-memory terminal."""

import os
from datetime import datetime, timezone
from pathlib import Path

import pytest

from loadws.data.models import Status, WorkspaceRecord


class FakeTerminal:
    """Replays a fixed key sequence and records every render."""

    def __init__(self, keys, render_error=None):
        self.keys = list(keys)
        self.renders = []
        self.entered = False
        self.exited = False
        self.render_error = render_error

    def __enter__(self):
        self.entered = True
        return self

    def __exit__(self, exc_type, exc, tb):
        self.exited = True

    def render(self, rows, highlighted):
        if self.render_error is not None:
            raise self.render_error
        self.renders.append((list(rows), highlighted))

    def read_key(self):
        if not self.keys:
            raise AssertionError("FakeTerminal ran out of keys")
        return self.keys.pop(0)


@pytest.fixture
def fake_terminal():
    """Factory building a FakeTerminal from a sequence of Key values."""
    def _make(*keys, render_error=None):
        return FakeTerminal(keys, render_error=render_error)
    return _make


@pytest.fixture
def make_workspace(tmp_path):
    """Create ``tmp_path/<name>`` with its mtime set to ``mtime`` seconds."""
    def _make(name, mtime=1_700_000_000):
        path = tmp_path / name
        path.mkdir()
        os.utime(path, (mtime, mtime))
        return path
    return _make


@pytest.fixture
def make_record():
    """Build a record directly, without touching the filesystem."""
    def _make(story, modified, description=""):
        return WorkspaceRecord(
            story=story,
            description=description,
            status=Status.UNKNOWN,
            modified_at=datetime.fromtimestamp(modified, tz=timezone.utc),
            path=Path("/ws") / story,
        )
    return _make
