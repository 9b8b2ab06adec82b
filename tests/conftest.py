"""Shared fixtures for streamtint tests."""

import pytest

from streamtint import RecordingSink, StreamFormatter


@pytest.fixture
def sink():
    """A sink that records every rendered token."""
    return RecordingSink()


@pytest.fixture
def formatter(sink):
    """A fresh formatter writing to the recording sink."""
    return StreamFormatter(sink)


@pytest.fixture
def tmp_config_dir(tmp_path):
    """Provide a temporary config directory."""
    config_dir = tmp_path / "config" / "streamtint"
    config_dir.mkdir(parents=True)
    return config_dir
