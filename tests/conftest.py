"""Shared pytest fixtures for all tests."""

from datetime import datetime, timezone

import pytest

from cli.config import Config
from fakes import FakeSigner, FakeStorage, RecordingNotifier


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def signer():
    return FakeSigner()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def fixed_clock():
    """Clock stuck at 2024-01-31 23:59:59 UTC."""
    return lambda: datetime(2024, 1, 31, 23, 59, 59, tzinfo=timezone.utc)


@pytest.fixture
def temp_config_dir(tmp_path):
    """
    Create temporary config directory.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to temporary .redcloud directory
    """
    config_dir = tmp_path / '.redcloud'
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def temp_config(temp_config_dir, monkeypatch):
    """
    Create temporary config instance pointing at a test server.

    Args:
        temp_config_dir: Temporary config directory fixture

    Returns:
        Config instance with temp config file
    """
    monkeypatch.delenv('REDCLOUD_AUTH_TOKEN', raising=False)
    config = Config(temp_config_dir / 'share.json')
    config.data['server_url'] = 'https://example.com'
    return config
