"""Shared fixtures for all tests."""

import pytest

from react_extractor.config import Config
from react_extractor.logging.logger import EventLogger


@pytest.fixture
def tmp_config(tmp_path):
    """Config pointing to a temp directory."""
    config = Config(base_dir=tmp_path / ".react-extractor")
    config.ensure_dirs()
    return config


@pytest.fixture
def event_logger(tmp_config):
    """EventLogger writing to temp dir."""
    return EventLogger(tmp_config.log_dir)
