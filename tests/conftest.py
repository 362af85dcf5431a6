"""Pytest configuration and shared fixtures."""

import os
from typing import Iterator

import pytest

from editor_uri.config import reset_config


@pytest.fixture(autouse=True)
def reset_config_fixture() -> Iterator[None]:
    """Reset config singleton between tests for isolation."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def set_env_vars():
    """Fixture to temporarily set environment variables."""

    def _set_env_vars(**kwargs: str) -> None:
        for key, value in kwargs.items():
            os.environ[key] = value

    yield _set_env_vars

    # Cleanup: remove all EDITOR_URI_ env vars
    keys_to_remove = [key for key in os.environ if key.startswith("EDITOR_URI_")]
    for key in keys_to_remove:
        del os.environ[key]
