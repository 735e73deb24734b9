"""Pytest configuration and fixtures."""

import pytest

from deepmock import MockSettings, create_mock, set_settings
from tests.shapes import UserService


@pytest.fixture(autouse=True)
def default_settings():
    """Pin engine settings so local config files and env vars don't leak in."""
    set_settings(MockSettings(max_depth=10, log_calls=False))
    yield
    set_settings(None)


@pytest.fixture
def mock_user_service():
    """Create a deep mock of UserService."""
    return create_mock(UserService)


@pytest.fixture
def sample_user():
    """Create a sample user record."""
    return {"id": "1", "name": "John", "email": "john@example.com"}
