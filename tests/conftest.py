"""Shared pytest fixtures for the xssan test suite.

Provides reusable fixtures for:
- Settings with small, test-friendly limits
- Sanitize service
- Flask app and test client
"""
import pytest

from xssan import create_app
from xssan.config import Settings
from xssan.services.sanitize_service import SanitizeService


@pytest.fixture
def settings():
    """Settings with small limits so size checks are cheap to trigger."""
    return Settings(
        LOG_LEVEL="WARNING",
        LOG_FORMAT="console",
        DEFAULT_STRATEGY="strip_tags",
        MAX_INPUT_LENGTH=1000,
        MAX_BATCH_SIZE=5,
        CACHE_ENABLED=True,
        CACHE_TTL_SECONDS=300,
        CACHE_MAX_SIZE=16,
    )


@pytest.fixture
def service(settings):
    """Create a SanitizeService with the test settings."""
    return SanitizeService(settings)


@pytest.fixture
def app(settings):
    """Create a Flask application instance for testing."""
    app = create_app(settings)
    app.config["TESTING"] = True
    yield app


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()
