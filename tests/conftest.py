import pytest

from custom_log_levels.app import create_app
from custom_log_levels.config import Config
from custom_log_levels.models import LogRecord
from custom_log_levels.registry import LevelRegistry


@pytest.fixture
def registry():
    return LevelRegistry()


@pytest.fixture
def mixed_records():
    return [
        LogRecord(message="db down", level="ERROR"),
        LogRecord(message="user logged in", level="INFO"),
        LogRecord(message="cache miss", level="DEBUG"),
        LogRecord(message="slow query", level="WARN"),
    ]


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def app(config):
    """Create a Flask test app."""
    application = create_app(config)
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()
