import pytest
from starlette.testclient import TestClient

from clockcheck.core.app import create_app
from clockcheck.core.config import AppSettings
from clockcheck.core.logging_config import setup_logging


def _settings(**overrides):
    """AppSettings isolated from any local .env file and pinned to test defaults."""
    defaults = dict(
        app_name="TestApp", version="0.0.1-test", debug=False, auth_token=None,
        metrics_enabled=True, log_level="INFO", log_file=None,
    )
    defaults.update(overrides)
    return AppSettings(_env_file=None, **defaults)


@pytest.fixture
def make_settings():
    return _settings


@pytest.fixture
def make_client():
    """Build a TestClient around a fresh app; keyword args override settings."""
    def _make(clock=None, **overrides):
        kwargs = {"clock": clock} if clock else {}
        app = create_app(_settings(**overrides), **kwargs)
        return TestClient(app, raise_server_exceptions=False)
    return _make


@pytest.fixture
def client(make_client):
    return make_client()


@pytest.fixture
def auth_client(make_client):
    return make_client(auth_token="1234567890")


@pytest.fixture
def reset_logging():
    """Put logging back to INFO on stderr once a test has reconfigured it."""
    yield
    setup_logging(level="INFO")
