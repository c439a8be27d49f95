import pytest

from log_api.app import create_app
from log_api.config import Config
from log_api.store import LogStore


@pytest.fixture
def sample_log():
    return {
        "level": "info",
        "message": "Payment of $50 completed",
        "source": "payment-service",
        "transaction": {"id": "txn_abc1234", "currency": "USD"},
    }


@pytest.fixture
def store():
    return LogStore()


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def app(config, store):
    """Create a Flask test app backed by a fresh store."""
    application = create_app(config=config, store=store)
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()
