import pytest

from suistone import create_app
from suistone.config import TestConfig
from suistone.utils import daily_limits
from suistone.utils.store import StoreHandle, StoreStatus


@pytest.fixture
def app():
    return create_app(TestConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def runner(app):
    return app.test_cli_runner()


@pytest.fixture
def app_ctx(app):
    with app.app_context():
        yield app


@pytest.fixture
def offline(monkeypatch):
    """Make every store ping fail"""
    monkeypatch.setattr(StoreHandle, 'ping', lambda self: StoreStatus.DISCONNECTED)


@pytest.fixture
def freeze_today(monkeypatch):
    def freeze(day):
        monkeypatch.setattr(daily_limits, 'get_today', lambda: day)
        return day
    return freeze
