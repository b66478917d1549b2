import pytest
from fastapi.testclient import TestClient

from smartcampus.config import Config
from smartcampus.main import app_factory


@pytest.fixture
def app():
    return app_factory(Config())


@pytest.fixture
def client(app):
    with TestClient(app) as tc:
        yield tc


@pytest.fixture
def anyio_backend():
    return "asyncio"
