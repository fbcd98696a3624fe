import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.settings import Settings


@pytest.fixture
def test_client(settings: Settings) -> TestClient:
    with TestClient(create_app(settings), raise_server_exceptions=True) as client:
        yield client
