import pytest
from fastapi.testclient import TestClient

from risk_registry_api.app.core.store import RiskStore
from risk_registry_api.app.main import create_app


@pytest.fixture
def store() -> RiskStore:
    return RiskStore()


@pytest.fixture
def client(store: RiskStore):
    with TestClient(create_app(store)) as test_client:
        yield test_client
