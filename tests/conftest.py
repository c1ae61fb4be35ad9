import pytest
from fastapi.testclient import TestClient

from travel_agent.api.endpoints import get_travel_service
from travel_agent.api.main import app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def use_service(client):
    def _use(service):
        app.dependency_overrides[get_travel_service] = lambda: service
        return service

    return _use
