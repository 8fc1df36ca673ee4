"""
Fixtures for FastAPI endpoint tests.

The module-level router in routes_api reads files from the configured
paths; tests swap it for one backed by the in-memory Baltic provider.
"""

import pytest
from fastapi.testclient import TestClient

from src.airport_router.application import FindRoutes
from src.fastapi.routes_api import app, get_router


@pytest.fixture
def baltic_router(baltic_provider) -> FindRoutes:
    return FindRoutes(data_provider=baltic_provider, proximity_radius_km=110, default_max_hops=5)


@pytest.fixture
def client(baltic_router: FindRoutes):
    app.dependency_overrides[get_router] = lambda: baltic_router
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
