"""Test fixtures for the Payment Service."""

import pytest
from fastapi.testclient import TestClient

from payment_service.app.main import create_app
from payment_service.app.schemas.service_config import ServiceConfiguration


@pytest.fixture
def service_config() -> ServiceConfiguration:
    """Create a configuration for the Payments service."""
    return ServiceConfiguration(
        service_name="Payments",
        build_number=42,
        build_date="2026-10-01",
        app_property_list=["cards", "wallets"],
        app_property_map={"region": "eu-west-1"},
    )


@pytest.fixture
def client(service_config: ServiceConfiguration) -> TestClient:
    """Client for an app wired with ``service_config``."""
    app = create_app(service_config=service_config)
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def unwired_client() -> TestClient:
    """Client for an app whose configuration is not available."""
    app = create_app(wire_config=False)
    return TestClient(app, raise_server_exceptions=False)
