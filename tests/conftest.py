"""
Pytest Configuration and Fixtures

Shared fixtures for the booking core tests.  Services run against the
in-memory repositories unless a test asks for the JSON ones, and the
clock is pinned so booking timestamps are predictable.
"""

import json
from datetime import datetime

import pytest

from home_booking.app.core.clock import FixedClock
from home_booking.app.main import build_app
from home_booking.app.repositories.json_file import (
    JsonCustomerRepository,
    JsonPaymentRepository,
    JsonServiceRepository,
)
from home_booking.app.repositories.memory import (
    InMemoryCustomerRepository,
    InMemoryPaymentRepository,
    InMemoryServiceRepository,
)
from home_booking.app.repositories.work_configuration import WorkConfiguration
from home_booking.app.schemas.customer import Customer


NOW = datetime(2025, 6, 15, 10, 30, 0)


# =============================================================================
# Clock / Catalog Fixtures
# =============================================================================

@pytest.fixture
def clock():
    """Clock frozen at 2025-06-15 10:30:00."""
    return FixedClock(NOW)


@pytest.fixture
def catalog(tmp_path):
    """Catalog falling back to the built-in works."""
    return WorkConfiguration(str(tmp_path / "no_such_catalog.json"))


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON document into tmp_path and return its path."""
    def _write(name, content):
        path = tmp_path / name
        path.write_text(json.dumps(content), encoding="utf-8")
        return str(path)
    return _write


# =============================================================================
# Repository Fixtures
# =============================================================================

@pytest.fixture(params=["memory", "json"])
def repos(request, tmp_path):
    """(customer, service, payment) repositories of each implementation."""
    if request.param == "memory":
        return (
            InMemoryCustomerRepository(),
            InMemoryServiceRepository(),
            InMemoryPaymentRepository(),
        )
    return (
        JsonCustomerRepository(str(tmp_path / "customers.json")),
        JsonServiceRepository(str(tmp_path / "services.json")),
        JsonPaymentRepository(str(tmp_path / "payments.json")),
    )


@pytest.fixture
def customer_repo(repos):
    return repos[0]


@pytest.fixture
def service_repo(repos):
    return repos[1]


@pytest.fixture
def payment_repo(repos):
    return repos[2]


# =============================================================================
# Application Fixtures
# =============================================================================

@pytest.fixture
def app(customer_repo, service_repo, payment_repo, catalog, clock):
    return build_app(customer_repo, service_repo, payment_repo, catalog, clock=clock)


@pytest.fixture
def customer_data():
    return {
        "id": "cust001",
        "password": "pass123",
        "name": "Test User",
        "gender": "M",
        "locality": "Benz Circle",
        "address": "123 Test St",
    }


@pytest.fixture
def customer(customer_data):
    return Customer(**customer_data)


@pytest.fixture
def immediate_service(app, customer):
    """A Basic plan immediate request for Window Cleaning."""
    return app.booking_service.create_immediate(
        "Basic", customer.locality, customer.id, customer.gender,
        customer.address, ["Window Cleaning"], "NP",
    )
