"""Pytest configuration and fixtures."""
import pytest
from fastapi.testclient import TestClient

from config import Settings
from fixtures import seed_store
from schemas import OfficeAddress, ProviderCreate
from server import create_app
from storage import ProviderStore


def build_provider(**overrides) -> ProviderCreate:
    """Minimal valid provider; override any field by keyword."""
    data = {
        "name": "Dr. Test Provider",
        "title": "MD",
        "specialty": "Primary Care",
        "facility_name": "Test Clinic",
        "rating": 4.0,
        "review_count": 10,
        "about": "General practitioner.",
        "office_address": OfficeAddress(street="1 Main St", city="Springfield", state="IL", zip_code="62701"),
        "office_phone": "(217) 555-0100",
    }
    data.update(overrides)
    return ProviderCreate(**data)


@pytest.fixture
def make_provider():
    return build_provider


@pytest.fixture
def empty_store():
    """Fresh store with nothing in it."""
    return ProviderStore()


@pytest.fixture
def store():
    """Fresh store loaded with the seed dataset."""
    return seed_store(ProviderStore())


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def client(store, settings):
    """Test client bound to a seeded store."""
    return TestClient(create_app(store=store, settings=settings), raise_server_exceptions=False)
