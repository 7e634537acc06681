import pytest

from src.geolocator.data.gazetteer_repository import get_gazetteer
from src.geolocator.services.geocoding import reset_services


@pytest.fixture(autouse=True)
def clear_service_cache():
    reset_services()
    yield
    reset_services()


@pytest.fixture
def gazetteer():
    return get_gazetteer()
