"""Pytest configuration and fixtures."""

import json

import pytest

from weatherterm.data.cities import CityDirectory
from weatherterm.data.models import City, Unit, Weather, Wind


@pytest.fixture
def sample_city():
    """Sample city for testing."""
    return City(id=5128581, name="New York", country="US")


@pytest.fixture
def city_records():
    """Small city dataset in OpenWeatherMap city list format."""
    return [
        {"id": 5128581, "name": "New York", "country": "US"},
        {"id": 2643743, "name": "London", "country": "GB"},
        {"id": 6058560, "name": "London", "country": "CA"},
        {"id": 4250542, "name": "Springfield", "country": "US"},
        {"id": 4409896, "name": "Springfield", "country": "US"},
    ]


@pytest.fixture
def city_directory(city_records):
    """City directory built from the sample dataset."""
    return CityDirectory.from_records(city_records)


@pytest.fixture
def city_list_file(tmp_path, city_records):
    """Sample dataset written to a JSON file, with the extra fields the real list carries."""
    records = [
        {**record, "state": "", "coord": {"lon": 0.0, "lat": 0.0}}
        for record in city_records
    ]
    path = tmp_path / "city.list.json"
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


@pytest.fixture
def sample_weather():
    """Sample metric weather record."""
    return Weather(
        temperature=21.5,
        unit=Unit.METRIC,
        icon="☀️",
        wind=Wind(speed=3.2, direction="NNE"),
    )


@pytest.fixture
def openweather_payload():
    """Sample /weather response body."""
    return {
        "coord": {"lon": -74.006, "lat": 40.7143},
        "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
        "main": {"temp": 21.5, "feels_like": 21.0, "humidity": 40},
        "wind": {"speed": 3.2, "deg": 22.5},
        "id": 5128581,
        "name": "New York",
        "cod": 200,
    }
