"""OpenWeatherMap API client for current conditions."""

from typing import Any, Dict, List, Optional

import httpx
from pydantic import BaseModel, Field, ValidationError

from weatherterm.config import settings
from weatherterm.data.models import City, Unit, Weather, Wind
from weatherterm.data.wind import direction_for
from weatherterm.errors import WeatherUnavailable
from weatherterm.utils.logger import setup_logger
from weatherterm.utils.retry import RetryHandler

logger = setup_logger(__name__)

# https://openweathermap.org/weather-conditions
CONDITION_ICONS: Dict[int, str] = {
    # Group 2xx: Thunderstorm
    200: "⛈️",
    201: "⛈️",
    202: "⛈️",
    210: "🌩️",
    211: "🌩️",
    212: "🌩️",
    221: "🌩️",
    230: "⛈️",
    231: "⛈️",
    232: "⛈️",
    # Group 3xx: Drizzle
    300: "🌦️",
    301: "🌦️",
    302: "🌦️",
    310: "🌦️",
    311: "🌦️",
    312: "🌦️",
    313: "🌦️",
    314: "🌦️",
    321: "🌦️",
    # Group 5xx: Rain
    500: "🌧️",
    501: "🌧️",
    502: "🌧️",
    503: "🌧️",
    504: "🌧️",
    511: "🌨️",  # Freezing rain
    520: "🌧️",
    521: "🌧️",
    522: "🌧️",
    531: "🌧️",
    # Group 6xx: Snow
    600: "❄️",
    601: "❄️",
    602: "❄️",
    611: "🌨️",  # Sleet
    612: "🌨️",
    613: "🌨️",
    615: "🌨️",
    616: "🌨️",
    620: "❄️",
    621: "❄️",
    622: "❄️",
    # Group 7xx: Atmosphere
    701: "🌫️",  # Mist
    711: "💨",  # Smoke
    721: "🌫️",  # Haze
    731: "💨",  # Dust/sand
    741: "🌫️",  # Fog
    751: "💨",  # Sand
    761: "💨",  # Dust
    762: "🌋",  # Volcanic ash
    771: "🌬️",  # Squalls
    781: "🌪️",  # Tornado
    # Group 800: Clear
    800: "☀️",
    # Group 80x: Clouds
    801: "🌤️",  # Few clouds
    802: "⛅",  # Scattered clouds
    803: "🌥️",  # Broken clouds
    804: "☁️",  # Overcast clouds
}


class Condition(BaseModel):
    id: int


class MainReading(BaseModel):
    temp: float


class WindReading(BaseModel):
    speed: float
    deg: float


class CurrentWeatherResponse(BaseModel):
    """Fields of the /weather response that the report uses."""

    weather: List[Condition] = Field(min_length=1)
    main: MainReading
    wind: WindReading


def condition_icon(condition_id: int) -> str:
    """Get the icon for a condition code, empty if unmapped."""
    return CONDITION_ICONS.get(condition_id, "")


def to_weather(payload: Any, unit: Unit) -> Weather:
    """
    Convert a decoded /weather response into a Weather record.

    Raises:
        WeatherUnavailable: If the payload does not have the expected shape
    """
    try:
        resp = CurrentWeatherResponse.model_validate(payload)
    except ValidationError as e:
        raise WeatherUnavailable(f"unable to get weather: unexpected response: {e}") from e

    return Weather(
        temperature=resp.main.temp,
        unit=unit,
        icon=condition_icon(resp.weather[0].id),
        wind=Wind(speed=resp.wind.speed, direction=direction_for(resp.wind.deg)),
    )


class OpenWeatherClient:
    """Client for the OpenWeatherMap current weather API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = None,
        timeout: float = None,
        max_retries: int = None,
    ):
        """
        Initialize OpenWeatherMap client.

        Args:
            api_key: OpenWeatherMap API key
            base_url: API base URL
            timeout: Request timeout in seconds
            max_retries: Extra attempts after a failed request (default: none)
        """
        self.api_key = api_key or settings.api_key
        self.base_url = base_url or settings.openweather_base_url
        self.retry_handler = RetryHandler(
            max_retries=settings.max_retries if max_retries is None else max_retries,
            retry_on=(WeatherUnavailable,),
        )

        if not self.api_key:
            logger.warning("OpenWeatherMap API key not provided. Requests will be rejected.")

        self.client = httpx.Client(
            base_url=self.base_url,
            headers={"Accept": "application/json"},
            timeout=httpx.Timeout(timeout or settings.request_timeout_seconds),
        )

    def _make_request(self, endpoint: str, params: Dict[str, Any]) -> Any:
        """Make one HTTP request and decode its JSON body."""
        try:
            response = self.client.get(endpoint, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"HTTP error for {endpoint}: {e.response.status_code} - {e.response.text[:200]}"
            )
            raise WeatherUnavailable(
                f"unable to get weather: {e.response.status_code}: {e.response.text[:200]}"
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Request error for {endpoint}: {e}")
            raise WeatherUnavailable(f"unable to get weather: {e}") from e
        except ValueError as e:
            logger.error(f"Invalid JSON from {endpoint}: {e}")
            raise WeatherUnavailable(f"unable to get weather: invalid JSON: {e}") from e

    def report(self, city: City, unit: Unit) -> Weather:
        """
        Get current weather for a city.

        Args:
            city: City to report on
            unit: Unit system for temperature

        Returns:
            Weather record

        Raises:
            WeatherUnavailable: On transport, status, decode or shape errors
        """
        params = {"id": city.id, "units": unit.value, "APPID": self.api_key or ""}

        def _request() -> Weather:
            logger.debug(f"Requesting weather for {city.name}, {city.country} ({city.id})")
            return to_weather(self._make_request("/weather", params), unit)

        return self.retry_handler.execute(_request)

    def close(self):
        """Close HTTP client."""
        self.client.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
