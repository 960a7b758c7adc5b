"""Data models for cities, units and weather."""

from dataclasses import dataclass
from enum import Enum

from weatherterm.errors import InvalidUnit

# Display constants
THERMOMETER_ICON = "🌡"
WIND_ICON = "💨"
CELSIUS_ICON = "°C"
FAHRENHEIT_ICON = "°F"
WIND_SPEED_UNIT = "m/s"

FALLBACK_MESSAGE = "⚠️ Unable to Get Weather"


class Unit(str, Enum):
    """Unit system understood by the weather provider."""

    METRIC = "metric"
    IMPERIAL = "imperial"


def get_unit(name: str) -> Unit:
    """Get unit by name, raising InvalidUnit for anything else."""
    for unit in Unit:
        if unit.value == name:
            return unit
    raise InvalidUnit(name)


@dataclass(frozen=True)
class City:
    """City metadata."""

    id: int
    name: str
    country: str


@dataclass(frozen=True)
class Wind:
    """Wind speed and compass direction."""

    speed: float
    direction: str


@dataclass(frozen=True)
class Weather:
    """Current conditions for one report cycle."""

    temperature: float
    unit: Unit
    icon: str
    wind: Wind

    @property
    def unit_icon(self) -> str:
        """Temperature unit icon, empty for an unknown unit."""
        if self.unit == Unit.METRIC:
            return CELSIUS_ICON
        if self.unit == Unit.IMPERIAL:
            return FAHRENHEIT_ICON
        return ""
