"""Exceptions raised by weatherterm.

Every error is terminal for the process: the CLI logs it and exits non-zero.
"""


class WeatherTermError(Exception):
    """Base class for weatherterm errors."""


class InvalidUnit(WeatherTermError, ValueError):
    """Unit is neither metric nor imperial."""

    def __init__(self, unit: str):
        self.unit = unit
        super().__init__(f"invalid unit valid units are metric and imperial: {unit}")


class CityNotFound(WeatherTermError, LookupError):
    """No city in the dataset matches the country code and city name."""

    def __init__(self, country_code: str, city_name: str):
        self.country_code = country_code
        self.city_name = city_name
        super().__init__(
            f"city not found using country code and city name: "
            f"country code '{country_code}' and city name '{city_name}' not found"
        )


class WeatherUnavailable(WeatherTermError):
    """The weather provider could not be reached or returned an unusable response."""


class WriteFailure(WeatherTermError, OSError):
    """The report could not be written to its sink."""
