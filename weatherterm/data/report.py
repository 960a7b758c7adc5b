"""Report formatting."""

import math
from decimal import Decimal

from weatherterm.data.models import THERMOMETER_ICON, WIND_ICON, WIND_SPEED_UNIT, Weather

# Exponent from which readings switch to scientific notation
EXPONENT_THRESHOLD = 6


def format_number(value: float) -> str:
    """
    Format a reading with the fewest digits that still round-trip.

    Fixed notation is used for decimal exponents in [-4, 6), scientific
    notation otherwise (21.5, 20, 0.0001, 1.234567e+06).
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    _, digits, exponent = Decimal(repr(value)).normalize().as_tuple()
    significant = len(digits)
    magnitude = significant + exponent - 1

    if magnitude < -4 or magnitude >= EXPONENT_THRESHOLD:
        return f"{value:.{significant - 1}e}"
    return f"{value:.{max(significant - 1 - magnitude, 0)}f}"


def format_report(weather: Weather) -> str:
    """
    Render a weather record as a single report line.

    Args:
        weather: Current conditions

    Returns:
        Line such as ``🌡 21.5°C ☀️   💨 3.2m/s NNE``
    """
    temperature = (
        f"{THERMOMETER_ICON} {format_number(weather.temperature)}{weather.unit_icon} "
        f"{weather.icon}"
    )
    wind = (
        f"{WIND_ICON} {format_number(weather.wind.speed)}{WIND_SPEED_UNIT} "
        f"{weather.wind.direction}"
    )
    return f"{temperature}   {wind}"
