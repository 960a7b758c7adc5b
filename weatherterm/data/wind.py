"""Compass labels for wind directions given in degrees."""

from dataclasses import dataclass
from typing import Sequence, Tuple

# Half-width of the window around each compass point
WIND_DEGREE_WINDOW = 11.25


@dataclass(frozen=True)
class WindDirection:
    """Compass point centered on a degree."""

    degree: float
    label: str


# North appears twice so that both sides of the 0/360 wrap resolve to it.
WIND_DIRECTIONS: Tuple[WindDirection, ...] = (
    WindDirection(0.0, "N"),
    WindDirection(360.0, "N"),
    WindDirection(22.5, "NNE"),
    WindDirection(45.0, "NE"),
    WindDirection(67.5, "ENE"),
    WindDirection(90.0, "E"),
    WindDirection(112.5, "ESE"),
    WindDirection(135.0, "SE"),
    WindDirection(157.5, "SSE"),
    WindDirection(180.0, "S"),
    WindDirection(202.5, "SSW"),
    WindDirection(225.0, "SW"),
    WindDirection(247.5, "WSW"),
    WindDirection(270.0, "W"),
    WindDirection(292.5, "WNW"),
    WindDirection(315.0, "NW"),
    WindDirection(337.5, "NNW"),
)


def is_within_range(degree: float, center: float) -> bool:
    """
    Check whether a wind degree falls in the window of a compass point.

    The window below a center is closed at its lower end, so a degree sitting
    exactly between two points belongs to the clockwise one.

    Args:
        degree: Wind direction in degrees
        center: Degree the compass point is centered on

    Returns:
        True if the degree belongs to the compass point
    """
    upper = center <= degree < center + WIND_DEGREE_WINDOW
    lower = center - WIND_DEGREE_WINDOW <= degree <= center

    if center == 0.0:
        return upper
    if center == 360.0:
        return lower
    return upper or lower


def direction_for(
    degree: float, directions: Sequence[WindDirection] = WIND_DIRECTIONS
) -> str:
    """
    Get the compass label for a wind degree.

    Args:
        degree: Wind direction in degrees, expected in [0, 360]
        directions: Ordered table to search

    Returns:
        Compass label, or an empty string if no entry matches
    """
    for direction in directions:
        if is_within_range(degree, direction.degree):
            return direction.label
    return ""
