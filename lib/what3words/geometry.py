"""
what3words geometry value types

Coordinate, Circle, BoundingBox and Polygon are immutable value objects used to
build query parameters for the what3words API. Each shape serializes to the
comma-separated text the API expects, dood!
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

POLYGON_MIN_POINTS = 3
POLYGON_MAX_POINTS = 25  # Upper limit accepted by the API


def formatNumber(value: float) -> str:
    """Render number using shortest round-trip float representation."""
    return str(float(value))


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Latitude/longitude pair, dood!"""

    latitude: float
    longitude: float

    def serialize(self) -> str:
        """Return coordinate as ``"<latitude>,<longitude>"``."""
        return f"{formatNumber(self.latitude)},{formatNumber(self.longitude)}"

    def __str__(self) -> str:
        return self.serialize()


@dataclass(frozen=True, slots=True)
class Circle:
    """Circle defined by centerpoint and radius in kilometers."""

    centerpoint: Coordinate
    radius: float

    def serialize(self) -> str:
        """Return circle as ``"<latitude>,<longitude>,<radius>"``."""
        return f"{self.centerpoint.serialize()},{formatNumber(self.radius)}"

    def __str__(self) -> str:
        return self.serialize()


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Rectangle defined by its southwestern and northeastern corners, dood!"""

    southWest: Coordinate
    northEast: Coordinate

    def serialize(self) -> str:
        """Return box as ``"<sw.lat>,<sw.lng>,<ne.lat>,<ne.lng>"``."""
        return f"{self.southWest.serialize()},{self.northEast.serialize()}"

    def __str__(self) -> str:
        return self.serialize()


@dataclass(frozen=True, slots=True)
class Polygon:
    """Closed polygon defined by 3 to 25 coordinates.

    Points are stored without the closing point; serialization repeats the
    first coordinate at the end to close the ring, as the API requires.

    Example:
        >>> polygon = Polygon.fromPoints([Coordinate(51.0, -3.0), Coordinate(52.0, -3.0), Coordinate(52.0, -2.0)])
        >>> polygon.serialize()
        '51.0,-3.0,52.0,-3.0,52.0,-2.0,51.0,-3.0'
    """

    coordinates: Tuple[Coordinate, ...]

    def __post_init__(self):
        # Accept any iterable but store it as a tuple to keep the value hashable
        object.__setattr__(self, "coordinates", tuple(self.coordinates))
        pointsCount = len(self.coordinates)
        if pointsCount < POLYGON_MIN_POINTS:
            raise ValueError(f"Polygon needs at least {POLYGON_MIN_POINTS} coordinates, got {pointsCount}")
        if pointsCount > POLYGON_MAX_POINTS:
            raise ValueError(f"Polygon supports at most {POLYGON_MAX_POINTS} coordinates, got {pointsCount}")

    @classmethod
    def fromPoints(cls, points: Iterable[Coordinate]) -> "Polygon":
        """Create polygon from any iterable of coordinates."""
        return cls(coordinates=tuple(points))

    def serialize(self) -> str:
        """Return all points comma-joined with the first point repeated at the end."""
        ring = list(self.coordinates) + [self.coordinates[0]]
        return ",".join(point.serialize() for point in ring)

    def __str__(self) -> str:
        return self.serialize()
