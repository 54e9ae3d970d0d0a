"""Direct and inverse geodetic problems on a plane coordinate grid."""

from __future__ import annotations

import math
from dataclasses import dataclass

from surveycalc.basic import format_number


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _carry(value: int) -> tuple[int, int]:
    if value >= 60:
        return divmod(value, 60)
    return 0, value


@dataclass(frozen=True)
class Bearing:
    """A direction angle in degrees, minutes and seconds."""

    degrees: float
    minutes: float = 0
    seconds: float = 0

    def to_radians(self) -> float:
        """The angle in radians."""
        return (self.degrees + self.minutes / 60 + self.seconds / 3600) * math.pi / 180

    @classmethod
    def from_degrees(cls, degrees: float) -> Bearing:
        """Split decimal degrees into whole degrees, minutes and seconds.

        Negative angles are brought up by one full turn; a negative seconds
        remainder is clamped to zero.
        """
        if degrees < 0:
            degrees += 360
        whole = int(degrees)
        exact_minutes = (degrees - whole) * 60
        minutes = _round_half_away(exact_minutes)
        seconds = max(_round_half_away((exact_minutes - minutes) * 60), 0)
        extra, seconds = _carry(seconds)
        minutes += extra
        extra, minutes = _carry(minutes)
        return cls(whole + extra, minutes, seconds)


@dataclass(frozen=True)
class InverseResult:
    """Distance and bearing between two points."""

    distance: float
    bearing: Bearing

    def describe(self) -> str:
        """Human-readable summary of the result."""
        b = self.bearing
        return (
            f"Расстояние: {format_number(self.distance)}| Угол: "
            f"{int(b.degrees)}'{int(b.minutes)}''{int(b.seconds)}"
        )


def direct(xa: float, ya: float, distance: float, bearing: Bearing) -> tuple[float, float]:
    """Coordinates of the point reached from A along a bearing."""
    angle = bearing.to_radians()
    return xa + distance * math.cos(angle), ya + distance * math.sin(angle)


def inverse(xa: float, ya: float, xb: float, yb: float) -> InverseResult:
    """Distance and bearing from point A to point B."""
    dx = xb - xa
    dy = yb - ya
    angle = math.atan2(dy, dx) * 180 / math.pi
    return InverseResult(math.sqrt(dx * dx + dy * dy), Bearing.from_degrees(angle))


def format_direct(x: float, y: float) -> str:
    """Text for the result of the direct problem."""
    return f"X: {format_number(x)} | Y: {format_number(y)}"