"""Planar and bearing helpers for panorama positions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Point:
    """A 2D point; for geographic use `x` is longitude and `y` latitude in degrees."""

    x: float
    y: float


def mod(a: float, n: float) -> float:
    return ((a % n) + n) % n


def clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180


def distance(p1: Point, p2: Point) -> float:
    """Return the Euclidean distance between `p1` and `p2`."""

    delta_x = p2.x - p1.x
    delta_y = p2.y - p1.y
    return math.sqrt(delta_x * delta_x + delta_y * delta_y)


def bearing(p1: Point, p2: Point) -> float:
    """Return the bearing in degrees from `p1` toward `p2`.

    Negative angles are shifted by 180 degrees rather than 360, so the result
    is not a proper compass value for every pair of points.
    """

    lat1 = degrees_to_radians(p1.y)
    lat2 = degrees_to_radians(p2.y)
    delta_lon = degrees_to_radians(p2.x - p1.x)

    x = math.cos(lat2) * math.sin(delta_lon)
    y = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(delta_lon)

    angle = math.atan2(y, x)
    if angle < 0:
        angle += math.pi
    return angle * 180 / math.pi


def bounds_contain(point: Point, low: Point, high: Point) -> bool:
    """Return whether `point` lies strictly inside the box spanned by `low` and `high`."""

    return low.x < point.x < high.x and low.y < point.y < high.y


def dms_to_decimal(dms: Sequence[float]) -> float:
    degrees, minutes, seconds = dms
    return degrees + minutes / 60 + seconds / 3600


__all__ = [
    "Point",
    "bearing",
    "bounds_contain",
    "clamp",
    "degrees_to_radians",
    "distance",
    "dms_to_decimal",
    "mod",
]
