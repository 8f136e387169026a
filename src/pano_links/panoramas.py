"""Panorama metadata helpers."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Tuple

from .geometry import Point, dms_to_decimal, mod

DMS = Tuple[float, float, float]

_DMS_SEPARATOR_PATTERN = re.compile(r"[;,\s]+")


@dataclass(frozen=True)
class PanoramaRecord:
    """Identity, position and heading of one panorama image.

    Latitude and longitude are degree/minute/second triples exactly as tagged
    in the image; either may be missing when the image carries no GPS data.
    """

    id: str
    latitude: Optional[DMS] = None
    longitude: Optional[DMS] = None
    heading: Optional[int] = None

    @property
    def is_located(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def point(self) -> Point:
        if not self.is_located:
            raise ValueError(f"panorama {self.id!r} has no GPS position")
        return Point(x=dms_to_decimal(self.longitude), y=dms_to_decimal(self.latitude))


def _is_missing(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and not value.strip()


def parse_dms(value: object) -> Optional[DMS]:
    """Return a degree/minute/second triple for `value`, or None when it is empty.

    Accepts a three-item sequence, a string such as ``"41;52;30.5"`` or
    ``"41 52 30.5"``, or a single decimal number which is taken as whole degrees.
    """

    if _is_missing(value):
        return None
    try:
        if isinstance(value, (int, float)):
            parts = [value]
        elif isinstance(value, str):
            parts = [p for p in _DMS_SEPARATOR_PATTERN.split(value.strip()) if p]
        else:
            parts = list(value)  # type: ignore[call-overload]
        numbers = [float(p) for p in parts]
    except (TypeError, ValueError):
        raise ValueError(f"Invalid degree/minute/second value: {value!r}") from None
    if not all(math.isfinite(n) for n in numbers):
        raise ValueError(f"Non-finite degree/minute/second value: {value!r}")

    if len(numbers) == 1:
        return numbers[0], 0.0, 0.0
    if len(numbers) != 3:
        raise ValueError(f"Expected degrees, minutes and seconds, got {value!r}")
    return numbers[0], numbers[1], numbers[2]


def parse_heading(value: object) -> Optional[int]:
    """Return the compass heading for `value` wrapped into [0, 359]."""

    if _is_missing(value):
        return None
    try:
        heading = int(round(float(value)))  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"Invalid heading: {value!r}") from None
    return int(mod(heading, 360))


def record_from_row(
    row: Mapping[str, object],
    id_column: str = "id",
    latitude_column: str = "latitude",
    longitude_column: str = "longitude",
    heading_column: str | None = "heading",
) -> PanoramaRecord:
    heading = row.get(heading_column) if heading_column else None
    return PanoramaRecord(
        id=str(row[id_column]).strip(),
        latitude=parse_dms(row.get(latitude_column)),
        longitude=parse_dms(row.get(longitude_column)),
        heading=parse_heading(heading),
    )


def filter_located(records: Iterable[PanoramaRecord]) -> List[PanoramaRecord]:
    return [record for record in records if record.is_located]


__all__ = [
    "DMS",
    "PanoramaRecord",
    "filter_located",
    "parse_dms",
    "parse_heading",
    "record_from_row",
]
