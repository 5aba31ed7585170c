"""
Shrink boundary outlines to a URL-sized set of points.

Outlines from OpenStreetMap can hold tens of thousands of points, spaced very
unevenly: a few metres apart along a land border, kilometres apart at sea.
Keeping every n-th point would therefore drop whole stretches of coast while
keeping near-duplicates inland. Instead each ring is resampled by arc length:
the ring's total length is split into ``frequency`` intervals and a point is
kept whenever the distance walked since the last kept point exceeds one
interval. An outline of 1000 miles with 10 000 points and a frequency of 200
keeps roughly one point every 5 miles.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, List, Mapping, Sequence, Tuple, Union

import structlog

from config import (
    DETAILED_RING_COUNT,
    DISTANCE_INTERVAL_FREQUENCY,
    MAX_POLYGON_COUNT,
    MINOR_POLYGON_FREQUENCY,
)
from errors import UnknownGeometryKind
from util.geometry import (
    Coordinate,
    Geometry,
    LineString,
    MultiPolygon,
    Point,
    Polygon,
    Ring,
    parse_geojson,
    separation,
)

logger = structlog.get_logger(__name__)

CondensedRing = List[Coordinate]


@dataclass(frozen=True)
class CondenseSettings:
    distance_interval_frequency: int = DISTANCE_INTERVAL_FREQUENCY
    max_polygon_count:           int = MAX_POLYGON_COUNT
    minor_polygon_frequency:     int = MINOR_POLYGON_FREQUENCY
    detailed_ring_count:         int = DETAILED_RING_COUNT

    def __post_init__(self) -> None:
        if self.distance_interval_frequency <= 0 or self.minor_polygon_frequency <= 0:
            raise ValueError("interval frequencies must be positive")
        if self.max_polygon_count < 0 or self.detailed_ring_count < 0:
            raise ValueError("polygon / ring counts must not be negative")


DEFAULT_SETTINGS = CondenseSettings()


# ───────────────────────────────── helpers ──────────────────────────────────
def _largest_polygons(polygons: Sequence[Tuple[Ring, ...]], limit: int) -> List[Ring]:
    """
    Island territories (Greece, Hawaii, ...) come as MultiPolygons with
    hundreds of members. Point count of the outer ring stands in for land
    area: keep the *limit* biggest and flatten their rings.
    """
    ranked = sorted(polygons, key=lambda p: len(p[0]) if p else 0, reverse=True)
    return [ring for polygon in ranked[:limit] for ring in polygon]


def _rings_of(geometry: Geometry, settings: CondenseSettings) -> List[Ring]:
    if isinstance(geometry, Point):
        return []
    if isinstance(geometry, LineString):
        return [geometry.coordinates]
    if isinstance(geometry, Polygon):
        return [geometry.rings[0]] if geometry.rings else [()]
    if isinstance(geometry, MultiPolygon):
        return _largest_polygons(geometry.polygons, settings.max_polygon_count)
    raise UnknownGeometryKind(
        f"Unknown OpenStreetMap geojson location type: {type(geometry).__name__}"
    )


def condense_ring(ring: Sequence[Sequence[float]], frequency: int) -> CondensedRing:
    """Arc-length resampling of one ring; the first point is always kept."""
    if not ring:
        return []

    with_distances = [Coordinate(ring[0][0], ring[0][1], 0.0)]
    total = 0.0
    for prev, cur in zip(ring, ring[1:]):
        d = separation(cur, prev)
        total += d
        with_distances.append(Coordinate(cur[0], cur[1], d))

    interval = total / frequency
    kept: CondensedRing = [with_distances[0]]
    acc = 0.0
    for coord in with_distances[1:]:
        acc += coord.distance
        if acc > interval:
            acc = 0.0
            kept.append(coord)
    return kept


# ───────────────────────────────── public api ───────────────────────────────
def condense_coordinates(
    geometry: Union[Geometry, Mapping[str, Any]],
    settings: CondenseSettings = DEFAULT_SETTINGS,
) -> List[CondensedRing]:
    """
    One condensed ring per input ring. A Point gives ``[[]]``: there is no
    outline, the map falls back to a center marker.

    In a MultiPolygon only the first ``detailed_ring_count`` rings (the main
    landmasses, e.g. the contiguous US and Alaska) get the fine frequency;
    the rest (Hawaii, ...) use ``minor_polygon_frequency`` so the URL stays
    bounded.
    """
    if isinstance(geometry, Mapping):
        geometry = parse_geojson(geometry)

    if isinstance(geometry, Point):
        return [[]]

    rings = _rings_of(geometry, settings)
    multi = isinstance(geometry, MultiPolygon)

    condensed = []
    for idx, ring in enumerate(rings):
        frequency = settings.distance_interval_frequency
        if multi and idx >= settings.detailed_ring_count:
            frequency = settings.minor_polygon_frequency
        condensed.append(condense_ring(ring, frequency))

    logger.debug(
        "coordinates_condensed",
        kind=geometry.kind.value,
        rings=len(condensed),
        raw_points=sum(len(r) for r in rings),
        kept_points=sum(len(r) for r in condensed),
    )
    return condensed
