"""
GeoJSON geometries as a closed set of frozen dataclasses, plus the planar
distance used to resample outlines.

Positions are ``(longitude, latitude)`` tuples, same order as GeoJSON.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, NamedTuple, Sequence, Tuple, Union

from errors import InvalidGeometry, UnknownGeometryKind

Position = Tuple[float, float]
Ring     = Tuple[Position, ...]


class GeometryKind(str, Enum):
    POINT        = "Point"
    LINESTRING   = "LineString"
    POLYGON      = "Polygon"
    MULTIPOLYGON = "MultiPolygon"


class Coordinate(NamedTuple):
    longitude: float
    latitude:  float
    distance:  float            # to the predecessor in the *raw* ring


@dataclass(frozen=True)
class Point:
    coordinates: Tuple[float, ...] = ()
    kind = GeometryKind.POINT


@dataclass(frozen=True)
class LineString:
    coordinates: Ring
    kind = GeometryKind.LINESTRING


@dataclass(frozen=True)
class Polygon:
    rings: Tuple[Ring, ...]     # outer ring first, then holes
    kind = GeometryKind.POLYGON


@dataclass(frozen=True)
class MultiPolygon:
    polygons: Tuple[Tuple[Ring, ...], ...]
    kind = GeometryKind.MULTIPOLYGON


Geometry = Union[Point, LineString, Polygon, MultiPolygon]
GEOMETRY_TYPES = (Point, LineString, Polygon, MultiPolygon)


def separation(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Planar distance between two ``[lon, lat]`` pairs (Pythagoras on raw
    degrees). Only meaningful relative to other distances of the same outline.
    """
    d_lon = abs(a[0] - b[0])
    d_lat = abs(a[1] - b[1])
    return math.sqrt(d_lon ** 2 + d_lat ** 2)


# ───────────────────────────────── parsing ──────────────────────────────────
def _position(raw: Any) -> Position:
    try:
        return (float(raw[0]), float(raw[1]))
    except (TypeError, ValueError, IndexError, KeyError) as exc:
        raise InvalidGeometry(f"Bad position {raw!r}") from exc


def _ring(raw: Any) -> Ring:
    if not isinstance(raw, (list, tuple)):
        raise InvalidGeometry(f"Expected a list of positions, got {type(raw).__name__}")
    return tuple(_position(p) for p in raw)


def _rings(raw: Any) -> Tuple[Ring, ...]:
    if not isinstance(raw, (list, tuple)):
        raise InvalidGeometry(f"Expected a list of rings, got {type(raw).__name__}")
    return tuple(_ring(r) for r in raw)


def parse_geojson(raw: Mapping[str, Any]) -> Geometry:
    """Map a GeoJSON geometry object onto the dataclass it describes."""
    kind   = raw.get("type")
    coords = raw.get("coordinates")

    if kind == GeometryKind.POINT.value:
        # no outline to draw – the coordinates themselves are never used
        return Point(tuple(coords or ()))
    if kind == GeometryKind.LINESTRING.value:
        return LineString(_ring(coords))
    if kind == GeometryKind.POLYGON.value:
        return Polygon(_rings(coords))
    if kind == GeometryKind.MULTIPOLYGON.value:
        if not isinstance(coords, (list, tuple)):
            raise InvalidGeometry("MultiPolygon without polygon list")
        return MultiPolygon(tuple(_rings(p) for p in coords))
    raise UnknownGeometryKind(f"Unknown OpenStreetMap geojson location type: {kind!r}")
