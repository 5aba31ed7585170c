"""
Helpers for turning condensed outlines into Google Static Maps URL params.
"""
from __future__ import annotations
from typing import Sequence

import structlog

from config import MAP_SCALE, MAP_SIZE, STATIC_MAP_URL
from errors import NoApiKey, NoCoordinatesFound
from geo_utils import Location, build_encoded_canonical_name
from util.condense import CondensedRing
from util.map_style import PATH_STYLE, STYLE

logger = structlog.get_logger(__name__)


def _num(value: float) -> str:
    """``1.0`` → ``1``, ``-0.12780000`` → ``-0.1278`` (≈10 cm precision)."""
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _latlon(lon: float, lat: float) -> str:
    return f"{_num(lat)},{_num(lon)}"


def build_location_shape(location: Location, rings: Sequence[CondensedRing]) -> str:
    """
    Style params followed by one fragment per ring: a closed ``&path=`` when
    the ring has at least 3 points, otherwise a ``&center=`` on the name.
    """
    if not rings:
        raise NoCoordinatesFound()

    parts = [STYLE]
    for ring in rings:
        if len(ring) > 2:
            pts = [_latlon(c.longitude, c.latitude) for c in ring]
            pts.append(pts[0])                          # close ring
            parts.append(f"&path={PATH_STYLE}|" + "|".join(pts))
        else:
            parts.append(f"&center={build_encoded_canonical_name(location.canonical_name)}")
    return "".join(parts)


def build_map_url(location: Location, rings: Sequence[CondensedRing], api_key: str | None) -> str:
    if not api_key:
        raise NoApiKey()

    proportions = f"?size={MAP_SIZE}&scale={MAP_SCALE}"
    shape       = build_location_shape(location, rings)
    url         = f"{STATIC_MAP_URL}{proportions}{shape}&key={api_key}"
    logger.info("map_url_built", location=location.canonical_name,
                rings=len(rings), url_length=len(url))
    return url
