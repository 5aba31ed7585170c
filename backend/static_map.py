"""
Location name → Nominatim outline → condensed rings → Google Static Maps URL.
The URL is only built, never requested.
"""
from __future__ import annotations
from typing import List, Optional

from errors import NoApiKey, NoLocation
from geo_utils import Location, fetch_boundary
from util.condense import (
    DEFAULT_SETTINGS,
    CondensedRing,
    CondenseSettings,
    condense_coordinates,
)
from util.polygon import build_map_url


def get_outline(
    location: Location,
    settings: Optional[CondenseSettings] = None,
    *,
    use_cache: bool = True,
) -> List[CondensedRing]:
    """
    Condensed outline of *location*. Without a boundary from OpenStreetMap
    this is a single empty ring, which renders as a center marker.
    """
    geojson = fetch_boundary(location, use_cache=use_cache)
    if geojson is None:
        return [[]]
    return condense_coordinates(geojson, settings or DEFAULT_SETTINGS)


def generate_map_url(
    location: Optional[Location],
    api_key: Optional[str],
    settings: Optional[CondenseSettings] = None,
    *,
    use_cache: bool = True,
) -> str:
    # validate before touching the network
    if not api_key:
        raise NoApiKey()
    if location is None or not location.canonical_name or not location.target_type:
        raise NoLocation()

    rings = get_outline(location, settings, use_cache=use_cache)
    return build_map_url(location, rings, api_key)
