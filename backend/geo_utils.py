#geo_utils.py
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import structlog
from filelock import Timeout
from geopy.adapters import RequestsAdapter
from geopy.exc import GeopyError
from geopy.extra.rate_limiter import RateLimiter
from geopy.geocoders import Nominatim

from config import (
    BOUNDARY_TTL_H,
    NOMINATIM_MIN_DELAY_SEC,
    NOMINATIM_TIMEOUT_SEC,
    NOMINATIM_USER_AGENT,
)
from errors import BoundaryRequestFailed, NoLocation
from util import cache as c
from util.geometry import GeometryKind

logger = structlog.get_logger(__name__)

# ─── Google Ads location categories ──────────────────────────────────────────
POSTAL_CODE = "Postal Code"
TARGET_TYPES = frozenset({
    "City", "Municipality", "Neighborhood", "District", "County", "Region",
    "City Region", "Borough", "Province", "University", "Airport", "State",
    "Country", "Department", "Territory", "Canton", "Autonomous Community",
    "Union Territory", "Prefecture", "Governorate", POSTAL_CODE,
    "Congressional District", "TV Region", "Okrug", "National Park",
})


@dataclass(frozen=True)
class Location:
    canonical_name: Optional[str]
    target_type:    Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Location":
        return cls(data.get("canonical_name"), data.get("target_type"))


# ─── Nominatim (1 req/s, no retries) ─────────────────────────────────────────
geo = Nominatim(user_agent=NOMINATIM_USER_AGENT, timeout=NOMINATIM_TIMEOUT_SEC,
                adapter_factory=RequestsAdapter)
_search = RateLimiter(geo.geocode, min_delay_seconds=NOMINATIM_MIN_DELAY_SEC,
                      max_retries=0, swallow_exceptions=False)

COMMA_RX = re.compile(r"\s*,+\s*")
SPACE_RX = re.compile(r"\s+")


def _checked(raw: list) -> list[dict]:
    """Every Nominatim search hit is an object with at least lat/lon."""
    if not isinstance(raw, list) or not all(
        isinstance(cand, dict) and "lat" in cand and "lon" in cand for cand in raw
    ):
        raise BoundaryRequestFailed("OpenStreetMap returned malformed results.")
    return raw


def normalize_canonical_name(name: str) -> str:
    """Strip whitespace around commas: ``"SY7, Shropshire"`` → ``"SY7,Shropshire"``."""
    return COMMA_RX.sub(",", name.strip())


def build_encoded_canonical_name(name: str) -> str:
    """URL form of a canonical name: no space next to commas, ``+`` for the rest."""
    return SPACE_RX.sub("+", normalize_canonical_name(name))


def search_candidates(query: str, *, use_cache: bool = True) -> list[dict]:
    """
    Raw Nominatim hits (``format=json&polygon_geojson=1``) for *query*.
    Answers are cached on disk for BOUNDARY_TTL_H hours.
    """
    use_cache = use_cache and BOUNDARY_TTL_H > 0
    key = c.cache_key(query)

    def fetch() -> list[dict]:
        try:
            places = _search(query, exactly_one=False, geometry="geojson")
            raw = _checked([p.raw for p in places or []])
        except GeopyError as exc:
            logger.warning("boundary_request_failed", query=query, error=str(exc))
            raise BoundaryRequestFailed() from exc
        except (AttributeError, TypeError, KeyError, ValueError) as exc:
            # geopy chokes on JSON that is not a list of result objects
            logger.warning("boundary_response_malformed", query=query, error=str(exc))
            raise BoundaryRequestFailed("OpenStreetMap returned malformed results.") from exc
        logger.info("boundary_fetched", query=query, candidates=len(raw))
        return raw

    if not use_cache:
        return fetch()

    try:
        with c.with_lock(c.cache_path(key)):
            raw = c.load(key, BOUNDARY_TTL_H)
            if raw is not None:
                logger.debug("boundary_cache_hit", query=query)
                return _checked(raw)
            raw = fetch()
            c.save(key, raw)
    except Timeout as exc:
        logger.warning("boundary_cache_busy", query=query, lock=str(exc))
        raise BoundaryRequestFailed("OpenStreetMap lookup is busy, try again.") from exc
    return raw


def select_candidate(location: Location, candidates: list[dict]) -> dict | None:
    """Postal codes want the first Point hit; everything else the first hit."""
    if location.target_type == POSTAL_CODE:
        return next(
            (cand for cand in candidates
             if (cand.get("geojson") or {}).get("type") == GeometryKind.POINT.value),
            None,
        )
    return candidates[0] if candidates else None


def fetch_boundary(location: Location, *, use_cache: bool = True) -> dict | None:
    """
    GeoJSON geometry of *location*'s outline, or None when Nominatim knows no
    such place (callers then draw a center marker instead).
    """
    if not location.canonical_name:
        raise NoLocation()
    query = normalize_canonical_name(location.canonical_name)
    candidates = search_candidates(query, use_cache=use_cache)

    chosen = select_candidate(location, candidates)
    geojson = chosen.get("geojson") if chosen else None
    if not geojson:
        logger.info("boundary_missing", location=location.canonical_name,
                    candidates=len(candidates))
        return None
    return geojson
