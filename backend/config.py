"""
Global paths, service endpoints and condensation tunables.
Secrets (the Google Maps key) come from env-vars only.
"""
from pathlib import Path
import os

BASE_DIR     = Path(__file__).resolve().parent
CACHE_DIR    = Path(os.getenv("STATIC_MAP_CACHE_DIR", str(BASE_DIR / "cache")))
BOUNDARY_DIR = CACHE_DIR / "boundaries"

# create folders on import
for d in (CACHE_DIR, BOUNDARY_DIR):
    d.mkdir(parents=True, exist_ok=True)

#: how long a worker may wait for another one writing the same cache entry
LOCK_TIMEOUT_SEC = 30

#: how long Nominatim answers stay fresh on disk (0 disables the cache)
BOUNDARY_TTL_H = int(os.getenv("BOUNDARY_TTL_H", "24"))
CACHE_PURGE_D  = 7

# ─── Nominatim ───────────────────────────────────────────────────────────────
NOMINATIM_USER_AGENT    = "StaticMapOutline/1.0"
NOMINATIM_TIMEOUT_SEC   = 10
NOMINATIM_MIN_DELAY_SEC = 1.0           # usage policy: max 1 req/s

# ─── Google Static Maps ──────────────────────────────────────────────────────
GOOGLE_MAPS_API_KEY = os.getenv("GOOGLE_MAPS_API_KEY", "").strip()
STATIC_MAP_URL      = "https://maps.googleapis.com/maps/api/staticmap"
MAP_SIZE            = "600x400"
MAP_SCALE           = 2

# ─── outline condensation ────────────────────────────────────────────────────
#: upper bound for the number of points kept per ring; the real count lands
#: a little below it. Higher = finer outline but a longer URL.
DISTANCE_INTERVAL_FREQUENCY = 200
#: polygons of a MultiPolygon kept after sorting by size
MAX_POLYGON_COUNT           = 10
#: frequency used for the minor rings of a MultiPolygon
MINOR_POLYGON_FREQUENCY     = 10
#: rings of a MultiPolygon that keep the fine frequency
DETAILED_RING_COUNT         = 2
