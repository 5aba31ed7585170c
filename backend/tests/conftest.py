"""
Shared fixtures: an isolated cache directory, a stand-in for the Nominatim
client (no network in tests) and the Flask test client.
"""
import os
import tempfile
from types import SimpleNamespace

import pytest

# must happen before config is imported anywhere
os.environ.setdefault("STATIC_MAP_CACHE_DIR", tempfile.mkdtemp(prefix="static-map-cache-"))

import geo_utils  # noqa: E402
from util import cache as c  # noqa: E402

# the module's own RateLimiter-wrapped geocoder, before any test swaps it out
LIVE_SEARCH = geo_utils._search


@pytest.fixture(autouse=True)
def boundary_dir(tmp_path, monkeypatch):
    """Each test gets its own empty boundary cache."""
    monkeypatch.setattr(c, "BOUNDARY_DIR", tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def no_network(monkeypatch):
    def _refuse(*args, **kwargs):
        raise AssertionError("Nominatim must not be called in this test")
    monkeypatch.setattr(geo_utils, "_search", _refuse)


class FakeSearch:
    """Records calls and answers like ``Nominatim.geocode(exactly_one=False)``."""
    def __init__(self, results=None, error=None):
        self.results = results
        self.error = error
        self.calls = []

    def __call__(self, query, **kwargs):
        self.calls.append((query, kwargs))
        if self.error is not None:
            raise self.error
        if self.results is None:
            return None
        return [SimpleNamespace(raw=r) for r in self.results]


@pytest.fixture
def fake_search(monkeypatch):
    def install(results=None, error=None) -> FakeSearch:
        fake = FakeSearch(results, error)
        monkeypatch.setattr(geo_utils, "_search", fake)
        return fake
    return install


class FakeNominatimHttp:
    """Stands in for geopy's adapter: records request URLs, answers with *payload*."""
    def __init__(self, payload=None, error=None):
        self.payload = payload
        self.error = error
        self.urls = []

    def __call__(self, url, *, timeout, headers):
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def nominatim_http(monkeypatch):
    """Real geopy Nominatim + RateLimiter, only the JSON transport is faked."""
    def install(payload=None, error=None) -> FakeNominatimHttp:
        http = FakeNominatimHttp(payload, error)
        monkeypatch.setattr(LIVE_SEARCH, "min_delay_seconds", 0)
        monkeypatch.setattr(geo_utils, "_search", LIVE_SEARCH)
        monkeypatch.setattr(geo_utils.geo.adapter, "get_json", http)
        return http
    return install


@pytest.fixture
def square_geojson():
    return {
        "type": "Polygon",
        "coordinates": [[[0, 0], [0, 1], [1, 1], [1, 0], [0, 0]]],
    }


@pytest.fixture
def client():
    from app import create_app
    app = create_app()
    app.config["TESTING"] = True
    return app.test_client()
