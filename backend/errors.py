"""
Errors raised while turning a location into a static map URL.
Each one carries the HTTP status the API answers with.
"""
from __future__ import annotations


class MapUrlError(Exception):
    """Base class for all map-url errors."""
    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class NoApiKey(MapUrlError):
    def __init__(self, message: str = "No Google Maps API key was provided."):
        super().__init__(message, 500)


class NoLocation(MapUrlError):
    """Location, canonical name or target type missing."""
    def __init__(self, message: str = "No location was provided."):
        super().__init__(message, 400)


class BoundaryRequestFailed(MapUrlError):
    """Nominatim could not be reached or answered with garbage."""
    def __init__(self, message: str = "OpenStreetMap request failed."):
        super().__init__(message, 502)


class UnknownGeometryKind(MapUrlError):
    def __init__(self, message: str = "Unknown OpenStreetMap geojson location type."):
        super().__init__(message, 502)


class InvalidGeometry(MapUrlError):
    """Known geometry type, but the coordinates are not shaped like GeoJSON."""
    def __init__(self, message: str = "Malformed OpenStreetMap geojson coordinates."):
        super().__init__(message, 502)


class NoCoordinatesFound(MapUrlError):
    def __init__(self, message: str = "No coordinates found."):
        super().__init__(message, 422)
