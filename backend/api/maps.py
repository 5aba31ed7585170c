"""
/api/map_url  &  /api/outline
Thin wrappers around static_map with minimal validation.
"""
from __future__ import annotations
from flask import Blueprint, request, jsonify

from config import GOOGLE_MAPS_API_KEY
from geo_utils import Location, TARGET_TYPES
from static_map import generate_map_url, get_outline

bp = Blueprint("maps", __name__, url_prefix="/api")


def _location_from_args() -> Location:
    name = request.args.get("name", "").strip()
    typ  = request.args.get("type", "").strip()
    return Location(name or None, typ or None)


@bp.get("/map_url")
def map_url() -> tuple:
    loc = _location_from_args()
    if loc.target_type and loc.target_type not in TARGET_TYPES:
        return jsonify({"error": f"unknown type {loc.target_type!r}"}), 400

    url = generate_map_url(loc, GOOGLE_MAPS_API_KEY)
    return jsonify({"url": url}), 200


@bp.get("/outline")
def outline() -> tuple:
    loc = _location_from_args()
    if not loc.canonical_name:
        return jsonify({"error": "name required"}), 400

    rings = get_outline(loc)
    return jsonify({
        "rings":  [[c._asdict() for c in ring] for ring in rings],
        "points": sum(len(ring) for ring in rings),
    }), 200
