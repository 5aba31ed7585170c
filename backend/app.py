# backend/app.py
import os

import structlog
from flask import Flask, jsonify
from flask_cors import CORS

from api import register_blueprints        # ← absolute import
from errors import MapUrlError
from logging_config import setup_logging

logger = structlog.get_logger(__name__)

# --- factory --------------------------------------------------------------
def create_app() -> Flask:
    setup_logging()
    app = Flask(__name__)
    CORS(app)
    register_blueprints(app)

    @app.errorhandler(MapUrlError)
    def map_url_error(exc: MapUrlError):
        logger.warning("map_url_error", error=type(exc).__name__, message=exc.message)
        return jsonify({"error": exc.message}), exc.status_code

    @app.get("/api/health")
    def health():
        return jsonify({"status": "backend up"}), 200

    return app

# --------------------------------------------------------------------------
app = create_app()         # ← Gunicorn expects this symbol

if __name__ == "__main__":
    debug = os.environ.get("FLASK_ENV") != "production"
    host  = "127.0.0.1" if debug else "0.0.0.0"
    app.run(debug=debug, host=host, port=5000)
