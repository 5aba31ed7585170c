"""
Bundle and register all blueprints with the Flask app.
"""
from flask import Flask
from . import maps

def register_blueprints(app: Flask) -> None:
    app.register_blueprint(maps.bp)
