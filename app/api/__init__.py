"""API blueprints for the web sample."""

from flask import Blueprint

# Create main API blueprint
# Resource blueprints are registered on it by app.startup.register_blueprints()
api_bp = Blueprint("api", __name__, url_prefix="/api")
