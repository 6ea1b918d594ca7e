"""
REST API routes package.
Split into smaller modules by entity for maintainability.
"""

from flask import Blueprint, request

from utils.errors import ValidationError

# Create the API blueprint
api_bp = Blueprint('api', __name__)


def get_json_body() -> dict:
    """
    Get the request payload as a dict.

    Raises:
        ValidationError: if the body is missing or not a JSON object
    """
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise ValidationError('Request body must be a JSON object')
    return body


# Import and register routes from submodules
from blueprints.api import health
from blueprints.api import agencies
from blueprints.api import boats
from blueprints.api import availabilities
from blueprints.api import rates

# Register all route functions on the blueprint
health.register_routes(api_bp)
agencies.register_routes(api_bp)
boats.register_routes(api_bp)
availabilities.register_routes(api_bp)
rates.register_routes(api_bp)
