"""
Health check route.
"""

from flask import current_app

from utils.api_response import api_success


def register_routes(bp):
    """Register the health route on the blueprint."""

    @bp.route('/health')
    def health_check():
        """
        Health check endpoint.

        Returns:
            JSON with status and version
        """
        return api_success({
            'status': 'ok',
            'version': current_app.config.get('APP_VERSION', '1.0.0'),
            'app': current_app.config.get('APP_NAME', 'Boat Inventory')
        })
