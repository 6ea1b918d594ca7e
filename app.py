"""
Boat Inventory - agencies, boats and their availability calendars
Flask application factory and initialization
"""

import os
import sqlite3
import click
import logging
from flask import Flask, g, request
from dotenv import load_dotenv
from werkzeug.exceptions import HTTPException

# Load environment variables
load_dotenv()

# Import configuration
from config import config

# Import database functions
from database import close_db, init_db

from utils.api_response import api_error
from utils.errors import ApiError


def create_app(config_name=None):
    """
    Application factory for Flask app.

    Args:
        config_name: Configuration name ('development', 'production', 'test')

    Returns:
        Flask application instance
    """
    # Determine config
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    # Create Flask app
    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config[config_name])

    # Keep documents in field order
    app.json.sort_keys = False

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register CLI commands
    register_cli_commands(app)

    # Register request hooks
    register_request_hooks(app)

    # Register teardown handlers
    register_teardown_handlers(app)

    # Configure logging
    configure_logging(app)

    return app


def register_blueprints(app):
    """Register Flask blueprints."""
    from blueprints.api import api_bp

    app.register_blueprint(api_bp, url_prefix='/api')


def register_error_handlers(app):
    """Register error handlers."""

    @app.errorhandler(ApiError)
    def api_error_handler(error):
        """Handle validation and not-found errors raised by the model layer."""
        return api_error(error.message, status=error.status)

    @app.errorhandler(404)
    def not_found_error(error):
        """Handle unknown endpoints."""
        return api_error('unknown endpoint', status=404)

    @app.errorhandler(405)
    def method_not_allowed_error(error):
        """Handle unsupported methods on known endpoints."""
        return api_error('method not allowed', status=405)

    @app.errorhandler(sqlite3.Error)
    def database_error(error):
        """Handle persistence failures."""
        # Rollback database on error
        db = g.get('db')
        if db:
            db.rollback()
        app.logger.error(f'Database error: {error}', exc_info=True)
        return api_error('Internal server error', status=500)

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors."""
        db = g.get('db')
        if db:
            db.rollback()
        return api_error('Internal server error', status=500)

    @app.errorhandler(HTTPException)
    def http_error(error):
        """Render any other HTTP error as JSON."""
        return api_error(error.description or error.name, status=error.code)


def register_cli_commands(app):
    """Register Flask CLI commands."""

    @app.cli.command('init-db')
    def init_db_command():
        """Initialize database schema (drops existing data)."""
        click.echo('Initializing database...')
        with app.app_context():
            init_db()
        click.echo('Database initialized successfully!')

    @app.cli.command('seed-demo')
    def seed_demo_command():
        """Create demo agencies with boats and generated availability."""
        from database import seed_database

        with app.app_context():
            agencies = seed_database()
        for agency in agencies:
            click.echo(f'Agency {agency["name"]}: {len(agency["boatIds"])} boats ({agency["id"]})')


def register_request_hooks(app):
    """Register request logging and CORS headers."""

    @app.after_request
    def log_and_allow_origin(response):
        """Log every request and add the CORS header."""
        response.headers['Access-Control-Allow-Origin'] = app.config.get('CORS_ORIGINS', '*')
        response.headers['Access-Control-Allow-Headers'] = 'Content-Type'
        response.headers['Access-Control-Allow-Methods'] = 'GET, POST, PUT, DELETE, OPTIONS'
        app.logger.info(f'{request.method} {request.path} {response.status_code}')
        return response


def register_teardown_handlers(app):
    """Register teardown handlers."""

    @app.teardown_appcontext
    def teardown_db(error):
        """Close database connection at end of request."""
        close_db(error)


def configure_logging(app):
    """Configure application logging."""
    if not app.debug and not app.testing:
        # Production logging
        if not os.path.exists('logs'):
            os.mkdir('logs')

        file_handler = logging.FileHandler('logs/boat_inventory.log')
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)
        logging.getLogger('models').addHandler(file_handler)

        app.logger.setLevel(logging.INFO)
        app.logger.info('Boat Inventory startup')
    else:
        # Development logging
        app.logger.setLevel(logging.DEBUG)


# Create application instance for development server
if __name__ == '__main__':
    app = create_app()
    app.run(host='0.0.0.0', debug=True)
