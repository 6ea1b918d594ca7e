"""
Flask application configuration classes.
Provides configuration for development, production, and testing environments.
"""

import os
import tempfile


class Config:
    """Base configuration class with common settings."""

    # Secret key for session signing
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Database configuration
    DATABASE_PATH = os.environ.get('DATABASE_PATH') or 'instance/boat_inventory.db'

    # Deletion policy for agencies, boats and availabilities: 'soft' or 'hard'
    DELETE_STRATEGY = os.environ.get('DELETE_STRATEGY', 'soft').lower()

    # Number of days of availability generated for a new boat
    AVAILABILITY_WINDOW_DAYS = int(os.environ.get('AVAILABILITY_WINDOW_DAYS', 30))

    # Timezone used for "today" and midnight normalization
    TIMEZONE = os.environ.get('TIMEZONE', 'UTC')

    # Value sent as Access-Control-Allow-Origin
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')

    # Application settings
    APP_NAME = 'Boat Inventory'
    APP_VERSION = '1.0.0'


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG = False
    TESTING = False

    SECRET_KEY = os.environ.get('SECRET_KEY') or Config.SECRET_KEY
    DATABASE_PATH = os.environ.get('DATABASE_PATH') or Config.DATABASE_PATH

    @classmethod
    def validate(cls) -> None:
        """Validate that required production environment variables are set."""
        secret_key = os.environ.get('SECRET_KEY')
        if not secret_key:
            raise ValueError("SECRET_KEY environment variable must be set in production")
        if len(secret_key) < 32:
            raise ValueError("SECRET_KEY must be at least 32 characters in production")
        if not os.environ.get('DATABASE_PATH'):
            raise ValueError("DATABASE_PATH environment variable must be set in production")


class TestConfig(Config):
    """Testing environment configuration."""

    TESTING = True
    DEBUG = True
    # Must be a file: each app context opens its own connection
    DATABASE_PATH = os.environ.get(
        'DATABASE_PATH', os.path.join(tempfile.gettempdir(), 'boat_inventory_test.db')
    )
    DELETE_STRATEGY = 'soft'
    TIMEZONE = 'UTC'
    SECRET_KEY = 'test-secret-key'


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'test': TestConfig,
    'default': DevelopmentConfig
}
