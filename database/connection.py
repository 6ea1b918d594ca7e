"""
Database connection management.
Handles per-request connections, initialization, and teardown.
"""

import logging
import os
import sqlite3
from flask import g, current_app

logger = logging.getLogger(__name__)


def get_db():
    """
    Get the connection bound to the current application context.

    Returns:
        sqlite3.Connection: Database connection object
    """
    if 'db' not in g:
        db_path = current_app.config.get('DATABASE_PATH', 'instance/boat_inventory.db')
        if db_path != ':memory:':
            directory = os.path.dirname(db_path)
            if directory:
                os.makedirs(directory, exist_ok=True)
        g.db = sqlite3.connect(db_path)
        g.db.row_factory = sqlite3.Row
        # Enable foreign key constraints
        g.db.execute('PRAGMA foreign_keys = ON')
    return g.db


def close_db(e=None):
    """
    Close database connection.

    Args:
        e: Exception if any (from Flask teardown context)
    """
    db = g.pop('db', None)
    if db is not None:
        db.close()


def init_db():
    """
    Initialize database: drop existing tables and create the schema.
    WARNING: This will delete all existing data!
    """
    from database.schema import drop_tables, create_tables, create_indexes

    db = get_db()

    # Drop existing tables (children first)
    drop_tables(db)

    # Create all tables
    create_tables(db)

    # Create indexes
    create_indexes(db)

    db.commit()
    logger.info('Database initialized at %s', current_app.config.get('DATABASE_PATH'))
