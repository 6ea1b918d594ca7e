"""
Default availability calendar for new boats.

A new boat gets one availability row per day from tomorrow through
AVAILABILITY_WINDOW_DAYS days ahead, priced at the boat's default rates.
"""

import logging
import sqlite3
from datetime import date, timedelta

from flask import current_app

from models.integrity import try_set_child_ids
from utils.datetime_helpers import get_today
from utils.helpers import generate_id

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_DAYS = 30


def build_default_availability(boat: dict, start: date, days: int) -> list:
    """
    Build availability rows for a boat without touching the database.

    Args:
        boat: boats row (mapping with id and default_* rate columns)
        start: First calendar day
        days: Number of consecutive days

    Returns:
        List of column tuples in insert order
    """
    rows = []
    for offset in range(days):
        day = start + timedelta(days=offset)
        rows.append((
            generate_id(),
            day.isoformat(),
            1,
            boat['default_base_rate'],
            boat['default_adult_rate'],
            boat['default_child_rate'],
            boat['default_infant_rate'] or 0,
            boat['id'],
        ))
    return rows


def generate_default_availability(db, boat: dict) -> list:
    """
    Insert the default calendar for a freshly created boat.

    All rows go in as one bulk insert. The boat's availability_ids is
    then set to the inserted ids. A failed or short insert is logged and
    the boat keeps whatever ids were stored.

    Args:
        db: Database connection
        boat: boats row of the new boat

    Returns:
        List of generated availability ids that were stored
    """
    days = current_app.config.get('AVAILABILITY_WINDOW_DAYS', DEFAULT_WINDOW_DAYS)
    rows = build_default_availability(boat, get_today() + timedelta(days=1), days)

    try:
        cursor = db.executemany('''
            INSERT INTO availabilities (id, date, is_available, base_rate, adult_rate,
                                        child_rate, infant_rate, boat_id)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
        ''', rows)
        inserted = cursor.rowcount
        db.commit()
    except sqlite3.Error as e:
        db.rollback()
        logger.error(f'Failed to create availability for boat {boat["id"]}: {e}')
        return []

    availability_ids = [row[0] for row in rows]
    if inserted != len(rows):
        logger.error(
            f'Created {inserted} of {len(rows)} availability records for boat {boat["id"]}'
        )
        stored = {
            r['id'] for r in db.execute(
                'SELECT id FROM availabilities WHERE boat_id = ? AND is_deleted = 0',
                (boat['id'],)
            ).fetchall()
        }
        availability_ids = [aid for aid in availability_ids if aid in stored]

    try_set_child_ids(db, 'boats', boat['id'], availability_ids)
    return availability_ids
