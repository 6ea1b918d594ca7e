"""
Cascading deletes across agencies, boats and availabilities.

The parent is always deleted and committed first. Children are then
processed one at a time in id-list order; a failing step is logged and
the cascade moves on, so the caller still gets a success status.
"""

import logging
import sqlite3

from database import get_db
from models.deletion import delete_row, delete_rows
from models.integrity import (
    report_integrity_failure, try_set_child_ids, try_unlink_child
)
from utils.errors import NotFoundError
from utils.helpers import is_valid_id, load_id_list

logger = logging.getLogger(__name__)


def _get_active(db, table: str, row_id: str):
    """Fetch an active row or None (malformed ids never match)."""
    if not is_valid_id(row_id):
        return None
    return db.execute(
        f'SELECT * FROM {table} WHERE id = ? AND is_deleted = 0', (row_id,)
    ).fetchone()


def _delete_parent(db, table: str, row_id: str, label: str) -> None:
    """Delete and commit the entity the request targets."""
    try:
        deleted = delete_row(db, table, row_id)
        db.commit()
    except sqlite3.Error:
        db.rollback()
        raise
    if not deleted:
        raise NotFoundError(f'{label} not found')


def _delete_boat_availabilities(db, boat_id: str) -> int:
    """Delete every active availability of a boat and commit."""
    count = delete_rows(db, 'availabilities', 'boat_id = ?', (boat_id,))
    db.commit()
    return count


def delete_agency(agency_id: str) -> None:
    """
    Delete an agency and everything it owns.

    Each boat in boat_ids is deleted, then that boat's availability.

    Args:
        agency_id: Agency ID

    Raises:
        NotFoundError: if the agency is missing or already deleted
    """
    db = get_db()

    agency = _get_active(db, 'agencies', agency_id)
    if agency is None:
        raise NotFoundError('Agency not found')

    boat_ids = load_id_list(agency['boat_ids'])
    _delete_parent(db, 'agencies', agency_id, 'Agency')
    logger.info(f'Deleted agency {agency_id}, cascading to {len(boat_ids)} boats')

    for boat_id in boat_ids:
        try:
            if not delete_row(db, 'boats', boat_id):
                logger.error(
                    f'Boat {boat_id} listed on agency {agency_id} was not active'
                )
            db.commit()
        except sqlite3.Error as e:
            db.rollback()
            report_integrity_failure(
                f'Failed to delete boat {boat_id} after deleting agency {agency_id}', e
            )

        try:
            count = _delete_boat_availabilities(db, boat_id)
            logger.debug(f'Deleted {count} availability records of boat {boat_id}')
        except sqlite3.Error as e:
            db.rollback()
            report_integrity_failure(
                f'Failed to delete availability of boat {boat_id} '
                f'after deleting agency {agency_id}', e
            )


def delete_boat(boat_id: str) -> None:
    """
    Delete a boat, unlink it from its agency and delete its availability.

    Raises:
        NotFoundError: if the boat is missing or already deleted
    """
    db = get_db()

    boat = _get_active(db, 'boats', boat_id)
    if boat is None:
        raise NotFoundError('Boat not found')

    _delete_parent(db, 'boats', boat_id, 'Boat')
    try_unlink_child(db, 'agencies', boat['agency_id'], boat_id)

    try:
        _delete_boat_availabilities(db, boat_id)
    except sqlite3.Error as e:
        db.rollback()
        report_integrity_failure(
            f'Failed to delete availability after deleting boat {boat_id}', e
        )


def delete_availability(availability_id: str) -> None:
    """
    Delete one availability record and unlink it from its boat.

    Raises:
        NotFoundError: if the record is missing or already deleted
    """
    db = get_db()

    availability = _get_active(db, 'availabilities', availability_id)
    if availability is None:
        raise NotFoundError('Availability not found')

    _delete_parent(db, 'availabilities', availability_id, 'Availability')
    try_unlink_child(db, 'boats', availability['boat_id'], availability_id)


def delete_availabilities_for_boat(boat_id: str) -> int:
    """
    Delete all availability of a boat and empty its availability_ids.

    Returns:
        Number of availability records deleted

    Raises:
        NotFoundError: if the boat is missing or deleted
    """
    db = get_db()

    if _get_active(db, 'boats', boat_id) is None:
        raise NotFoundError('Boat not found')

    try:
        count = _delete_boat_availabilities(db, boat_id)
    except sqlite3.Error:
        db.rollback()
        raise

    try_set_child_ids(db, 'boats', boat_id, [])
    logger.info(f'Deleted {count} availability records of boat {boat_id}')
    return count
