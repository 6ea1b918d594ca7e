"""
Availability data access functions.
Handles per-day availability/rate records of a boat.
"""

import logging

from database import get_db
from models import cascade
from models.boat import get_boat_row
from models.integrity import try_link_child
from utils.datetime_helpers import to_calendar_day
from utils.errors import NotFoundError
from utils.helpers import generate_id, is_valid_id
from utils.serializers import serialize_availability

logger = logging.getLogger(__name__)

# API field -> column; date and boatId are fixed at creation
UPDATABLE_COLUMNS = {
    'isAvailable': 'is_available',
    'baseRate': 'base_rate',
    'adultRate': 'adult_rate',
    'childRate': 'child_rate',
    'infantRate': 'infant_rate',
}


def get_all_availabilities() -> list:
    """
    Get all active availability records.

    Returns:
        List of availability documents ordered by date
    """
    db = get_db()
    rows = db.execute('''
        SELECT * FROM availabilities
        WHERE is_deleted = 0
        ORDER BY date, rowid
    ''').fetchall()
    return [serialize_availability(row) for row in rows]


def get_availability_row(availability_id: str):
    """Get the raw active availability row, or None."""
    if not is_valid_id(availability_id):
        return None
    db = get_db()
    return db.execute(
        'SELECT * FROM availabilities WHERE id = ? AND is_deleted = 0', (availability_id,)
    ).fetchone()


def get_availability_by_id(availability_id: str) -> dict:
    """
    Get availability by ID.

    Raises:
        NotFoundError: if the record is missing or deleted
    """
    row = get_availability_row(availability_id)
    if row is None:
        raise NotFoundError('Availability not found')
    return serialize_availability(row)


def get_availabilities_by_boat(boat_id: str) -> list:
    """
    Get the active availability of one boat.

    Raises:
        NotFoundError: if the boat is missing or deleted
    """
    if get_boat_row(boat_id) is None:
        raise NotFoundError('Boat not found')

    db = get_db()
    rows = db.execute('''
        SELECT * FROM availabilities
        WHERE boat_id = ? AND is_deleted = 0
        ORDER BY date, rowid
    ''', (boat_id,)).fetchall()
    return [serialize_availability(row) for row in rows]


def create_availability(
    boat_id: str,
    date: str,
    is_available: bool,
    base_rate: float,
    adult_rate: float,
    child_rate: float,
    infant_rate: float = 0
) -> dict:
    """
    Create one availability record and link it to its boat.

    Args:
        boat_id: Owning boat (well-formed id)
        date: ISO instant; stored as the local calendar day
        is_available: Whether the boat can be booked that day
        base_rate: Base price
        adult_rate: Price per adult
        child_rate: Price per child
        infant_rate: Price per infant (default 0)

    Returns:
        Created availability document

    Raises:
        NotFoundError: if the boat is missing or deleted
    """
    if get_boat_row(boat_id) is None:
        raise NotFoundError('Boat not found')

    db = get_db()
    availability_id = generate_id()
    db.execute('''
        INSERT INTO availabilities (id, date, is_available, base_rate, adult_rate,
                                    child_rate, infant_rate, boat_id)
        VALUES (?, ?, ?, ?, ?, ?, ?, ?)
    ''', (
        availability_id,
        to_calendar_day(date).isoformat(),
        1 if is_available else 0,
        base_rate,
        adult_rate,
        child_rate,
        infant_rate or 0,
        boat_id,
    ))
    db.commit()

    try_link_child(db, 'boats', boat_id, availability_id)
    return get_availability_by_id(availability_id)


def update_availability(availability_id: str, **fields) -> dict:
    """
    Partially update an availability record.

    Args:
        availability_id: Record to update
        **fields: Validated API fields (isAvailable, baseRate, adultRate,
                  childRate, infantRate). date and boatId are ignored.

    Returns:
        Updated availability document

    Raises:
        NotFoundError: if the record is missing or deleted
    """
    if get_availability_row(availability_id) is None:
        raise NotFoundError('Availability not found')

    updates = []
    values = []

    for field, column in UPDATABLE_COLUMNS.items():
        if field in fields:
            updates.append(f'{column} = ?')
            value = fields[field]
            values.append(int(value) if field == 'isAvailable' else value)

    if updates:
        values.append(availability_id)
        db = get_db()
        db.execute(f'''
            UPDATE availabilities
            SET {", ".join(updates)}, version = version + 1, updated_at = CURRENT_TIMESTAMP
            WHERE id = ? AND is_deleted = 0
        ''', values)
        db.commit()

    return get_availability_by_id(availability_id)


def delete_availability(availability_id: str) -> None:
    """
    Delete one availability record and unlink it from its boat.

    Raises:
        NotFoundError: if the record is missing or already deleted
    """
    cascade.delete_availability(availability_id)


def delete_availabilities_by_boat(boat_id: str) -> int:
    """
    Delete all availability of a boat.

    Returns:
        Number of records deleted

    Raises:
        NotFoundError: if the boat is missing or deleted
    """
    return cascade.delete_availabilities_for_boat(boat_id)
