"""
Rate data access functions.
Standalone dated price records, not attached to any boat.
"""

from database import get_db
from models.deletion import delete_row
from utils.datetime_helpers import to_calendar_day
from utils.errors import NotFoundError
from utils.helpers import generate_id, is_valid_id
from utils.serializers import serialize_rate

RATE_COLUMNS = {
    'baseRate': 'base_rate',
    'adultRate': 'adult_rate',
    'childRate': 'child_rate',
    'infantRate': 'infant_rate',
}


def get_all_rates() -> list:
    """Get all active rates ordered by date."""
    db = get_db()
    rows = db.execute(
        'SELECT * FROM rates WHERE is_deleted = 0 ORDER BY date, rowid'
    ).fetchall()
    return [serialize_rate(row) for row in rows]


def get_rate_by_id(rate_id: str) -> dict:
    """
    Get rate by ID.

    Raises:
        NotFoundError: if the rate is missing or deleted
    """
    row = None
    if is_valid_id(rate_id):
        db = get_db()
        row = db.execute(
            'SELECT * FROM rates WHERE id = ? AND is_deleted = 0', (rate_id,)
        ).fetchone()
    if row is None:
        raise NotFoundError('Rate not found')
    return serialize_rate(row)


def create_rate(date: str, base_rate: float, adult_rate: float,
                child_rate: float, infant_rate: float = 0) -> dict:
    """
    Create new rate.

    Args:
        date: ISO instant; stored as the local calendar day
        base_rate: Base price
        adult_rate: Price per adult
        child_rate: Price per child
        infant_rate: Price per infant (default 0)

    Returns:
        Created rate document
    """
    db = get_db()
    rate_id = generate_id()
    db.execute('''
        INSERT INTO rates (id, date, base_rate, adult_rate, child_rate, infant_rate)
        VALUES (?, ?, ?, ?, ?, ?)
    ''', (rate_id, to_calendar_day(date).isoformat(), base_rate, adult_rate,
          child_rate, infant_rate or 0))
    db.commit()
    return get_rate_by_id(rate_id)


def update_rate(rate_id: str, **fields) -> dict:
    """
    Update rate fields.

    Args:
        rate_id: Rate ID to update
        **fields: Validated API fields (date, baseRate, adultRate, childRate, infantRate)

    Returns:
        Updated rate document
    """
    get_rate_by_id(rate_id)

    updates = []
    values = []

    if 'date' in fields:
        updates.append('date = ?')
        values.append(to_calendar_day(fields['date']).isoformat())

    for field, column in RATE_COLUMNS.items():
        if field in fields:
            updates.append(f'{column} = ?')
            values.append(fields[field])

    if updates:
        values.append(rate_id)
        db = get_db()
        db.execute(f'''
            UPDATE rates
            SET {", ".join(updates)}, version = version + 1, updated_at = CURRENT_TIMESTAMP
            WHERE id = ? AND is_deleted = 0
        ''', values)
        db.commit()

    return get_rate_by_id(rate_id)


def delete_rate(rate_id: str) -> None:
    """
    Delete rate.

    Raises:
        NotFoundError: if the rate is missing or already deleted
    """
    if not is_valid_id(rate_id):
        raise NotFoundError('Rate not found')

    db = get_db()
    deleted = delete_row(db, 'rates', rate_id)
    db.commit()
    if not deleted:
        raise NotFoundError('Rate not found')
