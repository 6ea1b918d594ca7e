"""
Agency data access functions.
Handles agency CRUD operations; deletion cascades through models.cascade.
"""

import logging

from database import get_db
from models import cascade
from utils.errors import NotFoundError, ValidationError
from utils.helpers import dump_id_list, generate_id, is_valid_id, load_id_list
from utils.serializers import serialize_agency, serialize_boat

logger = logging.getLogger(__name__)


def get_all_agencies() -> list:
    """
    Get all active agencies.

    Returns:
        List of agency documents in creation order
    """
    db = get_db()
    rows = db.execute('''
        SELECT * FROM agencies
        WHERE is_deleted = 0
        ORDER BY created_at, rowid
    ''').fetchall()
    return [serialize_agency(row) for row in rows]


def get_agency_row(agency_id: str):
    """
    Get the raw active agency row.

    Returns:
        sqlite3.Row or None if not found, deleted, or the id is malformed
    """
    if not is_valid_id(agency_id):
        return None
    db = get_db()
    return db.execute(
        'SELECT * FROM agencies WHERE id = ? AND is_deleted = 0', (agency_id,)
    ).fetchone()


def get_agency_by_id(agency_id: str) -> dict:
    """
    Get agency by ID.

    Raises:
        NotFoundError: if the agency is missing or deleted
    """
    row = get_agency_row(agency_id)
    if row is None:
        raise NotFoundError('Agency not found')
    return serialize_agency(row)


def get_agency_with_boats(agency_id: str) -> dict:
    """
    Get agency by ID with its boats populated.

    Boats are returned in boat_ids order; ids that no longer resolve to
    an active boat are skipped.

    Raises:
        NotFoundError: if the agency is missing or deleted
    """
    row = get_agency_row(agency_id)
    if row is None:
        raise NotFoundError('Agency not found')

    agency = serialize_agency(row)
    boat_ids = load_id_list(row['boat_ids'])

    boats_by_id = {}
    if boat_ids:
        placeholders = ', '.join('?' for _ in boat_ids)
        db = get_db()
        rows = db.execute(
            f'SELECT * FROM boats WHERE is_deleted = 0 AND id IN ({placeholders})',
            boat_ids
        ).fetchall()
        boats_by_id = {r['id']: serialize_boat(r) for r in rows}

    agency['boats'] = [boats_by_id[bid] for bid in boat_ids if bid in boats_by_id]
    return agency


def phone_in_use(phone: str, exclude_id: str = None) -> bool:
    """
    Check whether an active agency already uses a phone number.

    Args:
        phone: Normalized 10-digit phone
        exclude_id: Agency to ignore (the one being updated)
    """
    db = get_db()
    query = 'SELECT 1 FROM agencies WHERE phone = ? AND is_deleted = 0'
    params = [phone]
    if exclude_id:
        query += ' AND id != ?'
        params.append(exclude_id)
    return db.execute(query, params).fetchone() is not None


def create_agency(name: str, phone: str) -> dict:
    """
    Create new agency with an empty boat list.

    Args:
        name: Validated agency name
        phone: Normalized 10-digit phone

    Returns:
        Created agency document

    Raises:
        ValidationError: if the phone is already used by another agency
    """
    if phone_in_use(phone):
        raise ValidationError('Phone number already in use')

    db = get_db()
    agency_id = generate_id()
    db.execute('''
        INSERT INTO agencies (id, name, phone, boat_ids)
        VALUES (?, ?, ?, ?)
    ''', (agency_id, name, phone, dump_id_list([])))
    db.commit()

    logger.info(f'Created agency {agency_id}')
    return get_agency_by_id(agency_id)


def update_agency(agency_id: str, **kwargs) -> dict:
    """
    Update agency fields.

    Args:
        agency_id: Agency ID to update
        **kwargs: Fields to update (name, phone). boat_ids is maintained
                  by boat creation/deletion and cannot be set here.

    Returns:
        Updated agency document

    Raises:
        NotFoundError: if the agency is missing or deleted
        ValidationError: if the new phone is used by another agency
    """
    if get_agency_row(agency_id) is None:
        raise NotFoundError('Agency not found')

    if 'phone' in kwargs and phone_in_use(kwargs['phone'], exclude_id=agency_id):
        raise ValidationError('Phone number already in use')

    allowed_fields = ['name', 'phone']
    updates = []
    values = []

    for field in allowed_fields:
        if field in kwargs:
            updates.append(f'{field} = ?')
            values.append(kwargs[field])

    if updates:
        values.append(agency_id)
        db = get_db()
        db.execute(f'''
            UPDATE agencies
            SET {", ".join(updates)}, version = version + 1, updated_at = CURRENT_TIMESTAMP
            WHERE id = ? AND is_deleted = 0
        ''', values)
        db.commit()

    return get_agency_by_id(agency_id)


def delete_agency(agency_id: str) -> None:
    """
    Delete an agency, its boats and their availability.

    Raises:
        NotFoundError: if the agency is missing or already deleted
    """
    cascade.delete_agency(agency_id)
