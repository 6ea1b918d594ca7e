"""
Boat data access functions.
Handles boat CRUD operations.

Creating a boat links it to its agency and generates its default
availability calendar; deleting one goes through models.cascade.
"""

import logging

from database import get_db
from models import cascade
from models.agency import get_agency_row
from models.availability_generator import generate_default_availability
from models.integrity import try_link_child
from utils.errors import NotFoundError
from utils.helpers import dump_id_list, generate_id, is_valid_id
from utils.serializers import serialize_boat

logger = logging.getLogger(__name__)

# API field -> column
BOAT_COLUMNS = {
    'numberOfBedrooms': 'number_of_bedrooms',
    'boatType': 'boat_type',
    'minAdultsRequired': 'min_adults_required',
    'defaultBaseRate': 'default_base_rate',
    'defaultAdultRate': 'default_adult_rate',
    'defaultChildRate': 'default_child_rate',
    'defaultInfantRate': 'default_infant_rate',
}


def get_all_boats() -> list:
    """
    Get all active boats.

    Returns:
        List of boat documents in creation order
    """
    db = get_db()
    rows = db.execute('''
        SELECT * FROM boats
        WHERE is_deleted = 0
        ORDER BY created_at, rowid
    ''').fetchall()
    return [serialize_boat(row) for row in rows]


def get_boat_row(boat_id: str):
    """
    Get the raw active boat row.

    Returns:
        sqlite3.Row or None if not found, deleted, or the id is malformed
    """
    if not is_valid_id(boat_id):
        return None
    db = get_db()
    return db.execute(
        'SELECT * FROM boats WHERE id = ? AND is_deleted = 0', (boat_id,)
    ).fetchone()


def get_boat_by_id(boat_id: str) -> dict:
    """
    Get boat by ID, with its agency summary when the agency is active.

    Raises:
        NotFoundError: if the boat is missing or deleted
    """
    row = get_boat_row(boat_id)
    if row is None:
        raise NotFoundError('Boat not found')

    boat = serialize_boat(row)
    agency = get_agency_row(row['agency_id'])
    if agency is not None:
        boat['agency'] = {
            'id': agency['id'],
            'name': agency['name'],
            'phone': agency['phone'],
        }
    return boat


def create_boat(agency_id: str, **fields) -> dict:
    """
    Create a boat under an existing agency.

    The boat row is committed first, then its id is appended to the
    agency's boat_ids and the default availability is generated. Failures
    in the last two steps are logged and the boat is still returned.

    Args:
        agency_id: Owning agency (well-formed id)
        **fields: Validated API fields (numberOfBedrooms, boatType, ...)

    Returns:
        Created boat document, availabilityIds included

    Raises:
        NotFoundError: if the agency is missing or deleted
    """
    if get_agency_row(agency_id) is None:
        raise NotFoundError('Agency not found')

    db = get_db()
    boat_id = generate_id()
    db.execute('''
        INSERT INTO boats (id, number_of_bedrooms, boat_type, min_adults_required,
                           default_base_rate, default_adult_rate, default_child_rate,
                           default_infant_rate, agency_id, availability_ids)
        VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
    ''', (
        boat_id,
        fields['numberOfBedrooms'],
        fields['boatType'],
        fields['minAdultsRequired'],
        fields['defaultBaseRate'],
        fields['defaultAdultRate'],
        fields['defaultChildRate'],
        fields.get('defaultInfantRate') or 0,
        agency_id,
        dump_id_list([]),
    ))
    db.commit()
    logger.info(f'Created boat {boat_id} for agency {agency_id}')

    try_link_child(db, 'agencies', agency_id, boat_id)

    boat_row = get_boat_row(boat_id)
    generated = generate_default_availability(db, boat_row)
    logger.info(f'Generated {len(generated)} availability records for boat {boat_id}')

    return serialize_boat(get_boat_row(boat_id))


def update_boat(boat_id: str, **fields) -> dict:
    """
    Update boat fields.

    Args:
        boat_id: Boat ID to update
        **fields: Validated API fields. agencyId and availabilityIds are
                  not updatable and are ignored.

    Returns:
        Updated boat document

    Raises:
        NotFoundError: if the boat is missing or deleted
    """
    if get_boat_row(boat_id) is None:
        raise NotFoundError('Boat not found')

    updates = []
    values = []

    for field, column in BOAT_COLUMNS.items():
        if field in fields:
            updates.append(f'{column} = ?')
            values.append(fields[field])

    if updates:
        values.append(boat_id)
        db = get_db()
        db.execute(f'''
            UPDATE boats
            SET {", ".join(updates)}, version = version + 1, updated_at = CURRENT_TIMESTAMP
            WHERE id = ? AND is_deleted = 0
        ''', values)
        db.commit()

    return serialize_boat(get_boat_row(boat_id))


def delete_boat(boat_id: str) -> None:
    """
    Delete a boat, unlink it from its agency and delete its availability.

    Raises:
        NotFoundError: if the boat is missing or already deleted
    """
    cascade.delete_boat(boat_id)
