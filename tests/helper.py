"""
Shared request payloads and lookups for the API tests.
"""

from database import get_db


VALID_AGENCY = {
    'name': 'A Valid Boat Company',
    'phone': '9447888888',
}

VALID_BOAT = {
    'numberOfBedrooms': 2,
    'boatType': 'luxury',
    'minAdultsRequired': 2,
    'defaultBaseRate': 9000,
    'defaultAdultRate': 1500,
    'defaultChildRate': 750,
}

VALID_AVAILABILITY = {
    'date': '2024-02-15T00:00:00.000Z',
    'isAvailable': True,
    'baseRate': 12000,
    'adultRate': 700,
    'childRate': 300,
    'infantRate': 0,
}

VALID_RATE = {
    'date': '2023-09-02T00:00:00.000Z',
    'baseRate': 9000,
    'adultRate': 500,
    'childRate': 300,
    'infantRate': 0,
}


def row_version(table, row_id):
    """Version column of a row, deleted or not."""
    row = get_db().execute(f'SELECT version FROM {table} WHERE id = ?', (row_id,)).fetchone()
    return row[0] if row else None
