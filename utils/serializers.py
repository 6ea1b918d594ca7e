"""
Row to JSON document conversion.

Columns are snake_case in SQLite and camelCase on the wire. Bookkeeping
columns (version, is_deleted, deleted_at, timestamps) never leave the
service.
"""

from utils.datetime_helpers import midnight_iso
from utils.helpers import load_id_list


def _number(value):
    """Return whole floats as ints so 9000.0 is sent as 9000."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def serialize_agency(row) -> dict:
    """Convert an agencies row to its API document."""
    return {
        'id': row['id'],
        'name': row['name'],
        'phone': row['phone'],
        'boatIds': load_id_list(row['boat_ids']),
    }


def serialize_boat(row) -> dict:
    """Convert a boats row to its API document."""
    return {
        'id': row['id'],
        'numberOfBedrooms': row['number_of_bedrooms'],
        'boatType': row['boat_type'],
        'minAdultsRequired': row['min_adults_required'],
        'defaultBaseRate': _number(row['default_base_rate']),
        'defaultAdultRate': _number(row['default_adult_rate']),
        'defaultChildRate': _number(row['default_child_rate']),
        'defaultInfantRate': _number(row['default_infant_rate']),
        'agencyId': row['agency_id'],
        'availabilityIds': load_id_list(row['availability_ids']),
    }


def serialize_availability(row) -> dict:
    """Convert an availabilities row to its API document."""
    return {
        'id': row['id'],
        'date': midnight_iso(row['date']),
        'isAvailable': bool(row['is_available']),
        'baseRate': _number(row['base_rate']),
        'adultRate': _number(row['adult_rate']),
        'childRate': _number(row['child_rate']),
        'infantRate': _number(row['infant_rate']),
        'boatId': row['boat_id'],
    }


def serialize_rate(row) -> dict:
    """Convert a rates row to its API document."""
    return {
        'id': row['id'],
        'date': midnight_iso(row['date']),
        'baseRate': _number(row['base_rate']),
        'adultRate': _number(row['adult_rate']),
        'childRate': _number(row['child_rate']),
        'infantRate': _number(row['infant_rate']),
    }
