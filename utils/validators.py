"""
Input validation helper functions.
Pure predicates and field checks applied before anything is persisted.

The check_* functions raise ValidationError with a message naming the
offending field; the validate_* functions return booleans.
"""

import math
import re

from utils.datetime_helpers import midnight_iso, parse_iso_instant, to_calendar_day
from utils.errors import ValidationError
from utils.helpers import is_valid_id

BOAT_TYPES = ('deluxe', 'premium', 'luxury')

REQUIRED_FIELDS = {
    'agency': ['name', 'phone'],
    'boat': ['numberOfBedrooms', 'boatType', 'minAdultsRequired', 'defaultBaseRate',
             'defaultAdultRate', 'defaultChildRate', 'agencyId'],
    'availability': ['date', 'isAvailable', 'baseRate', 'adultRate', 'childRate', 'boatId'],
    'rate': ['date', 'baseRate', 'adultRate', 'childRate'],
}

ISO_INSTANT_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$')
PHONE_PATTERN = re.compile(r'^[0-9]{10}$')

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 25

# SQLite INTEGER is a signed 64-bit value
MAX_INTEGER = 2 ** 63 - 1
MIN_INTEGER = -2 ** 63


def is_present(body: dict, field: str) -> bool:
    """
    Check that a field was supplied.

    Only absent keys and JSON null count as missing; 0, false and ""
    are present values.
    """
    return body.get(field) is not None


def check_required_fields(body: dict, entity: str) -> None:
    """
    Ensure every required field of an entity is present.

    Args:
        body: Request payload
        entity: Key into REQUIRED_FIELDS ('agency', 'boat', ...)

    Raises:
        ValidationError: naming the first missing field
    """
    for field in REQUIRED_FIELDS[entity]:
        if not is_present(body, field):
            raise ValidationError(f'Missing required field: {field}')


def normalize_phone(phone) -> str | None:
    """
    Normalize a phone value to its string form.

    Integers are stringified; anything that is not exactly 10 ASCII
    digits afterwards yields None.
    """
    if isinstance(phone, bool) or phone is None:
        return None
    if isinstance(phone, int):
        phone = str(phone)
    if not isinstance(phone, str):
        return None
    return phone if PHONE_PATTERN.match(phone) else None


def validate_phone(phone) -> bool:
    """Validate a 10-digit phone number."""
    return normalize_phone(phone) is not None


def validate_name(name) -> bool:
    """Validate an agency name length."""
    if not isinstance(name, str):
        return False
    return NAME_MIN_LENGTH <= len(name.strip()) <= NAME_MAX_LENGTH


def validate_date_string(value) -> bool:
    """
    Validate an ISO instant in 'YYYY-MM-DDTHH:mm:ss.sssZ' form.

    Args:
        value: Candidate date string

    Returns:
        True if the format matches and the instant exists on the calendar
    """
    if not isinstance(value, str) or not ISO_INSTANT_PATTERN.match(value):
        return False
    try:
        parse_iso_instant(value)
    except ValueError:
        return False
    return True


def is_number(value) -> bool:
    """
    True for values that can be stored as a SQLite number.

    Booleans, NaN, infinities and integers outside the 64-bit range are
    rejected; the JSON loader accepts all of them.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, int):
        return MIN_INTEGER <= value <= MAX_INTEGER
    return math.isfinite(value)


def check_number(body: dict, field: str, allow_negative: bool = False) -> None:
    """Ensure a supplied field is numeric (and non-negative unless allowed)."""
    value = body[field]
    if not is_number(value):
        raise ValidationError(f'{field} must be a number')
    if not allow_negative and value < 0:
        raise ValidationError(f'{field} must not be negative')


def check_agency_fields(body: dict) -> dict:
    """
    Validate the supplied agency fields.

    Returns:
        Dict of normalized values for the fields that were supplied
    """
    values = {}

    if is_present(body, 'name'):
        if not validate_name(body['name']):
            raise ValidationError(
                f'Name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters'
            )
        values['name'] = body['name'].strip()

    if is_present(body, 'phone'):
        phone = normalize_phone(body['phone'])
        if phone is None:
            raise ValidationError('Invalid phone number. Should be a 10-digit number')
        values['phone'] = phone

    return values


def check_boat_fields(body: dict) -> dict:
    """
    Validate the supplied boat fields (ranges, enum, numeric types).

    Returns:
        Dict of values for the fields that were supplied
    """
    values = {}

    if is_present(body, 'numberOfBedrooms'):
        bedrooms = body['numberOfBedrooms']
        if not is_number(bedrooms) or bedrooms < 0 or bedrooms > 10:
            raise ValidationError('Number of bedrooms must be between 0 and 10')
        values['numberOfBedrooms'] = bedrooms

    if is_present(body, 'boatType'):
        if body['boatType'] not in BOAT_TYPES:
            raise ValidationError(
                f'Boat type must be one of the following: {", ".join(BOAT_TYPES)}'
            )
        values['boatType'] = body['boatType']

    if is_present(body, 'minAdultsRequired'):
        min_adults = body['minAdultsRequired']
        if not is_number(min_adults) or min_adults <= 0:
            raise ValidationError('Minimum number of adults required must be greater than 0')
        values['minAdultsRequired'] = min_adults

    for field in ('defaultBaseRate', 'defaultAdultRate', 'defaultChildRate', 'defaultInfantRate'):
        if is_present(body, field):
            check_number(body, field)
            values[field] = body[field]

    return values


def check_rate_fields(body: dict) -> dict:
    """Validate the supplied baseRate/adultRate/childRate/infantRate fields."""
    values = {}
    for field in ('baseRate', 'adultRate', 'childRate', 'infantRate'):
        if is_present(body, field):
            check_number(body, field)
            values[field] = body[field]
    return values


def check_date(body: dict) -> str:
    """Ensure the 'date' field is a valid ISO instant and return it."""
    if not validate_date_string(body['date']):
        raise ValidationError('Invalid date format')
    # Days at the ends of the calendar can fall outside it once shifted to TIMEZONE
    try:
        midnight_iso(to_calendar_day(body['date']))
    except OverflowError:
        raise ValidationError('Invalid date format')
    return body['date']


def check_is_available(body: dict) -> bool:
    """Ensure 'isAvailable' is a real boolean, not a truthy string."""
    if not isinstance(body['isAvailable'], bool):
        raise ValidationError('isAvailable must be a boolean')
    return body['isAvailable']


def check_reference_id(body: dict, field: str) -> str:
    """
    Ensure a reference field holds a well-formed identifier.

    Raises:
        ValidationError: 'Invalid <field>'
    """
    value = body[field]
    if not is_valid_id(value):
        raise ValidationError(f'Invalid {field}')
    return value
