"""
Miscellaneous utility helper functions.
Provides identifier generation and JSON id-list handling.
"""

import json
import re
import secrets

ID_PATTERN = re.compile(r'^[0-9a-f]{24}$')


def generate_id() -> str:
    """
    Generate a new document identifier.

    Returns:
        24 lowercase hex characters
    """
    return secrets.token_hex(12)


def is_valid_id(value) -> bool:
    """Check that a value has the shape of a generated identifier."""
    return isinstance(value, str) and bool(ID_PATTERN.match(value))


def load_id_list(raw: str | None) -> list:
    """
    Decode a JSON id list column.

    Args:
        raw: Column value (JSON array text) or None

    Returns:
        List of id strings, empty for NULL/blank columns
    """
    if not raw:
        return []
    return list(json.loads(raw))


def dump_id_list(ids: list) -> str:
    """Encode an id list for storage."""
    return json.dumps(list(ids))
