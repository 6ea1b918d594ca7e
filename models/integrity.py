"""
Parent/child id-list maintenance.

Agencies list their boats in boat_ids and boats list their availability
in availability_ids. Children carry the parent id as well, so every
structural change has to update both documents. The list update is a
read-modify-write of the parent row: two writers racing on the same
parent can drop each other's change.
"""

import logging
import sqlite3

from utils.errors import IntegrityWarning, NotFoundError
from utils.helpers import dump_id_list, load_id_list

logger = logging.getLogger(__name__)

# parent table -> column holding the ordered child ids
CHILD_LISTS = {
    'agencies': 'boat_ids',
    'boats': 'availability_ids',
}


def get_child_ids(db, parent_table: str, parent_id: str) -> list:
    """
    Read a parent's child-id list.

    Raises:
        NotFoundError: if the parent is missing or deleted
    """
    column = CHILD_LISTS[parent_table]
    row = db.execute(
        f'SELECT {column} FROM {parent_table} WHERE id = ? AND is_deleted = 0',
        (parent_id,)
    ).fetchone()
    if row is None:
        raise NotFoundError(f'{parent_table} row {parent_id} not found')
    return load_id_list(row[column])


def set_child_ids(db, parent_table: str, parent_id: str, child_ids: list) -> None:
    """
    Replace a parent's child-id list and bump its version.

    Raises:
        NotFoundError: if the parent is missing or deleted
    """
    column = CHILD_LISTS[parent_table]
    cursor = db.execute(
        f'''UPDATE {parent_table}
            SET {column} = ?, version = version + 1, updated_at = CURRENT_TIMESTAMP
            WHERE id = ? AND is_deleted = 0''',
        (dump_id_list(child_ids), parent_id)
    )
    if cursor.rowcount == 0:
        raise NotFoundError(f'{parent_table} row {parent_id} not found')


def link_child(db, parent_table: str, parent_id: str, child_id: str) -> list:
    """
    Append a child id to the parent's list and persist the parent.

    Returns:
        The updated child-id list
    """
    child_ids = get_child_ids(db, parent_table, parent_id)
    child_ids.append(child_id)
    set_child_ids(db, parent_table, parent_id, child_ids)
    db.commit()
    return child_ids


def unlink_child(db, parent_table: str, parent_id: str, child_id: str) -> list:
    """
    Remove a child id from the parent's list by value and persist the parent.

    Returns:
        The updated child-id list
    """
    child_ids = [cid for cid in get_child_ids(db, parent_table, parent_id) if cid != child_id]
    set_child_ids(db, parent_table, parent_id, child_ids)
    db.commit()
    return child_ids


def report_integrity_failure(message: str, error: Exception) -> None:
    """Log a failed link/unlink/cascade step; the caller carries on."""
    logger.error(f'{IntegrityWarning.__name__}: {message}: {error}')


def try_link_child(db, parent_table: str, parent_id: str, child_id: str) -> bool:
    """
    link_child that logs instead of raising.

    The child write has already been committed and is not rolled back.
    """
    try:
        link_child(db, parent_table, parent_id, child_id)
        return True
    except (sqlite3.Error, NotFoundError) as e:
        db.rollback()
        report_integrity_failure(
            f'Failed to link {child_id} to {parent_table} {parent_id}', e
        )
        return False


def try_unlink_child(db, parent_table: str, parent_id: str, child_id: str) -> bool:
    """unlink_child that logs instead of raising."""
    try:
        unlink_child(db, parent_table, parent_id, child_id)
        return True
    except (sqlite3.Error, NotFoundError) as e:
        db.rollback()
        report_integrity_failure(
            f'Failed to unlink {child_id} from {parent_table} {parent_id}', e
        )
        return False


def try_set_child_ids(db, parent_table: str, parent_id: str, child_ids: list) -> bool:
    """set_child_ids + commit that logs instead of raising."""
    try:
        set_child_ids(db, parent_table, parent_id, child_ids)
        db.commit()
        return True
    except (sqlite3.Error, NotFoundError) as e:
        db.rollback()
        report_integrity_failure(
            f'Failed to set {CHILD_LISTS[parent_table]} on {parent_table} {parent_id}', e
        )
        return False
