"""
Delete strategies shared by agencies, boats, availabilities and rates.

'soft' flags rows with is_deleted/deleted_at, 'hard' removes them. Both
only ever touch active rows, so deleting twice affects nothing the second
time. Every read in the model layer filters on is_deleted = 0, which keeps
the two strategies indistinguishable to callers.
"""

from flask import current_app

from utils.datetime_helpers import utc_timestamp

SOFT = 'soft'
HARD = 'hard'
STRATEGIES = (SOFT, HARD)


def get_delete_strategy() -> str:
    """
    Get the configured delete strategy.

    Raises:
        ValueError: if DELETE_STRATEGY is not 'soft' or 'hard'
    """
    strategy = current_app.config.get('DELETE_STRATEGY', SOFT)
    if strategy not in STRATEGIES:
        raise ValueError(f'Unknown DELETE_STRATEGY: {strategy!r}')
    return strategy


def delete_rows(db, table: str, where: str, params: tuple) -> int:
    """
    Mark or remove the active rows of a table matching a condition.

    Does not commit; the caller decides where the unit of work ends.

    Args:
        db: Database connection
        table: Table name (trusted, never user input)
        where: SQL condition without the WHERE keyword
        params: Parameters for the condition

    Returns:
        Number of rows affected
    """
    if get_delete_strategy() == HARD:
        cursor = db.execute(
            f'DELETE FROM {table} WHERE is_deleted = 0 AND ({where})', params
        )
    else:
        cursor = db.execute(
            f'''UPDATE {table}
                SET is_deleted = 1, deleted_at = ?, version = version + 1,
                    updated_at = CURRENT_TIMESTAMP
                WHERE is_deleted = 0 AND ({where})''',
            (utc_timestamp(), *params)
        )
    return cursor.rowcount


def delete_row(db, table: str, row_id: str) -> bool:
    """Mark or remove a single active row by id."""
    return delete_rows(db, table, 'id = ?', (row_id,)) > 0
