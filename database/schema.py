"""
Database schema definitions.
Table creation, indexes, and structure management.

Agencies and boats keep their children as JSON-encoded id lists
(boat_ids, availability_ids). Children also point back to their parent
(agency_id, boat_id), so both sides must be written on every structural
change.
"""


TABLES = [
    'rates',
    'availabilities',
    'boats',
    'agencies',
]


def drop_tables(db):
    """Drop all existing tables."""
    db.execute('PRAGMA foreign_keys = OFF')

    for table in TABLES:
        db.execute(f'DROP TABLE IF EXISTS {table}')

    db.execute('PRAGMA foreign_keys = ON')


def create_tables(db):
    """Create all database tables."""

    db.execute('''
        CREATE TABLE agencies (
            id TEXT PRIMARY KEY,
            name TEXT NOT NULL,
            phone TEXT NOT NULL,
            boat_ids TEXT NOT NULL DEFAULT '[]',
            version INTEGER NOT NULL DEFAULT 0,
            is_deleted INTEGER NOT NULL DEFAULT 0,
            deleted_at TIMESTAMP,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    ''')

    # agency_id is not a foreign key: soft-deleted and hard-deleted parents
    # are both handled by the cascade code, not by SQLite.
    db.execute('''
        CREATE TABLE boats (
            id TEXT PRIMARY KEY,
            number_of_bedrooms INTEGER NOT NULL,
            boat_type TEXT NOT NULL CHECK(boat_type IN ('deluxe', 'premium', 'luxury')),
            min_adults_required INTEGER NOT NULL,
            default_base_rate REAL NOT NULL,
            default_adult_rate REAL NOT NULL,
            default_child_rate REAL NOT NULL,
            default_infant_rate REAL NOT NULL DEFAULT 0,
            agency_id TEXT NOT NULL,
            availability_ids TEXT NOT NULL DEFAULT '[]',
            version INTEGER NOT NULL DEFAULT 0,
            is_deleted INTEGER NOT NULL DEFAULT 0,
            deleted_at TIMESTAMP,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    ''')

    db.execute('''
        CREATE TABLE availabilities (
            id TEXT PRIMARY KEY,
            date DATE NOT NULL,
            is_available INTEGER NOT NULL,
            base_rate REAL NOT NULL,
            adult_rate REAL NOT NULL,
            child_rate REAL NOT NULL,
            infant_rate REAL NOT NULL DEFAULT 0,
            boat_id TEXT NOT NULL,
            version INTEGER NOT NULL DEFAULT 0,
            is_deleted INTEGER NOT NULL DEFAULT 0,
            deleted_at TIMESTAMP,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    ''')

    db.execute('''
        CREATE TABLE rates (
            id TEXT PRIMARY KEY,
            date DATE NOT NULL,
            base_rate REAL NOT NULL,
            adult_rate REAL NOT NULL,
            child_rate REAL NOT NULL,
            infant_rate REAL NOT NULL DEFAULT 0,
            version INTEGER NOT NULL DEFAULT 0,
            is_deleted INTEGER NOT NULL DEFAULT 0,
            deleted_at TIMESTAMP,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    ''')


def create_indexes(db):
    """Create indexes for the lookups the cascades depend on."""
    indexes = [
        'CREATE INDEX IF NOT EXISTS idx_agencies_phone ON agencies(phone, is_deleted)',
        'CREATE INDEX IF NOT EXISTS idx_boats_agency ON boats(agency_id, is_deleted)',
        'CREATE INDEX IF NOT EXISTS idx_availabilities_boat ON availabilities(boat_id, is_deleted)',
        'CREATE INDEX IF NOT EXISTS idx_availabilities_date ON availabilities(date)',
        'CREATE INDEX IF NOT EXISTS idx_rates_date ON rates(date)',
    ]

    for statement in indexes:
        db.execute(statement)
