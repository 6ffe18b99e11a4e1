"""
db/init_db.py
-------------
Creates (or drops) the LightBnB database schema.
Run this module directly to initialize a fresh database:
    python -m db.init_db
    python -m db.init_db --reset
"""

import sys

from db.connection import connection_scope
from utils.logger import get_logger

logger = get_logger(__name__)

# Money columns hold integer cents.
SCHEMA_SQL = """
-- Users table: guests and property owners
CREATE TABLE IF NOT EXISTS users (
    id              SERIAL PRIMARY KEY,
    name            VARCHAR(255) NOT NULL,
    email           VARCHAR(255) UNIQUE NOT NULL,
    password        VARCHAR(255) NOT NULL,
    created_at      TIMESTAMPTZ DEFAULT NOW()
);

-- Properties table: listings, each owned by exactly one user
CREATE TABLE IF NOT EXISTS properties (
    id                  SERIAL PRIMARY KEY,
    owner_id            INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
    title               VARCHAR(255) NOT NULL,
    description         TEXT NOT NULL DEFAULT '',
    thumbnail_photo_url VARCHAR(255),
    cover_photo_url     VARCHAR(255),
    cost_per_night      INTEGER NOT NULL DEFAULT 0 CHECK (cost_per_night >= 0),
    parking_spaces      INTEGER NOT NULL DEFAULT 0,
    number_of_bathrooms INTEGER NOT NULL DEFAULT 0,
    number_of_bedrooms  INTEGER NOT NULL DEFAULT 0,
    country             VARCHAR(100) NOT NULL,
    street              VARCHAR(255) NOT NULL,
    city                VARCHAR(100) NOT NULL,
    province            VARCHAR(100),
    post_code           VARCHAR(20) NOT NULL,
    active              BOOLEAN NOT NULL DEFAULT TRUE,
    created_at          TIMESTAMPTZ DEFAULT NOW()
);

-- Reservations table: a guest's stay at a property
CREATE TABLE IF NOT EXISTS reservations (
    id              SERIAL PRIMARY KEY,
    start_date      DATE NOT NULL,
    end_date        DATE NOT NULL,
    property_id     INTEGER NOT NULL REFERENCES properties(id) ON DELETE CASCADE,
    guest_id        INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
    total_cost      INTEGER NOT NULL CHECK (total_cost >= 0),
    created_at      TIMESTAMPTZ DEFAULT NOW(),
    CHECK (end_date > start_date)
);

-- Property reviews table: source of the average_rating aggregate
CREATE TABLE IF NOT EXISTS property_reviews (
    id              SERIAL PRIMARY KEY,
    guest_id        INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
    property_id     INTEGER NOT NULL REFERENCES properties(id) ON DELETE CASCADE,
    reservation_id  INTEGER NOT NULL REFERENCES reservations(id) ON DELETE CASCADE,
    rating          SMALLINT NOT NULL CHECK (rating BETWEEN 1 AND 5),
    message         TEXT
);

-- Indexes for the search and listing queries
CREATE INDEX IF NOT EXISTS idx_properties_city ON properties(city);
CREATE INDEX IF NOT EXISTS idx_properties_owner ON properties(owner_id);
CREATE INDEX IF NOT EXISTS idx_reservations_guest ON reservations(guest_id, start_date);
CREATE INDEX IF NOT EXISTS idx_reviews_property ON property_reviews(property_id);
"""

# Children first so the CASCADE only ever has to clean up indexes.
DROP_SQL = """
DROP TABLE IF EXISTS property_reviews CASCADE;
DROP TABLE IF EXISTS reservations CASCADE;
DROP TABLE IF EXISTS properties CASCADE;
DROP TABLE IF EXISTS users CASCADE;
"""


def _execute_script(sql: str, verb: str) -> None:
    try:
        with connection_scope() as conn:
            with conn.cursor() as cur:
                cur.execute(sql)
    except Exception as e:
        logger.error(f"Failed to {verb} schema: {e}")
        raise
    logger.info(f"Database schema {verb} finished successfully.")


def create_tables() -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    _execute_script(SCHEMA_SQL, "create")


def drop_tables() -> None:
    """Drop every LightBnB table. All data is lost."""
    _execute_script(DROP_SQL, "drop")


def reset_tables() -> None:
    """Drop and recreate the schema."""
    drop_tables()
    create_tables()


if __name__ == "__main__":
    from db.connection import init_pool, close_pool
    init_pool()
    try:
        if "--reset" in sys.argv[1:]:
            reset_tables()
        else:
            create_tables()
    finally:
        close_pool()
    print("Database schema created successfully.")
