"""
repositories/property_repo.py
-----------------------------
Data access layer for property listings.
All SQL queries related to the `properties` table live here.
"""

from typing import Optional

from db.connection import dict_cursor, get_connection, release_connection
from models.property import Property
from repositories.property_filters import SearchOptions, build_property_search
from utils.logger import get_logger

logger = get_logger(__name__)


class PropertyRepository:
    """Repository for CRUD operations on the properties table."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, prop: Property) -> Property:
        """
        Insert a new property listing.

        Args:
            prop: The Property to persist. ``cost_per_night`` is in cents.

        Returns:
            The same Property with its `id` and `created_at` populated.

        Raises:
            psycopg2.IntegrityError: If ``owner_id`` does not reference a user.
        """
        sql = """
            INSERT INTO properties (
                owner_id, title, description, thumbnail_photo_url, cover_photo_url,
                cost_per_night, parking_spaces, number_of_bathrooms, number_of_bedrooms,
                country, street, city, province, post_code, active
            )
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
            RETURNING id, created_at;
        """
        conn = get_connection()
        try:
            with dict_cursor(conn) as cur:
                cur.execute(sql, (
                    prop.owner_id, prop.title, prop.description,
                    prop.thumbnail_photo_url, prop.cover_photo_url,
                    prop.cost_per_night, prop.parking_spaces,
                    prop.number_of_bathrooms, prop.number_of_bedrooms,
                    prop.country, prop.street, prop.city, prop.province,
                    prop.post_code, prop.active,
                ))
                row = cur.fetchone()
                prop.id = row["id"]
                prop.created_at = row["created_at"]
            conn.commit()
            logger.info(f"Added property #{prop.id} for owner {prop.owner_id}")
            return prop
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to add property: {e}")
            raise
        finally:
            release_connection(conn)

    # ── READ ──────────────────────────────────────────────

    def search(self, options: SearchOptions = None, limit: Optional[int] = None) -> list[Property]:
        """
        Search properties with optional filters, cheapest first.

        Args:
            options: City, owner, dollar price range and minimum rating filters.
            limit: Maximum number of rows (clamped to the configured range).

        Returns:
            List of Property objects with `average_rating` populated.
        """
        sql, params = build_property_search(options, limit)
        logger.debug(f"Property search: {sql} {params}")

        conn = get_connection()
        try:
            with dict_cursor(conn) as cur:
                cur.execute(sql, params)
                return [self.row_to_property(r) for r in cur.fetchall()]
        finally:
            release_connection(conn)

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def row_to_property(row: dict) -> Property:
        """Convert a database row to a Property domain object."""
        rating = row.get("average_rating")
        return Property(
            id=row["id"],
            owner_id=row["owner_id"],
            title=row["title"],
            description=row["description"],
            thumbnail_photo_url=row.get("thumbnail_photo_url"),
            cover_photo_url=row.get("cover_photo_url"),
            cost_per_night=int(row["cost_per_night"]),
            parking_spaces=row["parking_spaces"],
            number_of_bathrooms=row["number_of_bathrooms"],
            number_of_bedrooms=row["number_of_bedrooms"],
            country=row["country"],
            street=row["street"],
            city=row["city"],
            province=row.get("province"),
            post_code=row["post_code"],
            active=row["active"],
            created_at=row.get("created_at"),
            average_rating=float(rating) if rating is not None else None,
        )
