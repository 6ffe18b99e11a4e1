"""
repositories/reservation_repo.py
--------------------------------
Data access layer for reservations.
All SQL queries related to the `reservations` table live here.
"""

from typing import Optional

from db.connection import dict_cursor, get_connection, release_connection
from models.reservation import Reservation
from repositories.property_filters import normalize_limit
from repositories.property_repo import PropertyRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class ReservationRepository:
    """Repository for CRUD operations on the reservations table."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, reservation: Reservation) -> Reservation:
        """
        Insert a new reservation.

        Args:
            reservation: The Reservation to persist. ``total_cost`` is in cents.

        Returns:
            The same Reservation with its `id` and `created_at` populated.

        Raises:
            psycopg2.IntegrityError: On unknown property/guest or end_date <= start_date.
        """
        sql = """
            INSERT INTO reservations (start_date, end_date, property_id, guest_id, total_cost)
            VALUES (%s, %s, %s, %s, %s)
            RETURNING id, created_at;
        """
        conn = get_connection()
        try:
            with dict_cursor(conn) as cur:
                cur.execute(sql, (
                    reservation.start_date, reservation.end_date,
                    reservation.property_id, reservation.guest_id,
                    reservation.total_cost,
                ))
                row = cur.fetchone()
                reservation.id = row["id"]
                reservation.created_at = row["created_at"]
            conn.commit()
            logger.info(
                f"Added reservation #{reservation.id} for guest {reservation.guest_id}"
            )
            return reservation
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to add reservation: {e}")
            raise
        finally:
            release_connection(conn)

    # ── READ ──────────────────────────────────────────────

    def get_for_guest(self, guest_id: int, limit: Optional[int] = None) -> list[Reservation]:
        """
        Fetch a guest's reservations with the reserved property attached.

        Args:
            guest_id: ID of the reserving user.
            limit: Maximum number of rows (clamped to the configured range).

        Returns:
            List of Reservation objects ordered by start date.
        """
        sql = """
            SELECT properties.*,
                   reservations.id AS reservation_id,
                   reservations.guest_id,
                   reservations.start_date,
                   reservations.end_date,
                   reservations.total_cost,
                   reservations.created_at AS reservation_created_at,
                   AVG(property_reviews.rating) AS average_rating
            FROM reservations
            JOIN properties ON reservations.property_id = properties.id
            LEFT JOIN property_reviews ON properties.id = property_reviews.property_id
            WHERE reservations.guest_id = %s
            GROUP BY reservations.id, properties.id
            ORDER BY reservations.start_date
            LIMIT %s;
        """
        conn = get_connection()
        try:
            with dict_cursor(conn) as cur:
                cur.execute(sql, (guest_id, normalize_limit(limit)))
                return [self._row_to_reservation(r) for r in cur.fetchall()]
        finally:
            release_connection(conn)

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_reservation(row: dict) -> Reservation:
        """Convert a joined reservation/property row to a Reservation."""
        return Reservation(
            id=row["reservation_id"],
            property_id=row["id"],
            guest_id=row["guest_id"],
            start_date=row["start_date"],
            end_date=row["end_date"],
            total_cost=int(row["total_cost"]),
            created_at=row["reservation_created_at"],
            listing=PropertyRepository.row_to_property(row),
        )
