"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from typing import Optional

from db.connection import dict_cursor, get_connection, release_connection
from models.user import User
from utils.logger import get_logger

logger = get_logger(__name__)

_USER_COLUMNS = "id, name, email, password, created_at"


class UserRepository:
    """Repository for CRUD operations on the users table."""

    def add(self, user: User) -> User:
        """
        Insert a new user.

        Args:
            user: The User to persist. ``email`` must not already exist.

        Returns:
            The same User with its `id` and `created_at` populated.

        Raises:
            psycopg2.IntegrityError: If the email is already registered.
        """
        sql = """
            INSERT INTO users (name, email, password)
            VALUES (%s, %s, %s)
            RETURNING id, created_at;
        """
        conn = get_connection()
        try:
            with dict_cursor(conn) as cur:
                cur.execute(sql, (user.name, user.email, user.password))
                row = cur.fetchone()
                user.id = row["id"]
                user.created_at = row["created_at"]
            conn.commit()
            logger.info(f"Added user #{user.id}")
            return user
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to add user {user.email}: {e}")
            raise
        finally:
            release_connection(conn)

    def get_by_email(self, email: str) -> Optional[User]:
        """Fetch a user by email address. Returns None if not found."""
        sql = f"SELECT {_USER_COLUMNS} FROM users WHERE email = %s;"
        return self._fetch_one(sql, (email,))

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Fetch a user by primary key. Returns None if not found."""
        sql = f"SELECT {_USER_COLUMNS} FROM users WHERE id = %s;"
        return self._fetch_one(sql, (user_id,))

    # ── HELPERS ───────────────────────────────────────────

    def _fetch_one(self, sql: str, params: tuple) -> Optional[User]:
        conn = get_connection()
        try:
            with dict_cursor(conn) as cur:
                cur.execute(sql, params)
                row = cur.fetchone()
                return self._row_to_user(row) if row else None
        finally:
            release_connection(conn)

    @staticmethod
    def _row_to_user(row: dict) -> User:
        """Convert a database row to a User domain object."""
        return User(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            password=row["password"],
            created_at=row["created_at"],
        )
