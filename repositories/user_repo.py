"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from typing import Optional

import psycopg2

from db.connection import Database
from models.user import User, normalize_email
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for lookups and inserts on the users table."""

    def __init__(self, db: Database):
        self.db = db

    # ── CREATE ────────────────────────────────────────────

    def add_user(self, name: str, email: str, password: str) -> Optional[User]:
        """
        Insert a new user.

        Args:
            name: Display name.
            email: Email address; stored lowercased.
            password: Credential hash.

        Returns:
            The persisted User, or None if the insert failed.
        """
        sql = """
            INSERT INTO users (name, email, password)
            VALUES (%s, %s, %s)
            RETURNING *;
        """
        try:
            with self.db.connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(sql, (name, normalize_email(email), password))
                    row = cur.fetchone()
        except psycopg2.Error as e:
            logger.error(f"Error adding user: {e}")
            return None
        user = User.from_row(row)
        logger.info(f"Added user #{user.id}")
        return user

    # ── READ ──────────────────────────────────────────────

    def get_user_with_email(self, email: str) -> Optional[User]:
        """
        Fetch a user by email, case-insensitively.

        Returns:
            User or None when nothing matches or the query failed.
        """
        sql = "SELECT * FROM users WHERE email = %s;"
        try:
            with self.db.connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(sql, (normalize_email(email),))
                    row = cur.fetchone()
        except psycopg2.Error as e:
            logger.error(f"Error getting user with email: {e}")
            return None
        return User.from_row(row) if row else None

    def get_user_with_id(self, user_id: int) -> Optional[User]:
        """Fetch a user by primary key."""
        sql = "SELECT * FROM users WHERE id = %s;"
        try:
            with self.db.connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(sql, (user_id,))
                    row = cur.fetchone()
        except psycopg2.Error as e:
            logger.error(f"Error getting user with id: {e}")
            return None
        return User.from_row(row) if row else None
