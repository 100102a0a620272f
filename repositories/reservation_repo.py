"""
repositories/reservation_repo.py
---------------------------------
Data access layer for reservations.
"""

import psycopg2

from config import DEFAULT_RESULT_LIMIT
from db.connection import Database
from utils.logger import get_logger

logger = get_logger(__name__)


class ReservationRepository:
    """Read access to a guest's reservations."""

    def __init__(self, db: Database):
        self.db = db

    def get_all_reservations(self, guest_id: int, limit: int = DEFAULT_RESULT_LIMIT) -> list[dict]:
        """
        Fetch a guest's reservations joined with the reserved property.

        Each row holds the property columns plus `reservation_id`,
        `start_date`, `end_date` and the property's `average_rating`.

        Args:
            guest_id: The guest's user id.
            limit: Maximum number of reservations to return.

        Returns:
            List of row dicts, most expensive property first. Empty when
            nothing matches or the query failed.
        """
        sql = """
            SELECT properties.*,
                   reservations.id AS reservation_id,
                   reservations.start_date,
                   reservations.end_date,
                   avg(property_reviews.rating) AS average_rating
            FROM reservations
            JOIN properties ON reservations.property_id = properties.id
            JOIN property_reviews ON property_reviews.property_id = properties.id
            WHERE reservations.guest_id = %s
            GROUP BY properties.id, reservations.id
            ORDER BY properties.cost_per_night DESC
            LIMIT %s;
        """
        try:
            with self.db.connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(sql, (guest_id, limit))
                    rows = cur.fetchall()
        except psycopg2.Error as e:
            logger.error(f"Error getting reservations: {e}")
            return []
        return [dict(row) for row in rows]
