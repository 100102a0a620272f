"""
repositories/property_repo.py
------------------------------
Data access layer for property listings.
The search statement itself is assembled in repositories/property_query.py.
"""

from typing import Any, Mapping, Optional

import psycopg2

from config import DEFAULT_RESULT_LIMIT
from db.connection import Database
from models.property import Property, validate_new_property
from repositories.property_query import SearchOptions, build_property_search
from utils.logger import get_logger

logger = get_logger(__name__)


class PropertyRepository:
    """Repository for searching and inserting properties."""

    def __init__(self, db: Database):
        self.db = db

    # ── CREATE ────────────────────────────────────────────

    def add_property(self, data: Mapping[str, Any]) -> Optional[Property]:
        """
        Validate and insert a new property.

        Args:
            data: Column name to value mapping. `cost_per_night` is in cents.

        Returns:
            The persisted Property, or None if the insert failed.

        Raises:
            PropertyValidationError: If a field is unknown, missing or empty.
                Raised before any statement runs.
        """
        record = validate_new_property(data)
        columns = ", ".join(record)
        placeholders = ", ".join(["%s"] * len(record))
        sql = f"INSERT INTO properties ({columns}) VALUES ({placeholders}) RETURNING *;"

        try:
            with self.db.connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(sql, list(record.values()))
                    row = cur.fetchone()
        except psycopg2.Error as e:
            logger.error(f"Error adding property: {e}")
            return None
        prop = Property.from_row(row)
        logger.info(f"Added property #{prop.id} for owner {prop.owner_id}")
        return prop

    # ── READ ──────────────────────────────────────────────

    def get_all_properties(
        self, options: SearchOptions = None, limit: int = DEFAULT_RESULT_LIMIT
    ) -> list[Property]:
        """
        Search properties matching every supplied criterion.

        Args:
            options: PropertyFilter or option bag (see build_property_search).
            limit: Maximum number of properties to return.

        Returns:
            Properties with `average_rating` set, cheapest first. Empty when
            nothing matches or the query failed.
        """
        sql, params = build_property_search(options, limit)
        try:
            with self.db.connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(sql, params)
                    rows = cur.fetchall()
        except psycopg2.Error as e:
            logger.error(f"Error getting all properties: {e}")
            return []
        return [Property.from_row(r) for r in rows]
