"""
Shared test configuration.

Sets the environment before any project module is imported (config.py reads
it at import time) and provides a Database stand-in whose connection and
cursor are mocks, so no PostgreSQL server is needed.
"""
import os
from contextlib import contextmanager
from unittest.mock import MagicMock

import pytest

TEST_ENV_VARS = {
    "DB_HOST": "localhost",
    "DB_PORT": "5432",
    "DB_NAME": "lightbnb_test",
    "DB_USER": "tester",
    "DB_PASS": "secret",
    "DEFAULT_RESULT_LIMIT": "10",
    "LOG_LEVEL": "DEBUG",
}

for key, value in TEST_ENV_VARS.items():
    os.environ.setdefault(key, value)


class FakeDatabase:
    """Mimics Database.connection() with a mocked connection and cursor."""

    def __init__(self):
        self.conn = MagicMock(name="connection")
        self.cursor = self.conn.cursor.return_value.__enter__.return_value

    @contextmanager
    def connection(self):
        try:
            yield self.conn
            self.conn.commit()
        except Exception:
            self.conn.rollback()
            raise


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def property_row():
    return {
        "id": 7,
        "owner_id": 3,
        "title": "Speed lamp",
        "description": "description",
        "thumbnail_photo_url": "https://example.com/thumb.jpg",
        "cover_photo_url": "https://example.com/cover.jpg",
        "cost_per_night": 93061,
        "parking_spaces": 6,
        "number_of_bathrooms": 4,
        "number_of_bedrooms": 8,
        "country": "Canada",
        "street": "536 Namsub Highway",
        "city": "Sotboske",
        "province_code": "QC",
        "postal_code": "28142",
        "active": True,
    }
