"""
main.py
-------
Entry point and composition root for the LightBnB data-access layer.

Responsibilities:
    - Build the Database handle and own its lifecycle.
    - Wire the repositories to that handle.
    - Offer a small command line to bootstrap the schema and run searches:
        python main.py init-db
        python main.py search --city "#Vancouver" --max-price 200 --limit 5
"""

import argparse
from dataclasses import dataclass
from typing import Optional, Sequence

from config import DEFAULT_RESULT_LIMIT
from db.connection import Database
from db.init_db import create_tables
from repositories.property_repo import PropertyRepository
from repositories.reservation_repo import ReservationRepository
from repositories.user_repo import UserRepository
from utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


@dataclass
class Repositories:
    """Every repository, bound to one Database."""
    users: UserRepository
    properties: PropertyRepository
    reservations: ReservationRepository


def build_repositories(db: Database) -> Repositories:
    return Repositories(
        users=UserRepository(db),
        properties=PropertyRepository(db),
        reservations=ReservationRepository(db),
    )


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="LightBnB data-access tools")
    parser.add_argument("--log-level", help="Override LOG_LEVEL, e.g. DEBUG")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="Create tables if they do not exist")

    search = sub.add_parser("search", help="Search properties")
    search.add_argument("--city", help="City filter, including its leading sigil (e.g. '#Vancouver')")
    search.add_argument("--owner-id", type=int)
    search.add_argument("--min-price", type=float, help="Minimum price per night")
    search.add_argument("--max-price", type=float, help="Maximum price per night")
    search.add_argument("--min-rating", type=float)
    search.add_argument("--limit", type=int, default=DEFAULT_RESULT_LIMIT)
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Run one command against a freshly opened pool, then close it."""
    args = _parse_args(argv)
    configure_logging(args.log_level)

    with Database() as db:
        if args.command == "init-db":
            create_tables(db)
            return

        repos = build_repositories(db)
        options = {
            "city": args.city,
            "owner_id": args.owner_id,
            "minimum_price_per_night": args.min_price,
            "maximum_price_per_night": args.max_price,
            "minimum_rating": args.min_rating,
        }
        results = repos.properties.get_all_properties(options, args.limit)
        logger.info(f"Found {len(results)} properties.")
        for prop in results:
            logger.info(str(prop))


if __name__ == "__main__":
    main()
