"""
main.py
-------
Command-line entry point for the LightBnB data layer.

Usage:
    python main.py init
    python main.py reset
    python main.py search --city Vancouver --max-price 200 --min-rating 4
    python main.py reservations 3
"""

import argparse
import sys
from typing import Optional

from config import DEFAULT_QUERY_LIMIT
from database import get_all_properties, get_all_reservations
from db.connection import close_pool, init_pool
from db.init_db import create_tables, reset_tables
from repositories.property_filters import PropertySearchOptions
from utils.logger import get_logger, set_level

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lightbnb", description="LightBnB database tools")
    parser.add_argument("-v", "--verbose", action="store_true", help="log SQL at DEBUG level")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init", help="create tables if they do not exist")
    sub.add_parser("reset", help="drop and recreate all tables")

    search = sub.add_parser("search", help="search properties")
    search.add_argument("--city")
    search.add_argument("--owner-id", type=int)
    search.add_argument("--min-price", type=float, help="dollars per night")
    search.add_argument("--max-price", type=float, help="dollars per night")
    search.add_argument("--min-rating", type=float)
    search.add_argument("--limit", type=int, default=DEFAULT_QUERY_LIMIT)

    reservations = sub.add_parser("reservations", help="list a guest's reservations")
    reservations.add_argument("guest_id", type=int)
    reservations.add_argument("--limit", type=int, default=DEFAULT_QUERY_LIMIT)
    return parser


def run(args: argparse.Namespace) -> int:
    """Execute a parsed command. The pool must already be initialized."""
    if args.command == "init":
        create_tables()
    elif args.command == "reset":
        reset_tables()
    elif args.command == "search":
        options = PropertySearchOptions(
            city=args.city,
            owner_id=args.owner_id,
            minimum_price_per_night=args.min_price,
            maximum_price_per_night=args.max_price,
            minimum_rating=args.min_rating,
        )
        for prop in get_all_properties(options, args.limit):
            print(prop)
    elif args.command == "reservations":
        for reservation in get_all_reservations(args.guest_id, args.limit):
            print(reservation)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Parse arguments, open the pool, run the command and close the pool."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        set_level("DEBUG")
    init_pool()
    try:
        return run(args)
    finally:
        close_pool()


if __name__ == "__main__":
    sys.exit(main())
