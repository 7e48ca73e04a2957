"""Bake & Taste database management CLI.

Creates or drops the tables of every SQL provider configured for the
active PROTEAN_ENV.

Usage:
    PROTEAN_ENV=sqlite bakeandtaste-manage setup-db   # Create all tables
    PROTEAN_ENV=sqlite bakeandtaste-manage drop-db    # Drop all tables
"""

import argparse
import sys

from bakeandtaste.domain import bakeandtaste
from bakeandtaste.utils.db import drop_db, setup_db


def setup_database():
    print("Initializing bakeandtaste domain...")
    bakeandtaste.init()
    print("Creating database schema...")
    setup_db(bakeandtaste)
    print("Done.")


def drop_database():
    print("Initializing bakeandtaste domain...")
    bakeandtaste.init()
    print("Dropping database schema...")
    drop_db(bakeandtaste)
    print("Done.")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Bake & Taste database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
