"""CLI commands for database operations."""

import argparse
import sys
from typing import NoReturn

from flask import Flask

from app import create_app
from app.database import check_db_connection, init_db
from app.startup import load_test_data_hook


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        description="Web sample CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # init-db command
    init_parser = subparsers.add_parser(
        "init-db",
        help="Create database tables",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Create any missing database tables from the models.

Examples:
  springweb-cli init-db                              Create missing tables
  springweb-cli init-db --recreate --yes-i-am-sure   Drop all tables and create them again
        """,
    )
    init_parser.add_argument(
        "--recreate",
        action="store_true",
        help="Drop all tables first, then create them from scratch",
    )
    init_parser.add_argument(
        "--yes-i-am-sure",
        action="store_true",
        help="Required safety flag when using --recreate",
    )

    # load-test-data command
    load_test_data_parser = subparsers.add_parser(
        "load-test-data",
        help="Recreate database and load sample persons",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Recreate database from scratch and load the sample persons.

Examples:
  springweb-cli load-test-data --yes-i-am-sure    Load sample dataset
        """,
    )
    load_test_data_parser.add_argument(
        "--yes-i-am-sure",
        action="store_true",
        help="Required safety flag to confirm database recreation",
    )

    return parser


def _require_connection(app: Flask) -> None:
    if not check_db_connection():
        print(
            "❌ Cannot connect to database. Check your DATABASE_URL configuration.",
            file=sys.stderr,
        )
        sys.exit(1)

    # Let operator know which database is targeted
    print(f"🗄  Using database: {app.config['SQLALCHEMY_DATABASE_URI']}")


def handle_init_db(
    app: Flask, recreate: bool = False, confirmed: bool = False
) -> None:
    """Handle init-db command."""
    with app.app_context():
        _require_connection(app)

        # Safety check for recreate
        if recreate and not confirmed:
            print(
                "❌ --recreate requires --yes-i-am-sure flag for safety",
                file=sys.stderr,
            )
            print(
                "   This will DROP ALL TABLES and create them again!",
                file=sys.stderr,
            )
            sys.exit(1)

        if recreate:
            print("⚠️  WARNING: About to drop all tables and create them again!")
            print("   This will permanently delete all data in the database.")
            print("🔄 Recreating database from scratch...")

        try:
            tables = init_db(recreate=recreate)
        except Exception as e:
            print(f"❌ Database initialization failed: {e}", file=sys.stderr)
            sys.exit(1)

        print(f"✅ Database ready with {len(tables)} table(s)")
        for table in tables:
            print(f"   • {table}")


def handle_load_test_data(app: Flask, confirmed: bool = False) -> None:
    """Handle load-test-data command."""
    with app.app_context():
        _require_connection(app)

        # Safety check for confirmation
        if not confirmed:
            print(
                "❌ --yes-i-am-sure flag is required for safety",
                file=sys.stderr,
            )
            print(
                "   This will DROP ALL TABLES and recreate with test data!",
                file=sys.stderr,
            )
            sys.exit(1)

        print("⚠️  WARNING: About to drop all tables and load test data!")
        print("   This will permanently delete all existing data in the database.")

        try:
            print("🔄 Recreating database from scratch...")
            init_db(recreate=True)
            print("✅ Database recreated successfully")

            print("📦 Loading sample persons...")
            count = load_test_data_hook(app)
            print(f"✅ Test data loaded successfully ({count} persons)")
        except Exception as e:
            print(f"❌ Failed to load test data: {e}", file=sys.stderr)
            sys.exit(1)


def main() -> NoReturn:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Create Flask app for database operations
    app = create_app()

    if args.command == "init-db":
        handle_init_db(
            app=app,
            recreate=args.recreate,
            confirmed=args.yes_i_am_sure,
        )
    elif args.command == "load-test-data":
        handle_load_test_data(
            app=app,
            confirmed=args.yes_i_am_sure,
        )
    else:
        print(f"❌ Unknown command: {args.command}", file=sys.stderr)
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
