"""Storefront management CLI.

Provides commands to create and drop the database schema, and to register a
user directly against the domain (there is no sign-up flow without an
existing ``x-user-id``).

Usage:
    python src/manage.py setup-db                        # Create all tables
    python src/manage.py drop-db                         # Drop all tables
    python src/manage.py add-user --name "Ada Lovelace"  # Register a user
"""

import argparse
import sys
from uuid import uuid4


def setup_database():
    """Create the storefront database schema."""
    from storefront.domain import storefront
    from storefront.utils.db import setup_db

    print("Initializing storefront domain...")
    storefront.init()
    print("Creating storefront database schema...")
    setup_db(storefront)
    print("  storefront schema ready.")

    print("Done.")


def drop_database():
    """Drop the storefront database schema."""
    from storefront.domain import storefront
    from storefront.utils.db import drop_db

    print("Initializing storefront domain...")
    storefront.init()
    print("Dropping storefront database schema...")
    drop_db(storefront)
    print("  storefront schema dropped.")

    print("Done.")


def add_user(name, user_id=None):
    """Register a user and print its id."""
    from storefront.domain import storefront
    from storefront.user.registration import AddUser

    storefront.init()
    with storefront.domain_context():
        result = storefront.process(AddUser(user_id=user_id or str(uuid4()), name=name), asynchronous=False)

    print(f"User added: {result}")
    return result


def main():
    parser = argparse.ArgumentParser(description="Storefront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    user_parser = subparsers.add_parser("add-user", help="Register a user")
    user_parser.add_argument("--name", required=True, help="Display name of the user")
    user_parser.add_argument("--user-id", help="UUID to register the user under (default: generated)")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "add-user":
        add_user(args.name, args.user_id)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
