"""Storefront database management CLI.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py seed       # Load sample categories, products and a demo user
"""

import argparse
import sys

DEMO_USER = {
    "username": "demo",
    "email": "demo@example.com",
    "full_name": "Demo Shopper",
    "phone": "555-0100",
    "password": "password123",
}


def _initialized_domain():
    from storefront.domain import storefront

    print("Initializing storefront domain...")
    storefront.init()
    return storefront


def setup_database():
    from storefront.utils.db import setup_db

    domain = _initialized_domain()
    print("Creating storefront database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    from storefront.utils.db import drop_db

    domain = _initialized_domain()
    print("Dropping storefront database schema...")
    drop_db(domain)
    print("Done.")


def seed_database(with_demo_user=True):
    from storefront.account.registration import RegisterUser
    from storefront.account.user import User
    from storefront.catalogue.seed import seed_catalogue

    domain = _initialized_domain()
    with domain.domain_context():
        counts = seed_catalogue()
        print(f"  {counts['categories']} categories, {counts['products']} products loaded.")

        if with_demo_user:
            if domain.repository_for(User).find_by_email(DEMO_USER["email"]) is None:
                domain.process(RegisterUser(**DEMO_USER), asynchronous=False)
                print(f"  Demo user {DEMO_USER['email']} created.")
            else:
                print(f"  Demo user {DEMO_USER['email']} already exists.")

    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Storefront database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    seed_parser = subparsers.add_parser("seed", help="Load the sample catalogue")
    seed_parser.add_argument(
        "--no-demo-user",
        action="store_true",
        help="Skip creating the demo account",
    )

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed_database(with_demo_user=not args.no_demo_user)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
