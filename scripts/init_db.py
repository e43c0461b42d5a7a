"""
Database initialization script.

Creates all tables from the SQLModel metadata (use Alembic for
production databases) and optionally seeds a demo account whose id can
be sent in the ``X-User-Id`` header.

Usage:
    python scripts/init_db.py
    python scripts/init_db.py --demo-user demo@example.com --premium
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.core.logging import configure_logging
from app.db.init_db import ensure_demo_user, init_db
from app.db.session import engine


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create the VitalPlan tables.")
    parser.add_argument("--demo-user", metavar="EMAIL", help="Create (or reuse) an account with this email")
    parser.add_argument("--premium", action="store_true", help="Give the demo account a premium subscription")
    return parser.parse_args()


if __name__ == "__main__":
    args = _parse_args()
    configure_logging()
    print("=" * 50)
    print("VitalPlan Database Initialization")
    print("=" * 50)

    try:
        tables = init_db(engine)
        print(f"Tables: {', '.join(tables)}")

        if args.demo_user:
            with Session(engine) as session:
                user = ensure_demo_user(session, args.demo_user, premium=args.premium)
                print(f"Demo user: id={user.id} email={user.email} tier={user.subscription_status}")
                print(f"  try: curl -H 'X-User-Id: {user.id}' http://localhost:8000/api/v1/users/me")

    except SQLAlchemyError as e:
        print("=" * 50)
        print("ERROR: Database initialization failed!")
        print(f"Details: {e}")
        print("=" * 50)
        sys.exit(1)

    print("=" * 50)
    print("SUCCESS: Database initialized!")
    print("=" * 50)
