"""Utility script to seed demo accounts and print session tokens for them."""

from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from agrilink.application.use_cases.subscriptions import subscribe
from agrilink.domain.entities import User, UserRole
from agrilink.infrastructure.database import SessionLocal, initialize_database
from agrilink.infrastructure.repositories import UserRepository
from agrilink.infrastructure.security import create_user_token

DEMO_USERS = (
    User(
        id=None,
        email="admin@agrilink.com",
        phone="9999999999",
        full_name="Admin User",
        role=UserRole.ADMIN,
    ),
    User(
        id=None,
        email="farmer@agrilink.com",
        phone="9876543210",
        full_name="Rajan Kumar",
        role=UserRole.CUSTOMER,
        language="ta",
    ),
    User(
        id=None,
        email="customer@agrilink.com",
        phone="9123456789",
        full_name="Priya Sharma",
        role=UserRole.CUSTOMER,
        language="hi",
    ),
)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the seed run."""

    parser = argparse.ArgumentParser(
        description="Create demo users for the AgriLink API and print bearer tokens.",
    )
    parser.add_argument(
        "--farmer-plan",
        default="farmer_yearly",
        help="Plan granted to the demo farmer (default: farmer_yearly)",
    )
    return parser.parse_args()


def main() -> None:
    """Create any missing demo users and subscribe the demo farmer."""

    args = parse_args()
    initialize_database()

    session = SessionLocal()
    try:
        repository = UserRepository(session)
        for template in DEMO_USERS:
            user = repository.get_by_email(template.email)
            if user is None:
                user = repository.create(template)
                if user.email.startswith("farmer@"):
                    subscribe(session, user=user, plan_id=args.farmer_plan)
            print(f"{user.email} ({user.id}): {create_user_token(user.id)}")
    except (ValueError, SQLAlchemyError) as exc:
        session.rollback()
        raise SystemExit(f"Could not seed demo data: {exc}") from exc
    finally:
        session.close()


if __name__ == "__main__":
    main()
