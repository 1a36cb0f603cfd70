"""Seed the database with a default admin and user account."""

from sqlalchemy.exc import SQLAlchemyError

from minisoccer.models import User
from minisoccer.passwords import hash_password


def seed_users(session_factory) -> list:
    """Create the seed accounts and return the e-mails of those created."""
    created = []
    for email, role in (("admin@example.com", "admin"), ("user@example.com", "user")):
        with session_factory() as session:
            session.add(User(email=email, password_hash=hash_password("password"), role=role))
            try:
                session.commit()
            except SQLAlchemyError as exc:
                session.rollback()
                print("Failed to create user:", email, "-", exc)
                continue
        print("User created:", email)
        created.append(email)
    return created