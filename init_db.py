"""
Script to create the database tables outside of Alembic.
"""
from studybuddy.db.init_db import init_db


def init() -> None:
    """Initialize database."""
    print("Creating database tables...")
    init_db()
    print("✅ Database tables created")


if __name__ == "__main__":
    init()
