"""Database connection and schema management."""

from sqlalchemy import MetaData, text
from sqlalchemy.engine import Engine

from app.extensions import db


def get_engine() -> Engine:
    """Get SQLAlchemy engine from current Flask app."""
    return db.engine


def init_db(recreate: bool = False) -> list[str]:
    """Initialize database tables.

    Only creates tables if they don't exist. Safe to call multiple times.

    Args:
        recreate: If True, drop all tables first

    Returns:
        Names of the tables known to the models
    """
    # Import all models to ensure they're registered with SQLAlchemy
    import app.models  # noqa: F401

    if recreate:
        drop_all_tables()

    # Create all tables (only if they don't exist)
    db.create_all()

    return sorted(db.metadata.tables.keys())


def check_db_connection() -> bool:
    """Check if database connection is working."""
    try:
        # Use Flask-SQLAlchemy's session for the health check
        result = db.session.execute(text("SELECT 1"))
        return result.scalar() == 1
    except Exception:
        return False


def drop_all_tables() -> None:
    """Drop every table in the database, including ones no model knows about."""
    # Use reflection to get all table names
    metadata = MetaData()
    metadata.reflect(bind=db.engine)

    # Drop all tables
    metadata.drop_all(bind=db.engine)
