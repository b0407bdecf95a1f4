"""SQLAlchemy models for the web sample."""

# Import all models here so they register with SQLAlchemy metadata
from app.models.person import Person

__all__: list[str] = [
    "Person",
]
