"""Services package for the web sample."""

from app.services.metrics_service import MetricsService
from app.services.person_service import PersonService

__all__ = [
    "MetricsService",
    "PersonService",
]
