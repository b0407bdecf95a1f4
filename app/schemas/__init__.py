"""Pydantic schemas for request/response validation."""

from app.schemas.common import ErrorResponseSchema
from app.schemas.health_schema import HealthResponse
from app.schemas.person import (
    HelloJpaQuerySchema,
    HelloQuerySchema,
    PersonCreateSchema,
    PersonResponseSchema,
    PersonSchema,
)

__all__: list[str] = [
    "ErrorResponseSchema",
    "HealthResponse",
    "HelloJpaQuerySchema",
    "HelloQuerySchema",
    "PersonCreateSchema",
    "PersonResponseSchema",
    "PersonSchema",
]
