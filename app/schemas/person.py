"""Person schemas for request/response validation."""

from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class PersonSchema(BaseModel):
    """Person as exchanged through the message converters."""

    model_config = ConfigDict(from_attributes=True)

    xml_root_element: ClassVar[str] = "person"

    id: int | None = Field(
        None,
        description="Person ID",
        json_schema_extra={"example": 2022}
    )
    name: str | None = Field(
        None,
        max_length=255,
        description="Person name",
        json_schema_extra={"example": "jonghak"}
    )


class PersonCreateSchema(BaseModel):
    """Schema for creating a new person."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Person name",
        json_schema_extra={"example": "jonghak"}
    )


class PersonResponseSchema(BaseModel):
    """Schema for person API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(
        description="Unique person ID",
        json_schema_extra={"example": 1}
    )
    name: str = Field(
        description="Person name",
        json_schema_extra={"example": "jonghak"}
    )
    created_at: datetime = Field(
        description="Timestamp when the person was created"
    )


class HelloQuerySchema(BaseModel):
    """Query parameters of GET /hello."""

    name: str = Field(
        ...,
        min_length=1,
        description="Name to greet",
        json_schema_extra={"example": "jonghak"}
    )


class HelloJpaQuerySchema(BaseModel):
    """Query parameters of GET /hellojpa."""

    id: int = Field(
        ...,
        description="ID of the stored person to greet",
        json_schema_extra={"example": 1}
    )
