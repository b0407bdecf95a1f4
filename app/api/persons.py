"""Person management API endpoints."""

from typing import Any

from dependency_injector.wiring import Provide, inject
from flask import Blueprint, request
from spectree import Response as SpectreeResponse

from app.schemas.common import ErrorResponseSchema
from app.schemas.person import PersonCreateSchema, PersonResponseSchema
from app.services.container import ServiceContainer
from app.services.person_service import PersonService
from app.utils.spectree_config import api

persons_bp = Blueprint("persons", __name__, url_prefix="/persons")


@persons_bp.route("", methods=["POST"])
@api.validate(json=PersonCreateSchema, resp=SpectreeResponse(HTTP_201=PersonResponseSchema, HTTP_400=ErrorResponseSchema))
@inject
def create_person(person_service: PersonService = Provide[ServiceContainer.person_service]) -> Any:
    """Create new person."""
    data = PersonCreateSchema.model_validate(request.get_json())
    person = person_service.create_person(data.name)
    return PersonResponseSchema.model_validate(person).model_dump(), 201


@persons_bp.route("", methods=["GET"])
@api.validate(resp=SpectreeResponse(HTTP_200=list[PersonResponseSchema]))
@inject
def list_persons(person_service: PersonService = Provide[ServiceContainer.person_service]) -> Any:
    """List all persons."""
    persons = person_service.get_all_persons()
    return [PersonResponseSchema.model_validate(person).model_dump() for person in persons]


@persons_bp.route("/<int:person_id>", methods=["GET"])
@api.validate(resp=SpectreeResponse(HTTP_200=PersonResponseSchema, HTTP_404=ErrorResponseSchema))
@inject
def get_person(person_id: int, person_service: PersonService = Provide[ServiceContainer.person_service]) -> Any:
    """Get person details."""
    person = person_service.get_person(person_id)
    return PersonResponseSchema.model_validate(person).model_dump()
