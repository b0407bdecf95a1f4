"""Sample greeting and message endpoints."""

from typing import Any

from dependency_injector.wiring import Provide, inject
from flask import Blueprint, request
from spectree import Response as SpectreeResponse

from app.schemas.common import ErrorResponseSchema
from app.schemas.person import HelloJpaQuerySchema, HelloQuerySchema, PersonSchema
from app.services.container import ServiceContainer
from app.services.person_service import PersonService
from app.utils.formatters import PersonFormatter
from app.utils.message_converters import MessageConverterRegistry
from app.utils.spectree_config import api

sample_bp = Blueprint("sample", __name__)


def _greeting(name: str) -> str:
    return f"hello {name}"


@sample_bp.route("/hello/<name>", methods=["GET"])
@api.validate(resp=SpectreeResponse("HTTP_200"))
def hello_path(name: str) -> Any:
    """Greet the person named in the path."""
    person = PersonFormatter.parse(name)
    return _greeting(PersonFormatter.print(person))


@sample_bp.route("/hello", methods=["GET"])
@api.validate(resp=SpectreeResponse("HTTP_200", HTTP_400=ErrorResponseSchema))
def hello_query() -> Any:
    """Greet the person named by the name query parameter."""
    query = HelloQuerySchema.model_validate(request.args.to_dict())
    return _greeting(query.name)


@sample_bp.route("/hellojpa", methods=["GET"])
@api.validate(resp=SpectreeResponse("HTTP_200", HTTP_400=ErrorResponseSchema, HTTP_404=ErrorResponseSchema))
@inject
def hello_jpa(person_service: PersonService = Provide[ServiceContainer.person_service]) -> Any:
    """Greet a stored person looked up by ID."""
    query = HelloJpaQuerySchema.model_validate(request.args.to_dict())
    person = person_service.get_person(query.id)
    return _greeting(person.name)


@sample_bp.route("/message", methods=["GET"])
@api.validate(resp=SpectreeResponse("HTTP_200"))
def message() -> Any:
    """Echo the plain-text request body."""
    return request.get_data(as_text=True)


@sample_bp.route("/jsonMessage", methods=["GET"])
@api.validate(
    resp=SpectreeResponse(
        "HTTP_200",
        HTTP_400=ErrorResponseSchema,
        HTTP_406=ErrorResponseSchema,
        HTTP_415=ErrorResponseSchema,
    )
)
@inject
def json_message(
    message_converters: MessageConverterRegistry = Provide[ServiceContainer.message_converters],
) -> Any:
    """Echo a person, reading by Content-Type and writing by Accept."""
    person = message_converters.read_request(PersonSchema)
    return message_converters.write_response(person)
