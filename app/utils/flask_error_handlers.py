"""Flask application error handlers."""

import logging
from typing import Any

from flask import Flask, current_app, jsonify
from flask.wrappers import Response
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import BadRequest

from app.exceptions import (
    BusinessLogicException,
    InvalidOperationException,
    MessageNotReadableException,
    NotAcceptableException,
    RecordNotFoundException,
    UnsupportedMediaTypeException,
)
from app.utils import get_current_correlation_id

logger = logging.getLogger(__name__)


def build_error_response(
    error: str,
    details: Any = None,
    code: str | None = None,
    status_code: int = 400,
) -> tuple[Response, int]:
    """Build the standard JSON error body with correlation ID."""
    body: dict[str, Any] = {"error": error, "details": details}
    if code is not None:
        body["code"] = code

    correlation_id = get_current_correlation_id()
    if correlation_id:
        body["correlationId"] = correlation_id

    return jsonify(body), status_code


def _mark_request_failed() -> None:
    """Flag the request's database session for rollback at teardown."""
    container = getattr(current_app, "container", None)
    if container is None:
        return
    try:
        container.db_session().info["needs_rollback"] = True
    except Exception as e:
        logger.debug(f"Could not mark session for rollback: {e}")


def validation_error_details(error: ValidationError) -> list[dict[str, str]]:
    """Flatten Pydantic errors into field/message pairs."""
    return [
        {"field": ".".join(str(x) for x in err["loc"]), "message": err["msg"]}
        for err in error.errors()
    ]


# Status codes and detail messages per business exception type, most
# specific first.
BUSINESS_ERROR_STATUS: list[tuple[type[BusinessLogicException], int, str]] = [
    (RecordNotFoundException, 404, "The requested resource could not be found"),
    (InvalidOperationException, 409, "The requested operation cannot be performed"),
    (UnsupportedMediaTypeException, 415, "The request content type is not supported"),
    (NotAcceptableException, 406, "The requested response type cannot be produced"),
    (MessageNotReadableException, 400, "The request body could not be read"),
]


def business_error_response(error: BusinessLogicException) -> tuple[Response, int]:
    """Map a business exception to its JSON error response."""
    for exc_type, status_code, detail in BUSINESS_ERROR_STATUS:
        if isinstance(error, exc_type):
            return build_error_response(
                error.message, {"message": detail}, code=error.error_code, status_code=status_code
            )
    return build_error_response(
        error.message, {"message": "The request could not be processed"}, code=error.error_code
    )


def register_error_handlers(app: Flask) -> None:
    """Register Flask error handlers for common exceptions."""

    @app.errorhandler(ValidationError)
    def handle_validation_error(error: ValidationError):
        """Handle Pydantic validation errors."""
        _mark_request_failed()
        return build_error_response("Validation failed", validation_error_details(error))

    @app.errorhandler(BusinessLogicException)
    def handle_business_logic_exception(error: BusinessLogicException):
        """Handle domain exceptions raised by views and services."""
        _mark_request_failed()
        return business_error_response(error)

    @app.errorhandler(IntegrityError)
    def handle_integrity_error(error: IntegrityError):
        """Handle database integrity constraint violations."""
        _mark_request_failed()
        error_msg = str(error.orig) if hasattr(error, 'orig') else str(error)

        if "NOT NULL constraint failed" in error_msg or "null value" in error_msg.lower():
            return build_error_response(
                "Missing required field",
                {"message": "Required field cannot be empty"},
            )
        return build_error_response(
            "Database constraint violation",
            {"message": "The operation violates a database constraint"},
        )

    @app.errorhandler(BadRequest)
    def handle_bad_request(error: BadRequest):
        """Handle malformed requests, such as unparseable JSON bodies."""
        _mark_request_failed()
        return build_error_response(
            "Invalid request",
            {"message": error.description},
        )

    @app.errorhandler(404)
    def handle_not_found(error):
        """Handle 404 Not Found errors."""
        return build_error_response(
            "Resource not found",
            "The requested resource could not be found",
            status_code=404,
        )

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        """Handle 405 Method Not Allowed errors."""
        return build_error_response(
            "Method not allowed",
            "The HTTP method is not allowed for this endpoint",
            status_code=405,
        )

    @app.errorhandler(500)
    def handle_internal_server_error(error):
        """Handle 500 Internal Server Error."""
        _mark_request_failed()
        return build_error_response(
            "Internal server error",
            "An unexpected error occurred",
            status_code=500,
        )
