"""Domain-specific exceptions with user-ready messages."""


class BusinessLogicException(Exception):
    """Base exception class for business logic errors.

    All business logic exceptions include user-ready messages that can be
    returned to API clients without further message construction.
    """

    def __init__(self, message: str, error_code: str) -> None:
        self.message = message
        self.error_code = error_code
        super().__init__(message)


class RecordNotFoundException(BusinessLogicException):
    """Exception raised when a requested record is not found."""

    def __init__(self, resource_type: str, identifier: str | int) -> None:
        message = f"{resource_type} {identifier} was not found"
        super().__init__(message, error_code="RECORD_NOT_FOUND")


class InvalidOperationException(BusinessLogicException):
    """Exception raised when an operation cannot be performed due to business rules."""

    def __init__(self, operation: str, cause: str) -> None:
        self.operation = operation
        self.cause = cause
        message = f"Cannot {operation} because {cause}"
        super().__init__(message, error_code="INVALID_OPERATION")


class UnsupportedMediaTypeException(BusinessLogicException):
    """Exception raised when no message converter can read the request body."""

    def __init__(self, mimetype: str | None) -> None:
        self.mimetype = mimetype
        message = f"Content type {mimetype or '(none)'} is not supported"
        super().__init__(message, error_code="UNSUPPORTED_MEDIA_TYPE")


class NotAcceptableException(BusinessLogicException):
    """Exception raised when no message converter can produce an accepted type."""

    def __init__(self, accept: str) -> None:
        self.accept = accept
        message = f"None of the accepted types ({accept}) can be produced"
        super().__init__(message, error_code="NOT_ACCEPTABLE")


class MessageNotReadableException(BusinessLogicException):
    """Exception raised when a request body cannot be parsed."""

    def __init__(self, mimetype: str, cause: str) -> None:
        message = f"Could not read {mimetype} request body: {cause}"
        super().__init__(message, error_code="MESSAGE_NOT_READABLE")
