"""
Error taxonomy and error-to-response mapping for the Things handlers.

Every failure a handler detects is raised as a BaseServiceError subclass whose
error_code is the discriminator used at the mapping boundary. Handlers map
these locally through handle_service_errors; error_handler is the generic
interceptor registered on the middleware pipeline for anything that escapes.
"""

import functools
import json
from enum import Enum
from typing import Any, Callable, Dict, List

from aws_lambda_powertools.metrics import MetricUnit
from pydantic import ValidationError

from service.handlers.utils.api_response import create_api_response, error_response
from service.handlers.utils.observability import logger, metrics
from service.models.input import validation_messages

UNEXPECTED_ERROR_MESSAGE = 'An unexpected error occurred'


class ErrorCode(str, Enum):
    """Error kinds returned to API clients."""
    INVALID_JSON = "INVALID_JSON"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_ID = "MISSING_ID"
    INVALID_ID = "INVALID_ID"
    NO_FIELDS = "NO_FIELDS"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"


STATUS_CODES = {
    ErrorCode.INVALID_JSON: 400,
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.MISSING_ID: 400,
    ErrorCode.INVALID_ID: 400,
    ErrorCode.NO_FIELDS: 400,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.INTERNAL_ERROR: 500,
}


class BaseServiceError(Exception):
    """Base exception class for service errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details


class InvalidJsonError(BaseServiceError):
    """Raised when the request body is not parseable JSON."""

    def __init__(self):
        super().__init__("Request body must be valid JSON", ErrorCode.INVALID_JSON)


class RequestValidationError(BaseServiceError):
    """Raised when a parsed body violates the operation's schema."""

    def __init__(self, messages: List[str]):
        super().__init__("Validation failed", ErrorCode.VALIDATION_ERROR, details=messages)


class MissingIdError(BaseServiceError):
    """Raised when the path carries no thing identifier."""

    def __init__(self):
        super().__init__("Thing ID is required", ErrorCode.MISSING_ID)


class InvalidIdError(BaseServiceError):
    """Raised when the thing identifier is not a canonical UUID."""

    def __init__(self, thing_id: str):
        super().__init__("Invalid thing ID format", ErrorCode.INVALID_ID)
        self.thing_id = thing_id


class NoFieldsError(BaseServiceError):
    """Raised when an update request supplies no field at all."""

    def __init__(self):
        super().__init__("At least one field must be provided for update", ErrorCode.NO_FIELDS)


class ThingNotFoundError(BaseServiceError):
    """Raised when no thing matches the requested identifier."""

    def __init__(self, thing_id: str):
        super().__init__("Thing not found", ErrorCode.NOT_FOUND)
        self.thing_id = thing_id


def get_http_status_code(error: BaseServiceError) -> int:
    """Get appropriate HTTP status code for error."""
    return STATUS_CODES.get(error.error_code, 500)


def format_error_response(error: BaseServiceError) -> Dict[str, Any]:
    """Build the failure envelope response for a classified error."""
    status_code = get_http_status_code(error)
    # Internal faults never leak their cause to the client
    message = error.message if status_code < 500 else UNEXPECTED_ERROR_MESSAGE
    return error_response(
        status_code=status_code,
        code=error.error_code.value,
        message=message,
        details=error.details,
    )


def handle_service_errors(operation: str) -> Callable:
    """Decorator mapping every handler failure to an error envelope."""

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except BaseServiceError as e:
                logger.warning("Request rejected", extra={
                    "operation": operation,
                    "error_code": e.error_code.value,
                    "error_message": e.message,
                    "details": e.details,
                })
                metrics.add_metric(name="ServiceError", unit=MetricUnit.Count, value=1)
                return format_error_response(e)
            except Exception as e:
                logger.exception(f"Error during {operation}", extra={
                    "operation": operation,
                    "error": str(e),
                })
                metrics.add_metric(name="UnexpectedError", unit=MetricUnit.Count, value=1)
                return error_response(
                    status_code=500,
                    code=ErrorCode.INTERNAL_ERROR.value,
                    message=UNEXPECTED_ERROR_MESSAGE,
                )

        return wrapper

    return decorator


def error_handler(request: Any) -> None:
    """
    Pipeline error interceptor.

    Populates request.response from request.error: validation failures, raised
    either by the service or by pydantic directly, become a 400 with the
    collected messages, anything else a 500.
    """
    error = request.error

    logger.error("Error detected in error handler", extra={
        "error": repr(error),
        "existing_response": request.response,
    })

    details = None
    if isinstance(error, ValidationError):
        details = validation_messages(error)
    elif isinstance(error, BaseServiceError) and error.error_code == ErrorCode.VALIDATION_ERROR:
        details = error.details

    if details is not None:
        request.response = create_api_response(
            status_code=400,
            body=json.dumps({
                "error": "Validation error",
                "details": details,
            }),
        )
        return

    request.response = create_api_response(
        status_code=500,
        body=json.dumps({
            "error": "Internal server error",
            "message": str(error) if isinstance(error, Exception) else "An unexpected error occurred.",
        }),
    )
