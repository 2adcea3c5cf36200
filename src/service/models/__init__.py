"""
Service Models Package

This package contains all Pydantic models used throughout the service,
including input validation models, output envelope models, and the domain model.
"""

from .input import CreateThingRequest, UpdateThingRequest, validation_messages
from .output import ApiError, ApiErrorResponse, ApiSuccessResponse, DeleteThingOutput
from .thing import THING_COLUMNS, Thing

__all__ = [
    # Input models
    "CreateThingRequest",
    "UpdateThingRequest",
    "validation_messages",

    # Output models
    "ApiError",
    "ApiErrorResponse",
    "ApiSuccessResponse",
    "DeleteThingOutput",

    # Domain models
    "Thing",
    "THING_COLUMNS",
]
