"""
Things Service Module.

This package contains the Things CRUD service, laid out in three layers:

- handlers: Lambda entry points, the middleware pipeline and request validation
- dal: Data access layer issuing statements through the RDS Data API
- models: Domain, input and output (envelope) models
"""

__version__ = "1.0.0"
__description__ = "Things CRUD service on AWS Lambda and Aurora Data API"

# Re-export commonly used classes for convenience
from service.models.thing import Thing
from service.models.input import CreateThingRequest, UpdateThingRequest
from service.models.output import ApiErrorResponse, ApiSuccessResponse
from service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "Thing",
    "CreateThingRequest",
    "UpdateThingRequest",
    "ApiErrorResponse",
    "ApiSuccessResponse",
    "logger",
    "tracer",
    "metrics",
]
