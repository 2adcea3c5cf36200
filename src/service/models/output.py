"""
Output models for API responses using Pydantic.

Every response body is an envelope: either a success carrying the operation's
payload, or a failure carrying a structured error. The two are separate models
so a body can never hold both.
"""

from typing import Annotated, Any, Generic, Literal, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar('T')


class ApiError(BaseModel):
    """Structured error carried by a failure envelope."""

    code: Annotated[str, Field(
        description='Stable error code',
        examples=['NOT_FOUND', 'VALIDATION_ERROR']
    )]

    message: Annotated[str, Field(
        description='Human-readable error message',
        examples=['Thing not found']
    )]

    details: Annotated[Optional[Any], Field(
        default=None,
        description='Additional error details, such as validation messages'
    )] = None


class ApiErrorResponse(BaseModel):
    """Failure envelope."""

    success: Literal[False] = False
    error: ApiError


class ApiSuccessResponse(BaseModel, Generic[T]):
    """Success envelope wrapping the operation result."""

    success: Literal[True] = True
    data: T


class DeleteThingOutput(BaseModel):
    """Payload returned after a thing has been deleted."""

    id: Annotated[str, Field(
        description='Identifier of the deleted thing'
    )]

    deleted: Literal[True] = True
