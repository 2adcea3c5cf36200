"""
Input models for request validation using Pydantic.

Both models normalize what they accept: names come back trimmed and an empty
description comes back as None. Pydantic collects every violation in one pass,
and validation_messages() renders them as the messages returned to clients.
"""

from typing import Annotated, Any, Optional

from pydantic import BaseModel, Field, StrictStr, ValidationError, field_validator
from pydantic_core import PydanticCustomError

FIELD_LABELS = {
    'name': 'Name',
    'description': 'Description',
}


def _reject_null(field: str, value: Any) -> Any:
    if value is None:
        raise PydanticCustomError('null_not_allowed', f'{FIELD_LABELS[field]} must be a string')
    return value


def _trimmed_name(value: str) -> str:
    name = value.strip()
    if not name:
        raise PydanticCustomError('blank_name', 'Name is required')
    return name


class CreateThingRequest(BaseModel):
    """Request model for creating a new thing."""

    name: Annotated[StrictStr, Field(
        description='Name of the thing, trimmed before it is stored',
        examples=['Widget']
    )]

    description: Annotated[Optional[StrictStr], Field(
        default=None,
        description='Optional description of the thing',
        examples=['A small widget']
    )] = None

    @field_validator('description', mode='before')
    @classmethod
    def reject_null_description(cls, v: Any) -> Any:
        return _reject_null('description', v)

    @field_validator('name')
    @classmethod
    def trim_name(cls, v: str) -> str:
        return _trimmed_name(v)

    @field_validator('description')
    @classmethod
    def empty_description_to_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None


class UpdateThingRequest(BaseModel):
    """Request model for a partial update of an existing thing."""

    name: Annotated[Optional[StrictStr], Field(
        default=None,
        description='New name of the thing',
        examples=['Renamed widget']
    )] = None

    description: Annotated[Optional[StrictStr], Field(
        default=None,
        description='New description; null or empty clears it',
        examples=['Updated description', None]
    )] = None

    @field_validator('name', mode='before')
    @classmethod
    def reject_null_name(cls, v: Any) -> Any:
        return _reject_null('name', v)

    @field_validator('name')
    @classmethod
    def trim_name(cls, v: str) -> str:
        return _trimmed_name(v)

    @field_validator('description')
    @classmethod
    def empty_description_to_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None

    def changes(self) -> dict[str, Optional[str]]:
        """Return only the fields present in the request body, in column order."""
        return {
            field: getattr(self, field)
            for field in type(self).model_fields
            if field in self.model_fields_set
        }


def validation_messages(error: ValidationError) -> list[str]:
    """
    Render a pydantic ValidationError as client-facing messages.

    Args:
        error: Validation error holding every violation found

    Returns:
        One message per violation, in the order pydantic reported them
    """
    messages = []
    for detail in error.errors():
        loc = detail['loc']
        label = FIELD_LABELS.get(loc[0], str(loc[0])) if loc else 'Request body'

        if detail['type'] == 'missing':
            messages.append(f'{label} is required')
        elif detail['type'] == 'string_type':
            messages.append(f'{label} must be a string')
        elif detail['type'] in ('model_type', 'model_attributes_type', 'dict_type'):
            messages.append('Request body must be a JSON object')
        else:
            messages.append(detail['msg'])
    return messages
