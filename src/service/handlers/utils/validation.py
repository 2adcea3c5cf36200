"""
Request parsing and validation shared by the Things handlers.

Each function either returns normalized input or raises the BaseServiceError
subclass that describes why the request was rejected.
"""

import base64
import json
import re
from typing import Any, Optional

from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEventV2
from pydantic import ValidationError

from service.handlers.utils.errors import (
    InvalidIdError,
    InvalidJsonError,
    MissingIdError,
    NoFieldsError,
    RequestValidationError,
)
from service.models.input import CreateThingRequest, UpdateThingRequest, validation_messages

UUID_PATTERN = re.compile(
    r'[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}',
    re.IGNORECASE,
)


def get_thing_id(event: APIGatewayProxyEventV2) -> Optional[str]:
    """Return the thingId path parameter, or None when absent or empty."""
    return (event.path_parameters or {}).get('thingId') or None


def is_valid_thing_id(thing_id: str) -> bool:
    return UUID_PATTERN.fullmatch(thing_id) is not None


def validate_thing_id(thing_id: str) -> str:
    """Reject identifiers that are not canonical textual UUIDs."""
    if not is_valid_thing_id(thing_id):
        raise InvalidIdError(thing_id)
    return thing_id


def require_thing_id(event: APIGatewayProxyEventV2) -> str:
    """Return a well-formed thingId from the path, or raise MISSING_ID / INVALID_ID."""
    thing_id = get_thing_id(event)
    if thing_id is None:
        raise MissingIdError()
    return validate_thing_id(thing_id)


def parse_json_body(event: APIGatewayProxyEventV2) -> Any:
    """
    Parse the request body as JSON.

    An absent or empty body parses as an empty object; base64-encoded bodies
    are decoded first.
    """
    try:
        body = event.body
        if body and event.is_base64_encoded:
            body = base64.b64decode(body).decode('utf-8')
        return json.loads(body or '{}')
    except ValueError as e:
        raise InvalidJsonError() from e


def validate_create_request(payload: Any) -> CreateThingRequest:
    try:
        return CreateThingRequest.model_validate(payload)
    except ValidationError as e:
        raise RequestValidationError(validation_messages(e)) from e


def validate_update_request(payload: Any) -> UpdateThingRequest:
    """Validate an update body and make sure it changes at least one field."""
    try:
        request = UpdateThingRequest.model_validate(payload)
    except ValidationError as e:
        raise RequestValidationError(validation_messages(e)) from e

    if not request.changes():
        raise NoFieldsError()
    return request
