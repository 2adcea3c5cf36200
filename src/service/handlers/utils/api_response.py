"""
API Gateway response builders.

Handlers return bare {statusCode, body} responses; the middleware pipeline
adds the default content-type on the way out.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel

from service.models.output import ApiError, ApiErrorResponse, ApiSuccessResponse


def create_api_response(
    status_code: int,
    body: str,
    headers: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """Create an API Gateway proxy response."""
    response: Dict[str, Any] = {
        "statusCode": status_code,
        "body": body,
    }
    if headers:
        response["headers"] = headers
    return response


def success_response(data: Any, status_code: int = 200) -> Dict[str, Any]:
    """Wrap a payload in a success envelope."""
    envelope = ApiSuccessResponse[Any](data=dump_payload(data))
    return create_api_response(status_code, envelope.model_dump_json(by_alias=True))


def error_response(
    status_code: int,
    code: str,
    message: str,
    details: Any = None,
) -> Dict[str, Any]:
    """Wrap an error in a failure envelope; details are omitted when absent."""
    envelope = ApiErrorResponse(error=ApiError(code=code, message=message, details=details))
    return create_api_response(status_code, envelope.model_dump_json(exclude_none=True))


def dump_payload(payload: Any) -> Any:
    """Serialize models (or lists of models) to JSON-ready data with camelCase keys."""
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode='json', by_alias=True)
    if isinstance(payload, list):
        return [dump_payload(item) for item in payload]
    return payload
