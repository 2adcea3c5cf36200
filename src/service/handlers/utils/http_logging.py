"""
Request and response logging hooks for the middleware pipeline.
"""

import json
from typing import Any

from service.handlers.utils.observability import logger


def request_logger(request: Any) -> None:
    """Log method, path and raw body of an HTTP API (payload v2) event."""
    event = request.event
    http = (event.get('requestContext') or {}).get('http') or {}
    logger.info("Request", extra={
        "method": http.get('method'),
        "path": event.get('rawPath'),
        "body": event.get('body'),
    })


def response_logger(request: Any) -> None:
    """Log the response attached to the request, whatever its shape."""
    response = getattr(request, 'response', None)

    if not response:
        logger.warning("Response object is undefined or missing.")
        return

    if isinstance(response, str):
        logger.info("Response (string)", extra={"response": response})
    elif isinstance(response, dict) and 'statusCode' in response and 'body' in response:
        logger.info("Response (object)", extra={
            "status_code": response['statusCode'],
            "body": _safely_parse_body(response['body']),
        })
    else:
        logger.warning("Unexpected response structure", extra={"response": response})


def _safely_parse_body(body: Any) -> Any:
    if not body:
        return None
    try:
        return json.loads(body)
    except (TypeError, ValueError):
        logger.warning("Failed to parse body as JSON", extra={"body": body})
        return body
