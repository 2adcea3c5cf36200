"""
Create Thing handler - ``POST /things``.

Parses and validates the body, inserts the thing under a freshly generated
UUID and answers 201 with the stored row.
"""

import uuid
from typing import Any, Dict, Optional

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEventV2
from aws_lambda_powertools.utilities.typing import LambdaContext

from service.dal import BaseDalHandler, get_dal_handler
from service.handlers.utils.actor import get_actor_id
from service.handlers.utils.api_response import success_response
from service.handlers.utils.errors import BaseServiceError, handle_service_errors
from service.handlers.utils.middleware import handler_middleware
from service.handlers.utils.observability import logger, metrics, tracer
from service.handlers.utils.validation import parse_json_body, validate_create_request


@handle_service_errors('create_thing')
@tracer.capture_method
def create_thing(event: Dict[str, Any], context: Any, dal: Optional[BaseDalHandler] = None) -> Dict[str, Any]:
    """
    Create a new thing.

    Args:
        event: API Gateway HTTP API event
        context: Lambda context object
        dal: Data access handler; the process-wide default when omitted

    Returns:
        201 with the created thing, or an error envelope
    """
    request = validate_create_request(parse_json_body(APIGatewayProxyEventV2(event)))

    thing_id = str(uuid.uuid4())
    dal = dal or get_dal_handler()
    thing = dal.create_thing(
        thing_id=thing_id,
        name=request.name,
        description=request.description,
        actor=get_actor_id(event),
    )
    if thing is None:
        raise BaseServiceError('Failed to create thing')

    logger.info("Thing created", extra={"thing_id": thing.id})
    metrics.add_metric(name="ThingCreated", unit=MetricUnit.Count, value=1)
    return success_response(thing, status_code=201)


handler = handler_middleware(create_thing)


@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_HTTP)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    return handler(event, context)
