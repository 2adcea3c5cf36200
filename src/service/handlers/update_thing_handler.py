"""
Update Thing handler - ``PATCH /things/{thingId}``.

Only the fields present in the body are written. Every successful update
refreshes updated_at and updated_by.
"""

from typing import Any, Dict, Optional

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEventV2
from aws_lambda_powertools.utilities.typing import LambdaContext

from service.dal import BaseDalHandler, get_dal_handler
from service.handlers.utils.actor import get_actor_id
from service.handlers.utils.api_response import success_response
from service.handlers.utils.errors import ThingNotFoundError, handle_service_errors
from service.handlers.utils.middleware import handler_middleware
from service.handlers.utils.observability import logger, metrics, tracer
from service.handlers.utils.validation import parse_json_body, require_thing_id, validate_update_request


@handle_service_errors('update_thing')
@tracer.capture_method
def update_thing(event: Dict[str, Any], context: Any, dal: Optional[BaseDalHandler] = None) -> Dict[str, Any]:
    """
    Partially update an existing thing.

    The identifier, body and field checks all run before the database is
    touched.
    """
    proxy_event = APIGatewayProxyEventV2(event)
    thing_id = require_thing_id(proxy_event)
    request = validate_update_request(parse_json_body(proxy_event))

    dal = dal or get_dal_handler()
    thing = dal.update_thing(thing_id, request.changes(), actor=get_actor_id(event))
    if thing is None:
        raise ThingNotFoundError(thing_id)

    logger.info("Thing updated", extra={"thing_id": thing_id})
    metrics.add_metric(name="ThingUpdated", unit=MetricUnit.Count, value=1)
    return success_response(thing)


handler = handler_middleware(update_thing)


@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_HTTP)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    return handler(event, context)
