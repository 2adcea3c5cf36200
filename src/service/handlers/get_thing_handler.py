"""
Get Thing handler - ``GET /things`` and ``GET /things/{thingId}``.

Without a thingId path parameter every thing is listed, most recent first;
with one, that single thing is returned.
"""

from typing import Any, Dict, Optional

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEventV2
from aws_lambda_powertools.utilities.typing import LambdaContext

from service.dal import BaseDalHandler, get_dal_handler
from service.handlers.utils.api_response import success_response
from service.handlers.utils.errors import ThingNotFoundError, handle_service_errors
from service.handlers.utils.middleware import handler_middleware
from service.handlers.utils.observability import logger, metrics, tracer
from service.handlers.utils.validation import get_thing_id, validate_thing_id


@handle_service_errors('get_thing')
@tracer.capture_method
def get_thing(event: Dict[str, Any], context: Any, dal: Optional[BaseDalHandler] = None) -> Dict[str, Any]:
    """
    Fetch one thing, or all of them when no thingId is given.

    Args:
        event: API Gateway HTTP API event
        context: Lambda context object
        dal: Data access handler; the process-wide default when omitted

    Returns:
        200 with a thing or a list of things, or an error envelope
    """
    thing_id = get_thing_id(APIGatewayProxyEventV2(event))

    if thing_id is None:
        things = (dal or get_dal_handler()).list_things()
        logger.info("Things listed", extra={"thing_count": len(things)})
        metrics.add_metric(name="ThingsListed", unit=MetricUnit.Count, value=1)
        return success_response(things)

    validate_thing_id(thing_id)
    thing = (dal or get_dal_handler()).get_thing_by_id(thing_id)
    if thing is None:
        raise ThingNotFoundError(thing_id)

    metrics.add_metric(name="ThingRetrieved", unit=MetricUnit.Count, value=1)
    return success_response(thing)


handler = handler_middleware(get_thing)


@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_HTTP)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    return handler(event, context)
