"""
Delete Thing handler - ``DELETE /things/{thingId}``.
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
from service.handlers.utils.validation import require_thing_id
from service.models.output import DeleteThingOutput


@handle_service_errors('delete_thing')
@tracer.capture_method
def delete_thing(event: Dict[str, Any], context: Any, dal: Optional[BaseDalHandler] = None) -> Dict[str, Any]:
    thing_id = require_thing_id(APIGatewayProxyEventV2(event))

    dal = dal or get_dal_handler()
    if not dal.thing_exists(thing_id):
        raise ThingNotFoundError(thing_id)

    # The existence check and the delete are separate statements; a concurrent
    # delete in between still reports success here.
    dal.delete_thing_by_id(thing_id)

    logger.info("Thing deleted", extra={"thing_id": thing_id})
    metrics.add_metric(name="ThingDeleted", unit=MetricUnit.Count, value=1)
    return success_response(DeleteThingOutput(id=thing_id))


handler = handler_middleware(delete_thing)


@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_HTTP)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    return handler(event, context)
