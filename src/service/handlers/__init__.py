"""
AWS Lambda Handlers Module.

One handler module per operation on the Thing resource:

- create_thing_handler: POST /things
- get_thing_handler: GET /things and GET /things/{thingId}
- update_thing_handler: PATCH /things/{thingId}
- delete_thing_handler: DELETE /things/{thingId}

Each module exposes the bare handler function, ``handler`` (the handler wrapped
by the middleware pipeline) and ``lambda_handler`` (the Powertools-decorated
Lambda entry point).
"""

__version__ = "1.0.0"

from service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "logger",
    "tracer",
    "metrics",
]
