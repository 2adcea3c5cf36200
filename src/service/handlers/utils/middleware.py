"""
Middleware pipeline wrapping every Things handler.

A Pipeline wraps a plain ``(event, context) -> response`` handler and runs:

1. "before" hooks, in registration order
2. the handler itself, storing its return value on the request
3. "after" hooks, in registration order, on success only

If a before hook or the handler raises, the single error interceptor populates
``request.response`` and the original exception is re-raised to the caller.
After hooks are skipped on failure, and an after hook that raises stops the
remaining hooks.
"""

import functools
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Protocol

from service.handlers.utils.errors import error_handler
from service.handlers.utils.http_logging import request_logger, response_logger

DEFAULT_CONTENT_TYPE = 'application/json'


@dataclass
class Request:
    """Per-invocation state shared by hooks, the handler and the error interceptor."""

    event: Dict[str, Any]
    context: Any
    response: Any = None
    error: Optional[Exception] = None


Hook = Callable[[Request], None]


class Middleware(Protocol):
    """Object bundling an optional before and after hook."""

    before: Optional[Hook]
    after: Optional[Hook]


class Pipeline:
    """Handler wrapper with fluent hook registration."""

    def __init__(self, handler: Callable[[Dict[str, Any], Any], Any]) -> None:
        self.handler = handler
        self.before_hooks: List[Hook] = []
        self.after_hooks: List[Hook] = []
        self.error_interceptor: Optional[Hook] = None
        functools.update_wrapper(self, handler, updated=())

    def before(self, hook: Hook) -> 'Pipeline':
        self.before_hooks.append(hook)
        return self

    def after(self, hook: Hook) -> 'Pipeline':
        self.after_hooks.append(hook)
        return self

    def use(self, middleware: Middleware) -> 'Pipeline':
        """Register the before and/or after hook of a middleware object."""
        before = getattr(middleware, 'before', None)
        after = getattr(middleware, 'after', None)
        if before is not None:
            self.before(before)
        if after is not None:
            self.after(after)
        return self

    def on_error(self, interceptor: Hook) -> 'Pipeline':
        if self.error_interceptor is not None:
            raise ValueError('An error interceptor is already registered on this pipeline')
        self.error_interceptor = interceptor
        return self

    def __call__(self, event: Dict[str, Any], context: Any) -> Any:
        request = Request(event=event, context=context)

        try:
            for hook in self.before_hooks:
                hook(request)
            request.response = self.handler(event, context)
        except Exception as error:
            request.error = error
            if self.error_interceptor is not None:
                self.error_interceptor(request)
            raise

        for hook in self.after_hooks:
            hook(request)

        return request.response


def normalize_headers(request: Request) -> None:
    """Lowercase inbound header names so handlers can look them up reliably."""
    for key in ('headers', 'multiValueHeaders'):
        headers = request.event.get(key)
        if headers:
            request.event[key] = {name.lower(): value for name, value in headers.items()}


def ensure_content_type(request: Request) -> None:
    """Add a lowercase JSON content-type unless the handler already set one."""
    response = request.response
    if not isinstance(response, dict):
        return

    headers = response.get('headers') or {}
    if 'content-type' not in headers and 'Content-Type' not in headers:
        response['headers'] = {**headers, 'content-type': DEFAULT_CONTENT_TYPE}


class HttpHooks:
    """Request logging before the handler; content-type and response logging after it."""

    @staticmethod
    def before(request: Request) -> None:
        request_logger(request)

    @staticmethod
    def after(request: Request) -> None:
        ensure_content_type(request)
        response_logger(request)


def handler_middleware(handler: Callable[[Dict[str, Any], Any], Any]) -> Pipeline:
    """Wrap a Things handler with the standard middleware stack."""
    return (
        Pipeline(handler)
        .before(normalize_headers)
        .use(HttpHooks())
        .on_error(error_handler)
    )
