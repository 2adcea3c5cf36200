"""
Centralized observability utilities for the Things Lambda handlers.

One shared set of AWS Lambda Powertools instances is used by the middleware
pipeline, the handlers and the data access layer so that every log line of an
invocation carries the same service name and correlation id.
"""

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

# Metrics namespace for business KPIs
METRICS_NAMESPACE = 'ThingsService'

# JSON output format, service name can be set by environment variable "POWERTOOLS_SERVICE_NAME"
logger: Logger = Logger()

# Disabled by setting POWERTOOLS_TRACE_DISABLED to "true"
tracer: Tracer = Tracer()

# Namespace can be overridden by POWERTOOLS_METRICS_NAMESPACE
metrics: Metrics = Metrics(namespace=METRICS_NAMESPACE)
