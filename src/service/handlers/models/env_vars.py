"""
Environment variable models for type-safe configuration.

The Things handlers talk to an Aurora cluster through the RDS Data API, so the
only mandatory settings are the cluster ARN, the credentials secret ARN and the
database name.
"""

from typing import Annotated

from aws_lambda_env_modeler import BaseModel as BaseEnvModel, get_environment_variables
from pydantic import Field


class ThingsHandlerEnvVars(BaseEnvModel):
    """Environment variables for the Things handlers."""

    DB_CLUSTER_ARN: Annotated[str, Field(
        description='ARN of the Aurora cluster that hosts the things table',
        min_length=1
    )]

    DB_SECRET_ARN: Annotated[str, Field(
        description='ARN of the Secrets Manager secret holding the database credentials',
        min_length=1
    )]

    DB_NAME: Annotated[str, Field(
        description='Database name passed to every statement',
        min_length=1
    )]

    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        default='things-service',
        description='Service name for AWS Powertools'
    )] = 'things-service'

    POWERTOOLS_METRICS_NAMESPACE: Annotated[str, Field(
        default='ThingsService',
        description='Namespace for CloudWatch metrics'
    )] = 'ThingsService'

    LOG_LEVEL: Annotated[str, Field(
        default='INFO',
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    POWERTOOLS_TRACE_DISABLED: Annotated[str, Field(
        default='false',
        description='Disable X-Ray tracing (true/false)',
        pattern=r'^(true|false)$'
    )] = 'false'


def get_handler_env_vars() -> ThingsHandlerEnvVars:
    """
    Get typed environment variables for the Things handlers.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=ThingsHandlerEnvVars)
