"""
Pytest configuration and shared fixtures for the Things service.

This module provides common test fixtures and configuration used across
unit and integration tests.
"""

import json
import os
from typing import Any, Callable, Dict, List, Optional
from unittest.mock import Mock

import pytest

# Powertools reads its settings at import time, so the environment is set
# before anything from the service package is imported.
os.environ.update({
    "AWS_DEFAULT_REGION": "us-east-1",
    "AWS_ACCESS_KEY_ID": "test",
    "AWS_SECRET_ACCESS_KEY": "test",
    "DB_CLUSTER_ARN": "arn:aws:rds:us-east-1:123456789012:cluster:things",
    "DB_SECRET_ARN": "arn:aws:secretsmanager:us-east-1:123456789012:secret:things",
    "DB_NAME": "testdb",
    "POWERTOOLS_SERVICE_NAME": "test-things-service",
    "POWERTOOLS_METRICS_NAMESPACE": "TestThingsService",
    "LOG_LEVEL": "DEBUG",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
})

import service.dal  # noqa: E402
from service.dal.rds_data_handler import RdsDataThingsHandler  # noqa: E402

THING_ID = "550e8400-e29b-41d4-a716-446655440000"


def make_record(
    thing_id: str = THING_ID,
    name: str = "Widget",
    description: Optional[str] = "A small widget",
    created_at: str = "2024-01-01 00:00:00",
    updated_at: str = "2024-01-01 00:00:00",
    created_by: str = "system",
    updated_by: str = "system",
) -> List[Dict[str, Any]]:
    """Build an RDS Data API record in THING_COLUMNS order."""
    return [
        {"stringValue": thing_id},
        {"stringValue": name},
        {"stringValue": description} if description is not None else {"isNull": True},
        {"stringValue": created_at},
        {"stringValue": updated_at},
        {"stringValue": created_by},
        {"stringValue": updated_by},
    ]


@pytest.fixture
def rds_client() -> Mock:
    """Mock rds-data client; every statement returns no records unless configured."""
    client = Mock()
    client.execute_statement.return_value = {"records": []}
    return client


@pytest.fixture
def dal(rds_client) -> RdsDataThingsHandler:
    return RdsDataThingsHandler(
        cluster_arn=os.environ["DB_CLUSTER_ARN"],
        secret_arn=os.environ["DB_SECRET_ARN"],
        database=os.environ["DB_NAME"],
        client=rds_client,
    )


@pytest.fixture
def make_event() -> Callable[..., Dict[str, Any]]:
    """Factory for API Gateway HTTP API (payload v2) events."""

    def _make_event(
        method: str = "GET",
        thing_id: Optional[str] = None,
        body: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        path = f"/things/{thing_id}" if thing_id is not None else "/things"
        event: Dict[str, Any] = {
            "version": "2.0",
            "routeKey": f"{method} {path}",
            "rawPath": path,
            "rawQueryString": "",
            "headers": headers if headers is not None else {"Content-Type": "application/json"},
            "requestContext": {
                "accountId": "123456789012",
                "apiId": "api123",
                "domainName": "api.example.com",
                "requestId": "test-request-id-123",
                "routeKey": f"{method} {path}",
                "stage": "$default",
                "time": "01/Jan/2024:00:00:00 +0000",
                "timeEpoch": 1704067200000,
                "http": {
                    "method": method,
                    "path": path,
                    "protocol": "HTTP/1.1",
                    "sourceIp": "127.0.0.1",
                    "userAgent": "test-agent/1.0",
                },
            },
            "isBase64Encoded": False,
        }
        if thing_id is not None:
            event["pathParameters"] = {"thingId": thing_id}
        if body is not None:
            event["body"] = body if isinstance(body, str) else json.dumps(body)
        return event

    return _make_event


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-things-function"
    context.function_version = "1"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-things-function"
    context.memory_limit_in_mb = 512
    context.aws_request_id = "test-request-id-123"
    context.log_group_name = "/aws/lambda/test-things-function"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    context.get_remaining_time_in_millis.return_value = 30000
    return context


def parse_body(response: Dict[str, Any]) -> Dict[str, Any]:
    return json.loads(response["body"])


# Pytest configuration
def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def reset_dal_handler():
    """Drop the process-wide DAL handler between tests."""
    service.dal._dal_handler = None
    yield
    service.dal._dal_handler = None
