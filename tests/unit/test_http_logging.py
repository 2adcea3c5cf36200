"""
Unit tests for the request and response logging hooks.
"""

from types import SimpleNamespace
from unittest.mock import patch

import pytest

from service.handlers.utils.http_logging import request_logger, response_logger


@pytest.fixture
def logger():
    with patch("service.handlers.utils.http_logging.logger") as mock_logger:
        yield mock_logger


class TestRequestLogger:
    """Test cases for request_logger."""

    def test_logs_method_path_and_body(self, logger, make_event):
        request = SimpleNamespace(event=make_event(method="POST", body='{"name": "Widget"}'))

        request_logger(request)

        logger.info.assert_called_once_with("Request", extra={
            "method": "POST",
            "path": "/things",
            "body": '{"name": "Widget"}',
        })

    def test_event_without_request_context(self, logger):
        request_logger(SimpleNamespace(event={}))

        logger.info.assert_called_once_with("Request", extra={"method": None, "path": None, "body": None})


class TestResponseLogger:
    """Test cases for response_logger."""

    def test_logs_response_with_json_body(self, logger):
        response_logger(SimpleNamespace(response={"statusCode": 200, "body": '{"success": true}'}))

        logger.info.assert_called_once_with("Response (object)", extra={
            "status_code": 200,
            "body": {"success": True},
        })

    def test_logs_string_response(self, logger):
        response_logger(SimpleNamespace(response="plain string response"))

        logger.info.assert_called_once_with("Response (string)", extra={"response": "plain string response"})

    def test_warns_when_response_is_missing(self, logger):
        response_logger(SimpleNamespace())

        logger.warning.assert_called_once_with("Response object is undefined or missing.")

    def test_warns_when_response_is_none(self, logger):
        response_logger(SimpleNamespace(response=None))

        logger.warning.assert_called_once_with("Response object is undefined or missing.")

    def test_warns_on_unexpected_structure(self, logger):
        response_logger(SimpleNamespace(response={"unexpected": "structure"}))

        logger.warning.assert_called_once_with("Unexpected response structure", extra={
            "response": {"unexpected": "structure"},
        })

    def test_invalid_json_body_is_logged_raw(self, logger):
        response_logger(SimpleNamespace(response={"statusCode": 200, "body": "invalid json"}))

        logger.warning.assert_called_once_with("Failed to parse body as JSON", extra={"body": "invalid json"})
        logger.info.assert_called_once_with("Response (object)", extra={
            "status_code": 200,
            "body": "invalid json",
        })

    def test_empty_body(self, logger):
        response_logger(SimpleNamespace(response={"statusCode": 204, "body": ""}))

        logger.info.assert_called_once_with("Response (object)", extra={"status_code": 204, "body": None})
