"""
Pytest configuration and shared fixtures for the VerifyResponse function.

This module provides common test fixtures and configuration used across
unit and integration tests.
"""

import os
import pytest
from typing import Any, Dict
from unittest.mock import Mock

# Test environment configuration, applied before test modules import the
# entry point since it builds the runtime on import.
os.environ.update({
    "AWS_DEFAULT_REGION": "us-east-1",
    "AWS_LAMBDA_FUNCTION_NAME": "verify-response-test",
    "SPLUNK_ACCESS_TOKEN": "test-access-token",
    "SPLUNK_REALM": "us0",
    "DEPLOYMENT.ENVIRONMENT": "test",
    "POWERTOOLS_SERVICE_NAME": "test-verify-response",
    "POWERTOOLS_METRICS_NAMESPACE": "TestVerifyResponse",
    "LOG_LEVEL": "DEBUG",
    "OTEL_SDK_DISABLED": "true",  # No span export in tests
})


@pytest.fixture
def api_gateway_event() -> Dict[str, Any]:
    """Create a sample API Gateway event for testing."""
    return {
        "resource": "/verify",
        "path": "/verify",
        "httpMethod": "POST",
        "headers": {
            "Content-Type": "application/json",
            "User-Agent": "test-agent/1.0",
        },
        "body": '{"inputString": "hello"}',
        "requestContext": {
            "requestId": "test-request-id-123",
            "accountId": "123456789012",
            "stage": "test",
            "httpMethod": "POST",
            "path": "/verify",
            "protocol": "HTTP/1.1",
            "identity": {
                "sourceIp": "127.0.0.1",
                "userAgent": "test-agent/1.0",
            },
        },
        "pathParameters": None,
        "queryStringParameters": None,
        "multiValueQueryStringParameters": None,
        "stageVariables": None,
        "isBase64Encoded": False,
    }


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "verify-response-test"
    context.function_version = "1"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:verify-response-test"
    context.memory_limit_in_mb = "512"
    context.get_remaining_time_in_millis.return_value = 30000
    context.aws_request_id = "test-request-id-123"
    context.log_group_name = "/aws/lambda/verify-response-test"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    return context


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def reset_metrics():
    """Drop metrics buffered by handlers invoked outside log_metrics."""
    from service.handlers.utils.observability import metrics
    metrics.clear_metrics()
    yield
    metrics.clear_metrics()
