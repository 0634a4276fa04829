"""
Pytest configuration and shared fixtures for the flavor orders service.

This module provides the test environment, a moto-backed DynamoDB orders table,
API Gateway event builders and a Lambda context used across unit and
integration tests.
"""

import json
import os
from typing import Any, Callable, Dict, Optional
from unittest.mock import Mock

import boto3
import pytest
from moto import mock_aws

from flavor_orders.dal import get_order_repository
from flavor_orders.dal.order_repository import OrderRepository

TEST_TABLE_NAME = "test-orders"


# Test environment configuration
@pytest.fixture(scope="session", autouse=True)
def test_environment():
    """Set up test environment variables."""
    os.environ.update({
        "AWS_DEFAULT_REGION": "us-east-1",
        "AWS_ACCESS_KEY_ID": "test",
        "AWS_SECRET_ACCESS_KEY": "test",
        "ORDERS_TABLE_NAME": TEST_TABLE_NAME,
        "POWERTOOLS_SERVICE_NAME": "test-flavor-orders",
        "POWERTOOLS_METRICS_NAMESPACE": "TestFlavorOrders",
        "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
        "LOG_LEVEL": "DEBUG",
        "LAMBDA_ENV_MODELER_DISABLE_CACHE": "true",  # Re-read env vars on every call
    })


@pytest.fixture(autouse=True)
def reset_cached_configuration():
    """Drop the shared repository between tests."""
    get_order_repository.cache_clear()
    yield
    get_order_repository.cache_clear()


# DynamoDB fixtures
@pytest.fixture
def aws():
    """Run the test against moto's in-memory AWS."""
    with mock_aws():
        yield


@pytest.fixture
def dynamodb_table(aws):
    """Create a mock DynamoDB orders table."""
    dynamodb = boto3.resource("dynamodb", region_name="us-east-1")
    table = dynamodb.create_table(
        TableName=TEST_TABLE_NAME,
        KeySchema=[{"AttributeName": "Id", "KeyType": "HASH"}],
        AttributeDefinitions=[{"AttributeName": "Id", "AttributeType": "S"}],
        BillingMode="PAY_PER_REQUEST",
    )
    table.wait_until_exists()
    yield table


@pytest.fixture
def repository(dynamodb_table) -> OrderRepository:
    """Order repository bound to the mock table."""
    return OrderRepository(TEST_TABLE_NAME)


@pytest.fixture
def failing_repository(aws) -> OrderRepository:
    """Order repository whose table does not exist, so every call fails."""
    return OrderRepository("missing-orders-table")


# Event fixtures
@pytest.fixture
def make_event() -> Callable[..., Dict[str, Any]]:
    """Build API Gateway proxy events for the per-route handlers."""

    def _make_event(
        body: Optional[Any] = None,
        path_parameters: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        if body is not None and not isinstance(body, str):
            body = json.dumps(body)
        return {
            "pathParameters": path_parameters,
            "body": body,
            "requestContext": {"requestId": "test-request-id-123"},
        }

    return _make_event


@pytest.fixture
def make_rest_event() -> Callable[..., Dict[str, Any]]:
    """Build full API Gateway REST proxy events for the routed API."""

    def _make_rest_event(method: str, path: str, body: Optional[Any] = None) -> Dict[str, Any]:
        if body is not None and not isinstance(body, str):
            body = json.dumps(body)
        return {
            "resource": "/{proxy+}",
            "httpMethod": method,
            "path": path,
            "headers": {"Content-Type": "application/json"},
            "multiValueHeaders": {"Content-Type": ["application/json"]},
            "body": body,
            "requestContext": {
                "requestId": "test-request-id-123",
                "accountId": "123456789012",
                "stage": "test",
                "httpMethod": method,
                "path": path,
                "resourcePath": "/{proxy+}",
                "identity": {"sourceIp": "127.0.0.1"},
            },
            "pathParameters": {"proxy": path.lstrip("/")},
            "queryStringParameters": None,
            "multiValueQueryStringParameters": None,
            "stageVariables": None,
            "isBase64Encoded": False,
        }

    return _make_rest_event


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-flavor-orders-function"
    context.function_version = "1"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-flavor-orders-function"
    context.memory_limit_in_mb = 512
    context.get_remaining_time_in_millis.return_value = 30000
    context.aws_request_id = "test-request-id-123"
    context.log_group_name = "/aws/lambda/test-flavor-orders-function"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    return context


# Error simulation fixtures
@pytest.fixture
def mock_dynamodb_error():
    """Build botocore ClientErrors for testing error handling."""
    from botocore.exceptions import ClientError

    def create_error(error_code: str, message: str = "Test error"):
        return ClientError(
            error_response={
                "Error": {
                    "Code": error_code,
                    "Message": message,
                }
            },
            operation_name="TestOperation"
        )

    return create_error


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
