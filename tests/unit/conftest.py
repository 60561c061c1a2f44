"""
Shared fixtures for unit tests.
"""

from __future__ import annotations

import os
import types
import uuid

import pytest


@pytest.fixture(scope="session", autouse=True)
def _env_vars():
    """
    Ensures a deterministic environment for every test run.
    Overwrite *only* the variables needed by the handler.
    """
    original = os.environ.copy()
    os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "hello-service-test")
    os.environ.setdefault("POWERTOOLS_LOG_LEVEL", "INFO")
    os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")
    os.environ.setdefault("ENVIRONMENT", "test")
    yield
    os.environ.clear()
    os.environ.update(original)


# ---------- Minimal, realistic dummy events ---------- #
@pytest.fixture
def api_gateway_event() -> dict:
    """A REST API (v1) proxy event for ``GET /hello``."""
    return {
        "resource": "/hello",
        "path": "/hello",
        "httpMethod": "GET",
        "headers": {"Accept": "application/json", "Host": "example.execute-api.com"},
        "multiValueHeaders": {"Accept": ["application/json"]},
        "queryStringParameters": {"name": "world"},
        "multiValueQueryStringParameters": {"name": ["world"]},
        "pathParameters": None,
        "stageVariables": None,
        "requestContext": {
            "requestId": "c6af9ac6-7b61-11e6-9a41-93e8deadbeef",
            "stage": "dev",
            "identity": {"sourceIp": "127.0.0.1"},
        },
        "body": None,
        "isBase64Encoded": False,
    }


@pytest.fixture
def lambda_context():
    """A *very* small stand-in for the LambdaContext object."""
    return types.SimpleNamespace(
        function_name="hello-service-test",
        function_version="$LATEST",
        invoked_function_arn="arn:aws:lambda:eu-west-1:000000000000:function:hello",
        memory_limit_in_mb=128,
        aws_request_id="req-" + uuid.uuid4().hex,
        log_group_name="/aws/lambda/hello-service-test",
        log_stream_name="2026/10/19/[$LATEST]abcdef",
        get_remaining_time_in_millis=lambda: 6000,
    )
