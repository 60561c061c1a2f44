"""
The Lambda Adapter for the hello service.

This module is the entry point for the AWS Lambda function
(``handler: hello_service.app.hello``). It is responsible for:
1.  Initializing and configuring AWS Lambda Powertools (Logger, Tracer, Metrics).
2.  Delegating to the core builder (`build_hello_response`) to produce the
    response envelope.
3.  Logging any failure with structured error context before letting it
    propagate to the Lambda runtime.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from .config import get_config
from .core import build_hello_response
from .exceptions import HelloServiceError, get_error_context
from .schemas import ResponseEnvelope

# --- Global & Reusable Components ---
CONFIG = get_config()

logger = Logger(service=CONFIG.service_name, level=CONFIG.log_level)
tracer = Tracer(service=CONFIG.service_name)
metrics = Metrics(
    namespace=CONFIG.metrics_namespace,
    service=CONFIG.service_name,
)


def _request_summary(event: Any) -> dict[str, Any]:
    """Picks the routing fields of an API Gateway event for the log line."""
    if not isinstance(event, dict):
        return {"event_type": type(event).__name__}
    return {
        "http_method": event.get("httpMethod"),
        "path": event.get("path"),
    }


@logger.inject_lambda_context(log_event=CONFIG.log_event)
@tracer.capture_lambda_handler
@metrics.log_metrics(capture_cold_start_metric=True)
def hello(event: Any, context: LambdaContext) -> ResponseEnvelope:
    """Main Lambda handler for the hello endpoint."""
    metrics.add_dimension("environment", CONFIG.environment)
    logger.info("Received hello request", extra=_request_summary(event))

    try:
        response = build_hello_response(event, context)
    except HelloServiceError as e:
        metrics.add_metric(name="HelloFailures", unit=MetricUnit.Count, value=1)
        logger.exception(
            "Failed to build hello response", extra={"error": get_error_context(e)}
        )
        raise

    metrics.add_metric(name="HelloInvocations", unit=MetricUnit.Count, value=1)
    logger.info(
        "Hello response built",
        extra={
            "status_code": response["statusCode"],
            "body_length": len(response["body"]),
        },
    )
    return response
