# In src/hello_service/schemas.py

import json
from typing import Any, Mapping, TypedDict

import pydantic
from pydantic import BaseModel, ConfigDict, Field

from .exceptions import InvalidResponseError

# --- Static Type Hinting (for mypy and IDEs) ---


class ResponseEnvelope(TypedDict):
    """The value the handler returns; API Gateway maps it to an HTTP response."""

    statusCode: int
    body: str


# --- Runtime Validation (using Pydantic) ---


class LambdaContextSnapshot(BaseModel):
    """
    JSON-friendly copy of the public metadata on a Lambda runtime context.

    Fields are read from attributes and dumped under the camelCase names the
    Node.js runtime uses for the same values.
    """

    model_config = ConfigDict(from_attributes=True)

    function_name: str | None = Field(None, serialization_alias="functionName")
    function_version: str | None = Field(None, serialization_alias="functionVersion")
    invoked_function_arn: str | None = Field(
        None, serialization_alias="invokedFunctionArn"
    )
    memory_limit_in_mb: int | None = Field(None, serialization_alias="memoryLimitInMB")
    aws_request_id: str | None = Field(None, serialization_alias="awsRequestId")
    log_group_name: str | None = Field(None, serialization_alias="logGroupName")
    log_stream_name: str | None = Field(None, serialization_alias="logStreamName")

    @classmethod
    def from_context(cls, context: Any) -> dict[str, Any]:
        return cls.model_validate(context).model_dump(by_alias=True)


class HelloResponseBody(BaseModel):
    """The decoded JSON body of a hello response."""

    message: str
    input: Any
    context: Any


class _EnvelopeModel(BaseModel):
    status_code: int = Field(..., alias="statusCode", strict=True)
    body: str = Field(..., strict=True)


def parse_envelope(envelope: Mapping[str, Any]) -> HelloResponseBody:
    """
    Validates a response envelope and returns its decoded body.

    Raises InvalidResponseError when the envelope is malformed or the body is
    not a JSON document with the expected keys.
    """
    try:
        parsed = _EnvelopeModel.model_validate(envelope)
    except pydantic.ValidationError as e:
        raise InvalidResponseError(
            "Response envelope is malformed.",
            context={"validation_errors": [err["msg"] for err in e.errors()]},
        ) from e

    try:
        raw_body = json.loads(parsed.body)
    except json.JSONDecodeError as e:
        raise InvalidResponseError(
            "Response body is not valid JSON.", context={"error": str(e)}
        ) from e

    try:
        return HelloResponseBody.model_validate(raw_body)
    except pydantic.ValidationError as e:
        raise InvalidResponseError(
            "Response body does not match the hello response shape.",
            context={"validation_errors": [err["msg"] for err in e.errors()]},
        ) from e
