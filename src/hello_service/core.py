# src/hello_service/core.py

"""
Core logic for the hello endpoint.

Builds the response envelope returned for every invocation: a fixed success
status and a JSON body echoing the invocation event and context next to a
fixed message. Nothing here performs I/O or touches shared state, so the
builders are safe to call concurrently.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any

import pydantic

from .exceptions import ResponseSerializationError
from .schemas import LambdaContextSnapshot, ResponseEnvelope

logger = logging.getLogger(__name__)

HELLO_MESSAGE = (
    "Go Serverless Webpack (Typescript) v1.0! Your function executed successfully!"
)
SUCCESS_STATUS_CODE = 200
BODY_INDENT = 2

_ECHOED_CONTEXT_TYPES = (Mapping, str, int, float, bool, list, tuple)


def _context_payload(context: Any) -> Any:
    """
    Returns the value echoed under the body's ``context`` key.

    Mappings, JSON scalars and sequences are echoed as they are. Lambda
    runtime context objects are not JSON-serializable, so their public
    metadata is snapshotted instead.
    """
    if context is None or isinstance(context, _ECHOED_CONTEXT_TYPES):
        return context
    try:
        return LambdaContextSnapshot.from_context(context)
    except pydantic.ValidationError as e:
        raise ResponseSerializationError(
            "context is neither JSON data nor a Lambda context object",
            context={"context_type": type(context).__name__},
        ) from e


def render_body(event: Any, context: Any) -> str:
    """Serializes ``{message, input, context}`` with 2-space indentation."""
    payload = {
        "message": HELLO_MESSAGE,
        "input": event,
        "context": _context_payload(context),
    }
    try:
        return json.dumps(
            payload, indent=BODY_INDENT, ensure_ascii=False, allow_nan=False
        )
    except (TypeError, ValueError) as e:
        raise ResponseSerializationError(
            str(e), context={"input_type": type(event).__name__}
        ) from e


def build_hello_response(event: Any, context: Any) -> ResponseEnvelope:
    """Returns the success envelope for one invocation."""
    body = render_body(event, context)
    logger.debug("Rendered hello response body", extra={"body_length": len(body)})
    return {"statusCode": SUCCESS_STATUS_CODE, "body": body}


async def build_hello_response_async(event: Any, context: Any) -> ResponseEnvelope:
    """Awaitable variant of :func:`build_hello_response` for asyncio hosts."""
    return build_hello_response(event, context)
