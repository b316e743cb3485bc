"""
Tracing wrapper for Lambda handlers.

Every invocation runs inside a SERVER span created from the process-wide
tracer provider. The span is ended and the provider flushed before control
returns to the Lambda runtime, so spans are exported before the execution
environment is frozen.
"""

import functools
import json
from typing import Any, Callable, Dict, Optional

from aws_lambda_powertools.utilities.typing import LambdaContext
from opentelemetry import propagate
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.semconv.resource import ResourceAttributes
from opentelemetry.semconv.trace import SpanAttributes
from opentelemetry.trace import SpanKind

from service.handlers.utils.observability import logger

Handler = Callable[[Dict[str, Any], LambdaContext], Dict[str, Any]]

FLUSH_TIMEOUT_MILLIS = 30000

_is_cold_start = True


def _account_id_from_arn(function_arn: Optional[str]) -> Optional[str]:
    # arn:aws:lambda:<region>:<account-id>:function:<name>
    if not function_arn:
        return None
    parts = function_arn.split(':')
    return parts[4] if len(parts) > 4 else None


def _span_attributes(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    global _is_cold_start

    attributes: Dict[str, Any] = {
        SpanAttributes.FAAS_INVOCATION_ID: context.aws_request_id,
        SpanAttributes.FAAS_TRIGGER: 'http',
        SpanAttributes.FAAS_COLDSTART: _is_cold_start,
        ResourceAttributes.CLOUD_RESOURCE_ID: context.invoked_function_arn,
    }
    _is_cold_start = False

    account_id = _account_id_from_arn(context.invoked_function_arn)
    if account_id:
        attributes[ResourceAttributes.CLOUD_ACCOUNT_ID] = account_id

    if event.get('httpMethod'):
        attributes[SpanAttributes.HTTP_METHOD] = event['httpMethod']
    if event.get('resource'):
        attributes[SpanAttributes.HTTP_ROUTE] = event['resource']
    if event.get('path'):
        attributes[SpanAttributes.HTTP_TARGET] = event['path']
    return attributes


def _extract_parent_context(event: Dict[str, Any]):
    # W3C trace context only, X-Ray headers are ignored
    headers = event.get('headers') or {}
    return propagate.extract({key.lower(): value for key, value in headers.items()})


def trace_invocation(
    tracer_provider: TracerProvider,
    handler: Handler,
    event: Dict[str, Any],
    context: LambdaContext,
) -> Dict[str, Any]:
    """
    Invoke a handler inside a span of the given tracer provider.

    The span is ended and the provider flushed whether the handler returns
    or raises. The handler result, or its exception, is passed through
    unchanged.

    Args:
        tracer_provider: Process-wide tracer provider
        handler: Lambda handler to invoke
        event: Lambda event payload
        context: Lambda context object

    Returns:
        Whatever the handler returned
    """
    logger.info(f'Request received: {json.dumps(event, default=str)}')

    tracer = tracer_provider.get_tracer(__name__)
    try:
        with tracer.start_as_current_span(
            name=context.function_name,
            context=_extract_parent_context(event),
            kind=SpanKind.SERVER,
            attributes=_span_attributes(event, context),
        ) as span:
            result = handler(event, context)
            if isinstance(result, dict) and 'statusCode' in result:
                span.set_attribute(SpanAttributes.HTTP_STATUS_CODE, result['statusCode'])
            return result
    finally:
        tracer_provider.force_flush(FLUSH_TIMEOUT_MILLIS)


def traced(tracer_provider: TracerProvider) -> Callable[[Handler], Handler]:
    """Decorator form of ``trace_invocation`` bound to a tracer provider."""

    def decorator(handler: Handler) -> Handler:
        @functools.wraps(handler)
        def wrapper(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
            return trace_invocation(tracer_provider, handler, event, context)

        return wrapper

    return decorator
