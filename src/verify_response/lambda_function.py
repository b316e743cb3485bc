"""
VerifyResponse Lambda Function - Entry point for the verify API.

Point the function handler at ``lambda_function.tracing_function_handler``.
The execution context state is built on import, so missing telemetry
credentials fail the cold start before any request is accepted.
"""

import os
import sys
from typing import Any, Dict

# Add the service module to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

from service.handlers.utils.observability import logger, metrics
from service.handlers.utils.runtime import create_runtime
from service.handlers.utils.tracing import trace_invocation
from service.handlers.verify_handler import verify_request

runtime = create_runtime()


@metrics.log_metrics(capture_cold_start_metric=True)
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
def tracing_function_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function entry point, traced with the execution context's provider.

    Args:
        event: Lambda event payload (API Gateway event)
        context: Lambda context object

    Returns:
        API Gateway response dictionary
    """
    return trace_invocation(runtime.tracer_provider, function_handler, event, context)


def function_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    return verify_request(event, runtime.location_client)
