"""
Verify Handler - request handling for the VerifyResponse function.

Looks up the function's public IP address and confirms the request.
The request body is logged but not parsed.
"""

from typing import Any, Dict

import httpx
from aws_lambda_powertools.metrics import MetricUnit

from service.dal import LocationLookup
from service.handlers.utils.observability import logger, metrics
from service.models.output import VerifyOutput, create_api_response


def lookup_location(location_lookup: LocationLookup) -> str:
    """Call the location lookup, counting successes and failures."""
    try:
        location = location_lookup.get_calling_ip()
    except httpx.HTTPError as e:
        logger.exception("Location lookup failed", extra={"error": str(e)})
        metrics.add_metric(name="LocationLookupFailure", unit=MetricUnit.Count, value=1)
        raise

    metrics.add_metric(name="LocationLookupSuccess", unit=MetricUnit.Count, value=1)
    return location


def verify_request(event: Dict[str, Any], location_lookup: LocationLookup) -> Dict[str, Any]:
    """
    Build the verify response for an API Gateway proxy event.

    Args:
        event: API Gateway proxy event
        location_lookup: Lookup used to resolve the calling IP

    Returns:
        API Gateway response with status 200

    Raises:
        httpx.HTTPError: If the location lookup fails
    """
    logger.info(f"Received request body: {event.get('body')}")

    metrics.add_metric(name="RequestCount", unit=MetricUnit.Count, value=1)

    output = VerifyOutput(location=lookup_location(location_lookup))

    return create_api_response(status_code=200, body=output.model_dump_json())
