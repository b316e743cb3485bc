"""
Process-wide state of one Lambda execution context.

The tracer provider and the location lookup with its HTTP client are built
once at cold start and passed explicitly to the handler on every invocation.
"""

from dataclasses import dataclass

from opentelemetry.sdk.trace import TracerProvider

from service.dal import LocationLookup, get_location_lookup
from service.handlers.utils.observability import logger
from service.handlers.utils.telemetry import configure_splunk_telemetry


@dataclass(frozen=True)
class FunctionRuntime:
    """Long-lived resources shared by every invocation in an execution context."""

    tracer_provider: TracerProvider
    location_client: LocationLookup


def create_runtime() -> FunctionRuntime:
    """
    Build the execution context state.

    Raises:
        TelemetryConfigurationError: If the Splunk access token or realm is missing
    """
    runtime = FunctionRuntime(
        tracer_provider=configure_splunk_telemetry(),
        location_client=get_location_lookup(),
    )
    logger.info('Function runtime initialized')
    return runtime
