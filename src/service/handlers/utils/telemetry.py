"""
Splunk Observability telemetry configuration.

Builds the process-wide OpenTelemetry ``TracerProvider`` that exports spans
over OTLP/HTTP-protobuf to the Splunk ingest endpoint of the configured realm.
"""

from typing import Dict, Optional

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.sdk.extension.aws.resource import AwsLambdaResourceDetector
from opentelemetry.sdk.resources import Resource, get_aggregated_resources
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, SpanExporter
from opentelemetry.sdk.trace.sampling import ALWAYS_ON
from opentelemetry.semconv.resource import ResourceAttributes

from service.handlers.models.env_vars import TelemetryEnvVars, get_telemetry_env_vars
from service.handlers.utils.observability import logger

SPLUNK_INGEST_URL = 'https://ingest.{realm}.signalfx.com/v2/trace/otlp'
SPLUNK_TOKEN_HEADER = 'X-SF-TOKEN'


def build_exporter_endpoint(realm: str) -> str:
    return SPLUNK_INGEST_URL.format(realm=realm)


def build_exporter_headers(access_token: str) -> Dict[str, str]:
    return {SPLUNK_TOKEN_HEADER: access_token}


def build_resource(env_vars: TelemetryEnvVars) -> Resource:
    """
    Build the resource describing this function.

    Service attributes are set explicitly; cloud and faas attributes are
    detected from the Lambda runtime environment.
    """
    initial_resource = Resource.create({
        ResourceAttributes.SERVICE_NAME: env_vars.service_name,
        ResourceAttributes.SERVICE_VERSION: env_vars.service_version,
        ResourceAttributes.DEPLOYMENT_ENVIRONMENT: env_vars.DEPLOYMENT_ENVIRONMENT,
    })
    return get_aggregated_resources([AwsLambdaResourceDetector()], initial_resource=initial_resource)


def build_span_exporter(env_vars: TelemetryEnvVars) -> OTLPSpanExporter:
    return OTLPSpanExporter(
        endpoint=build_exporter_endpoint(env_vars.SPLUNK_REALM),
        headers=build_exporter_headers(env_vars.SPLUNK_ACCESS_TOKEN),
    )


def configure_splunk_telemetry(
    env_vars: Optional[TelemetryEnvVars] = None,
    span_exporter: Optional[SpanExporter] = None,
) -> TracerProvider:
    """
    Configure the tracer provider for Splunk Observability.

    Must run once per execution context, before the first invocation.

    Args:
        env_vars: Telemetry settings, loaded from the environment when omitted
        span_exporter: Exporter override, the Splunk OTLP exporter when omitted

    Returns:
        The configured tracer provider, also registered as the global provider

    Raises:
        TelemetryConfigurationError: If the Splunk access token or realm is missing
    """
    if env_vars is None:
        env_vars = get_telemetry_env_vars()
    if span_exporter is None:
        span_exporter = build_span_exporter(env_vars)

    provider = TracerProvider(sampler=ALWAYS_ON, resource=build_resource(env_vars))
    provider.add_span_processor(BatchSpanProcessor(span_exporter))

    # Outbound calls through the shared httpx client get client spans
    HTTPXClientInstrumentor().instrument(tracer_provider=provider)

    trace.set_tracer_provider(provider)

    logger.info(
        'Splunk telemetry configured',
        extra={
            'service_name': env_vars.service_name,
            'deployment_environment': env_vars.DEPLOYMENT_ENVIRONMENT,
            'exporter_endpoint': build_exporter_endpoint(env_vars.SPLUNK_REALM),
        },
    )
    return provider
