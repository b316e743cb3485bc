"""
Centralized observability utilities for the VerifyResponse function.

Logging and metrics use AWS Lambda Powertools. Tracing is handled by the
OpenTelemetry provider built in ``service.handlers.utils.telemetry`` since
spans are exported to Splunk Observability rather than X-Ray.
"""

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics

# Metrics namespace for business KPIs
METRICS_NAMESPACE = 'VerifyResponse'

# JSON output format, service name can be set by environment variable "POWERTOOLS_SERVICE_NAME"
logger: Logger = Logger()

# Namespace and service name can be set by environment variables:
# - POWERTOOLS_METRICS_NAMESPACE
# - POWERTOOLS_SERVICE_NAME
metrics = Metrics(namespace=METRICS_NAMESPACE)
