"""
VerifyResponse Service Module.

This package contains the service implementation behind the VerifyResponse
Lambda function:

- handlers: request handling, telemetry configuration and tracing wrapper
- dal: outbound lookups against external services
- models: response schemas
"""

__version__ = "1.0.0"
__description__ = "Splunk-traced VerifyResponse Lambda function"

# Re-export commonly used classes for convenience
from service.models.output import VerifyOutput
from service.handlers.utils.observability import logger, metrics

__all__ = [
    "VerifyOutput",
    "logger",
    "metrics",
]
