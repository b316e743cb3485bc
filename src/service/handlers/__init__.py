"""
AWS Lambda Handlers Module.

This module contains the request handling for the VerifyResponse function
and the cross-cutting utilities around it:

1. Handler Layer (this module): request logging and response assembly
2. Data Access Layer: outbound location lookup

The utilities provide:
- Structured logging and metrics with AWS Lambda Powertools
- OpenTelemetry tracing exported to Splunk Observability Cloud
- Process-wide runtime state built once per execution context
"""

__version__ = "1.0.0"

# Re-export handler utilities for convenience
from service.handlers.utils.observability import logger, metrics
from service.handlers.utils.tracing import trace_invocation, traced
from service.handlers.verify_handler import verify_request

__all__ = [
    "logger",
    "metrics",
    "trace_invocation",
    "traced",
    "verify_request",
]
