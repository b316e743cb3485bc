"""
VerifyResponse Lambda - Source Package

This package contains a single-endpoint AWS Lambda function that reports
its public IP address, traced with OpenTelemetry and exported to Splunk
Observability Cloud.
"""

__version__ = "1.0.0"

# Package metadata
__all__ = [
    "__version__",
]
