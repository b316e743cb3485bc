"""
Environment variable models for type-safe configuration.

This module defines the Pydantic model for the environment variables the
VerifyResponse function reads at cold start. Values are parsed once and
cached by aws-lambda-env-modeler for the lifetime of the execution context.
"""

from typing import Annotated

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field, field_validator

SERVICE_VERSION = '1.0.0'


class TelemetryConfigurationError(ValueError):
    """Raised when the Splunk telemetry settings are missing or invalid."""


class TelemetryEnvVars(BaseModel):
    """Environment variables for Splunk Observability telemetry."""

    # Set by the Lambda runtime
    AWS_LAMBDA_FUNCTION_NAME: Annotated[str, Field(
        description='Function name, reported as the service name'
    )] = 'Unknown'

    SPLUNK_ACCESS_TOKEN: Annotated[str, Field(
        description='Splunk Observability ingest access token',
        min_length=1
    )]

    SPLUNK_REALM: Annotated[str, Field(
        description='Splunk Observability realm, e.g. us0',
        min_length=1
    )]

    DEPLOYMENT_ENVIRONMENT: Annotated[str, Field(
        alias='DEPLOYMENT.ENVIRONMENT',
        description='Value of the deployment.environment resource attribute'
    )] = 'development'

    @field_validator('SPLUNK_ACCESS_TOKEN', 'SPLUNK_REALM', mode='before')
    @classmethod
    def strip_whitespace(cls, value: str) -> str:
        if isinstance(value, str):
            return value.strip()
        return value

    @property
    def service_name(self) -> str:
        return self.AWS_LAMBDA_FUNCTION_NAME

    @property
    def service_version(self) -> str:
        return SERVICE_VERSION


def get_telemetry_env_vars() -> TelemetryEnvVars:
    """
    Get typed telemetry environment variables.

    Returns:
        Validated environment variables model instance

    Raises:
        TelemetryConfigurationError: If SPLUNK_ACCESS_TOKEN or SPLUNK_REALM is unset or blank
    """
    try:
        return get_environment_variables(model=TelemetryEnvVars)
    except ValueError as exc:
        raise TelemetryConfigurationError(
            f'SPLUNK_ACCESS_TOKEN and SPLUNK_REALM must be set: {exc}'
        ) from exc
