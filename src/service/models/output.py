"""
Output models for API responses using Pydantic.

This module defines the response body of the verify endpoint and the
API Gateway proxy response envelope.
"""

from typing import Annotated, Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

VERIFIED_MESSAGE = 'DATA' + ' verified!'


class VerifyOutput(BaseModel):
    """Response model for a verified request."""

    model_config = ConfigDict(frozen=True)

    message: Annotated[str, Field(
        description='Fixed confirmation message',
        examples=[VERIFIED_MESSAGE]
    )] = VERIFIED_MESSAGE

    location: Annotated[str, Field(
        description='Public IP address the function called out from',
        examples=['203.0.113.10']
    )]


def create_api_response(
    status_code: int,
    body: Any,
    headers: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """Create an API Gateway proxy response."""

    response_headers = {"Content-Type": "application/json"}
    if headers:
        response_headers.update(headers)

    return {
        "statusCode": status_code,
        "headers": response_headers,
        "body": body if isinstance(body, str) else str(body),
    }
