"""
Service Models Package

This package contains the Pydantic models used for API responses.
"""

from .output import VERIFIED_MESSAGE, VerifyOutput, create_api_response

__all__ = [
    "VERIFIED_MESSAGE",
    "VerifyOutput",
    "create_api_response",
]
