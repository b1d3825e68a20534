"""
API module for the Starknet address checker.

Provides FastAPI routes and models for exposing the checks as a REST API.
"""

from starknet_checker.api.models import ErrorResponse, ValidateResponse

__all__ = [
    "ErrorResponse",
    "ValidateResponse",
]
