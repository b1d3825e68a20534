from pydantic import BaseModel, Field


class ValidateResponse(BaseModel):
    """Response model for an address validation."""

    is_valid: bool = Field(..., description="Whether the input is a valid Starknet address")
    address: str = Field(
        ...,
        description="Canonical 0x + 64 digit address when valid, the input unchanged otherwise",
    )


class ErrorResponse(BaseModel):
    """Response model for failed requests."""

    detail: str = Field(..., description="Human-readable error message")
