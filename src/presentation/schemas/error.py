"""Pydantic schema for API error responses."""

from pydantic import Field

from .base import CamelModel


class ErrorResponseSchema(CamelModel):
    """Standard error response format for all API errors."""

    error: str = Field(
        ...,
        description="Error code",
        examples=["VALIDATION_ERROR"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Invalid transaction data: customerName is required"],
    )
    status_code: int = Field(
        ...,
        description="HTTP status code",
        examples=[400],
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "VALIDATION_ERROR",
                    "message": "Invalid transaction data: customerName is required",
                    "statusCode": 400,
                }
            ]
        }
    }
