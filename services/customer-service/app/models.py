"""Pydantic models for request/response validation."""

from pydantic import BaseModel, ConfigDict, Field

from .domain.entities import CustomerDocument


class CustomerInput(BaseModel):
    """Request model for creating or updating a customer."""

    name: str = Field(..., description="Customer name")


class Customer(BaseModel):
    """
    Customer response model.

    Transport projection of a stored document: the identifier and the
    timestamp are rendered as strings.
    """

    id: str = Field(..., description="Customer identifier (24-char hex)")
    name: str
    created_at: str = Field(..., description="ISO 8601 timestamp")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "6531f0c2a4b5c6d7e8f90123",
                "name": "John Doe",
                "created_at": "2024-01-01T12:00:00.000000+00:00",
            }
        }
    )

    @classmethod
    def from_document(cls, document: CustomerDocument) -> "Customer":
        """Render a persisted document for the transport layer."""
        return cls(
            id=str(document.id),
            name=document.name,
            created_at=document.created_at.isoformat(),
        )


class CreatedResponse(BaseModel):
    """Response model for a created customer."""

    id: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    version: str
    database: str
    timestamp: str


class ErrorResponse(BaseModel):
    """Error response model."""

    detail: str
    error_code: str | None = None
