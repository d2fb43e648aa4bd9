"""
Bookshelf — Pydantic Request/Response Schemas
===============================================

What:  Pydantic models defining the book API contract.
Why:   Request bodies get named, typed fields instead of being stored as
       raw JSON, while staying permissive: every field is optional and
       unknown fields are dropped.
"""

import uuid
from typing import Optional, Union

from pydantic import BaseModel, Field, field_serializer


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class BookPayload(BaseModel):
    """
    What:  Body of POST /books and PUT /books/{id}.

    No field is required. For PUT, only the fields present in the body are
    written (model_dump(exclude_unset=True)); an explicit null clears a field.
    Numbers sent for text fields are stored as strings (123 → "123"), and
    numeric strings for price are coerced ("10" → 10.0).
    """
    title: Optional[str] = Field(default=None, description="Book title")
    author: Optional[str] = Field(default=None, description="Author name")
    summary: Optional[str] = Field(default=None, description="Short summary")
    price: Optional[float] = Field(default=None, description="Price (any number)")

    model_config = {"extra": "ignore", "coerce_numbers_to_str": True}


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class BookResponse(BaseModel):
    """A stored book record, as returned by every book route."""
    id: uuid.UUID = Field(description="Store-assigned identifier (UUID)")
    title: Optional[str] = None
    author: Optional[str] = None
    summary: Optional[str] = None
    price: Optional[float] = None

    model_config = {"from_attributes": True}

    @field_serializer("price")
    def serialize_price(self, price: Optional[float]) -> Optional[Union[int, float]]:
        """Whole prices go out as integers: 10, not 10.0."""
        if price is not None and price.is_integer():
            return int(price)
        return price


class ErrorResponse(BaseModel):
    """
    Standard JSON error body for 400 and 500 responses.

    404 responses carry no body at all.
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
