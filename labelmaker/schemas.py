"""Pydantic schemas for print requests and results."""

from pydantic import BaseModel, Field


class PrintItem(BaseModel):
    """One label to print.

    Attributes:
        body: Label text.
        qty: Number of copies.
    """

    body: str = Field(..., min_length=1, description="Label text")
    qty: int = Field(1, ge=1, le=3, description="Number of copies")


class PrintRequest(BaseModel):
    """Request body posted to the print service."""

    items: list[PrintItem]


class PrintResult(BaseModel):
    """Outcome of one call to the print service.

    Attributes:
        success: True if the service answered with HTTP 200.
        status_code: HTTP status code, None if no response was received.
        reason: Status reason phrase, or the error text for transport failures.
    """

    success: bool
    status_code: int | None = None
    reason: str = ""
