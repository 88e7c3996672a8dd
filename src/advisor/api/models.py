"""Pydantic models for HTTP API requests and responses."""

from typing import Optional
from pydantic import BaseModel, Field

from advisor.models.device import UpdateButton


class FetchRequest(BaseModel):
    """POST /api/v1.0/os-update/fetch payload.

    Example:
        {"target": "rpi3"}
    """

    target: Optional[str] = Field(
        None,
        description="Hardware target reported by the device ('---' when unknown)",
        examples=["rpi3", "rpi4", "---"],
    )


class ReleaseData(BaseModel):
    """Latest release version nested in response (None if unavailable)."""

    version: Optional[str] = Field(None, description="Latest available release version")


class ReleaseResponse(BaseModel):
    """Response for release lookup endpoints."""

    code: int = Field(default=200, description="Application-level status code")
    msg: str = Field(default="success", description="Status message")
    data: ReleaseData


class ButtonResponse(BaseModel):
    """POST /api/v1.0/os-update/button response."""

    code: int = Field(default=200, description="Application-level status code")
    msg: str = Field(default="success", description="Status message")
    data: UpdateButton
