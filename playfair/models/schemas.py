from typing import Any

from pydantic import BaseModel, Field


# ============================================================================
# Request Schemas
# ============================================================================


class EncryptRequest(BaseModel):
    """Request schema for /encrypt endpoint."""

    keyword: str = Field(default="", max_length=1_000)
    plaintext: str = Field(min_length=1)
    pad: str | None = Field(default=None, min_length=1, max_length=1)


class DecryptRequest(BaseModel):
    """Request schema for /decrypt endpoint."""

    keyword: str = Field(default="", max_length=1_000)
    ciphertext: str = Field(min_length=1)


# ============================================================================
# Response Schemas
# ============================================================================


class EncryptResponse(BaseModel):
    """Response schema for /encrypt endpoint."""

    ciphertext: str
    keyword: str
    pad: str
    key_square: str


class DecryptResponse(BaseModel):
    """Response schema for /decrypt endpoint."""

    plaintext: str
    keyword: str
    key_square: str
    explanation: str


class KeySquareResponse(BaseModel):
    """Response schema for /key-square endpoint."""

    keyword: str
    letters: str = Field(min_length=25, max_length=25)
    rows: list[str]


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
