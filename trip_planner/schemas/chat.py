"""
Pydantic schemas for the chat proxy endpoint.

These models document the POST /api/chat contract. The route reads the raw
body itself so that a missing prompt yields the 400 contract below instead of
FastAPI's generic 422 validation error.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field

# ============================================================================
# REQUEST MODELS
# ============================================================================

class ChatRequest(BaseModel):
    """Prompt to relay to the upstream chat-completion provider."""
    prompt: str = Field(
        ...,
        description="Natural-language prompt built from the trip planning form",
        examples=["User preferences:\n- Destination: Ranchi\n..."]
    )


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class ChatResponse(BaseModel):
    """
    Successful relay.

    `text` is the assistant message extracted from the first completion
    choice; `raw` is the provider payload, untouched, for debugging.
    """
    text: str = Field(..., description="Assistant text extracted from the completion")
    raw: Any = Field(None, description="Unmodified upstream payload")


class ChatErrorResponse(BaseModel):
    """Client error (400) or internal failure (500)."""
    error: str = Field(
        ...,
        description="Short error message",
        examples=["Missing prompt", "Server error"]
    )


class UpstreamErrorResponse(BaseModel):
    """Upstream provider answered with a non-success status (502)."""
    error: Literal["Upstream error"] = Field("Upstream error")
    detail: str = Field(..., description="Raw upstream error body")
