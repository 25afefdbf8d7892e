"""
Pydantic schemas for trip preferences and recommendation cards.

TripPreferences is what the planning form submits; RecommendationItem is a
single title/content card shown in the results panel.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

TITLE_MAX_LENGTH = 60
CONTENT_MAX_LENGTH = 2000


class TripPreferences(BaseModel):
    """
    Preferences captured by the "Plan my trip" form.

    Nothing is validated beyond types: every field may be empty and absent
    fields fall back to an empty string or False. Instances are frozen, one
    per form submission.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    destination: str = Field("", description="Free-text destination", examples=["Ranchi"])
    travel_date: str = Field("", alias="travelDate", description="Date string from the form", examples=["2025-12-20"])
    travellers: str = Field("", description="Number of travellers as typed", examples=["4"])
    trip_type: str = Field("", alias="tripType", description="Trip style", examples=["adventure", "family"])
    budget: str = Field("", description="Budget as typed", examples=["20000"])
    hotel_nearby: bool = Field(False, alias="hotelNearby", description="Suggest hotels near the user")
    best_places: bool = Field(False, alias="bestPlaces", description="Highlight the best places")

    @field_validator("destination", "travel_date", "travellers", "trip_type", "budget", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    @field_validator("hotel_nearby", "best_places", mode="before")
    @classmethod
    def _coerce_flag(cls, value: Any) -> Any:
        # Unchecked boxes arrive as None, "" or are missing entirely;
        # "on", "true", "false", "0" etc. go through pydantic's bool parsing
        if value is None or value == "":
            return False
        return value


class RecommendationItem(BaseModel):
    """One recommendation card. Title and content are clipped, never rejected."""

    title: str = Field(
        ...,
        description=f"Card heading (max {TITLE_MAX_LENGTH} characters)",
        examples=["Top Attractions"]
    )
    content: str = Field(
        "",
        description=f"Card body (max {CONTENT_MAX_LENGTH} characters)",
        examples=["Ranchi Hill, Tagore Hill, Pahari Mandir"]
    )

    @field_validator("title", mode="before")
    @classmethod
    def _clip_title(cls, value: Any) -> str:
        return str(value)[:TITLE_MAX_LENGTH]

    @field_validator("content", mode="before")
    @classmethod
    def _clip_content(cls, value: Any) -> str:
        return str(value)[:CONTENT_MAX_LENGTH]
