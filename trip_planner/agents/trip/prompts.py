"""
Trip Planning Prompt Templates

Contains the system persona and the user prompt builder for the chat proxy.

Architecture:
- Pattern: single chat completion relayed through POST /api/chat
- Provider: A4F (OpenAI-compatible chat-completions API)
- Temperature: 0.7, max_tokens: 500 (see trip_planner.config)
- Output: plain text with headings, parsed into cards by
  trip_planner.services.recommendation_parser
"""

from trip_planner.schemas.trips import TripPreferences

# =============================================================================
# SYSTEM PROMPT
# =============================================================================

TRAVEL_SYSTEM_PROMPT = "You are a helpful assistant providing travel plans."

# =============================================================================
# USER PROMPT
# =============================================================================

TRIP_PROMPT_INSTRUCTIONS = (
    "Please provide: a recommended destination, top attractions, best time to visit, "
    "accommodation suggestions, travel tips, and 2-3 sample activities. "
    "Return the answer in plain text with headings."
)


def _format_flag(value: bool) -> str:
    # Same literal the browser form serialises checkboxes to
    return "true" if value else "false"


def build_trip_prompt(preferences: TripPreferences) -> str:
    """
    Render trip preferences into the instruction sent to the model.

    Every field is listed even when empty, so the model always sees the same
    seven lines in the same order.

    Args:
        preferences: Submitted form values

    Returns:
        Prompt text (never empty)
    """
    lines = [
        "User preferences:",
        f"- Destination: {preferences.destination}",
        f"- Date: {preferences.travel_date}",
        f"- Travellers: {preferences.travellers}",
        f"- Trip type: {preferences.trip_type}",
        f"- Budget: {preferences.budget}",
        f"- Hotel near me: {_format_flag(preferences.hotel_nearby)}",
        f"- Show best places: {_format_flag(preferences.best_places)}",
        "",
        TRIP_PROMPT_INSTRUCTIONS,
    ]
    return "\n".join(lines)
