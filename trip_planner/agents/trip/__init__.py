"""
Trip Planning - prompt templates for the chat-completion provider.

The proxy service is in:
- trip_planner/services/chat_service.py

Prompt templates are in:
- trip_planner/agents/trip/prompts.py
"""

from trip_planner.agents.trip.prompts import (
    TRAVEL_SYSTEM_PROMPT,
    build_trip_prompt,
)

__all__ = [
    "TRAVEL_SYSTEM_PROMPT",
    "build_trip_prompt",
]
