"""
LLM prompt components for the Trip Planner backend.

1. Trip Planning (single chat completion)
   - Fixed travel-planning persona plus a prompt rendered from the form
   - Relayed by trip_planner/services/chat_service.py
   - Located in: trip_planner/agents/trip/prompts.py
"""

from trip_planner.agents.trip import TRAVEL_SYSTEM_PROMPT, build_trip_prompt

__all__ = [
    "TRAVEL_SYSTEM_PROMPT",
    "build_trip_prompt",
]
