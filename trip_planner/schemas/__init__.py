"""
Pydantic schemas for API contracts and trip planning data.

Request/response bodies live in chat.py and health.py; the planner's own
data (preferences and recommendation cards) lives in trips.py.
"""
