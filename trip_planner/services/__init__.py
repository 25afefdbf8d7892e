"""
Service layer for the Trip Planner backend.

- chat_service: relays prompts to the upstream chat-completion provider
- recommendation_parser: turns assistant text into recommendation cards
- fallback: static cards used when the AI pipeline produces nothing
"""

from .chat_service import (
    UpstreamCompletion,
    UpstreamFailure,
    extract_completion_text,
    request_completion,
)
from .fallback import get_fallback_recommendations
from .recommendation_parser import (
    StructuredResponse,
    UnstructuredResponse,
    classify_response,
    parse_recommendations,
    split_paragraphs,
)

__all__ = [
    "UpstreamCompletion",
    "UpstreamFailure",
    "extract_completion_text",
    "request_completion",
    "get_fallback_recommendations",
    "StructuredResponse",
    "UnstructuredResponse",
    "classify_response",
    "parse_recommendations",
    "split_paragraphs",
]
