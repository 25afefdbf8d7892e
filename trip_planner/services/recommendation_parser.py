"""
Recommendation Parser - model text to recommendation cards

Converts the assistant text returned by POST /api/chat into an ordered list
of RecommendationItem values.

Strategy (first success wins):
1. Non-string or empty input -> static fallback list
2. Structured: the text is JSON (an array of {title, content} objects, or a
   single object carrying both keys)
3. Unstructured: paragraphs separated by blank lines, first line of each
   paragraph is the title, at most 10 paragraphs
4. Nothing recovered -> static fallback list

Classification returns an explicit StructuredResponse / UnstructuredResponse
so both strategies can be exercised on their own. Parsing never raises: a
best-effort card is always preferred over an error in the UI.
"""

import json
import re
from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

from trip_planner.schemas.trips import RecommendationItem, TripPreferences
from trip_planner.services.fallback import get_fallback_recommendations
from trip_planner.utils.logging import get_logger

logger = get_logger(__name__)

MAX_PARAGRAPHS = 10
DEFAULT_STRUCTURED_TITLE = "Info"

_PARAGRAPH_BREAK = re.compile(r"\n{2,}")
_LINE_BREAK = re.compile(r"\r?\n")


@dataclass(frozen=True)
class StructuredResponse:
    """Text decoded as JSON into recommendation items."""
    items: List[RecommendationItem] = field(default_factory=list)


@dataclass(frozen=True)
class UnstructuredResponse:
    """Text that must be split heuristically."""
    text: str


ParsedResponse = Union[StructuredResponse, UnstructuredResponse]


def _js_string(value: Any) -> str:
    """Render a JSON value the way it reads when coerced to text."""
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _item_from_element(element: Any) -> RecommendationItem:
    if isinstance(element, dict):
        title = element.get("title") or DEFAULT_STRUCTURED_TITLE
        content = element.get("content") or _js_string(element)
        return RecommendationItem(title=_js_string(title), content=_js_string(content))
    return RecommendationItem(title=DEFAULT_STRUCTURED_TITLE, content=_js_string(element))


def classify_response(text: str) -> ParsedResponse:
    """
    Decide whether the model answered with JSON or with prose.

    Nesting too deep to decode or re-encode counts as prose.

    Returns:
        StructuredResponse for a JSON array, or a JSON object with both
        `title` and `content`; UnstructuredResponse for everything else.
    """
    try:
        decoded = json.loads(text)

        if isinstance(decoded, list):
            return StructuredResponse(items=[_item_from_element(el) for el in decoded])

        if isinstance(decoded, dict) and decoded.get("title") and decoded.get("content"):
            return StructuredResponse(items=[
                RecommendationItem(
                    title=_js_string(decoded["title"]),
                    content=_js_string(decoded["content"]),
                )
            ])
    except (ValueError, TypeError, RecursionError):
        return UnstructuredResponse(text=text)

    return UnstructuredResponse(text=text)


def split_paragraphs(text: str) -> List[RecommendationItem]:
    """
    Split prose into cards: one per blank-line separated paragraph.

    A single-line paragraph becomes a title with empty content. Otherwise the
    first line is the title and the remaining lines, joined with spaces, are
    the content. Only the first MAX_PARAGRAPHS paragraphs are kept.
    """
    chunks = [chunk for chunk in _PARAGRAPH_BREAK.split(text) if chunk]

    items: List[RecommendationItem] = []
    for chunk in chunks[:MAX_PARAGRAPHS]:
        lines = [line for line in _LINE_BREAK.split(chunk.strip()) if line]
        if not lines:
            continue
        if len(lines) == 1:
            items.append(RecommendationItem(title=lines[0], content=""))
        else:
            items.append(RecommendationItem(title=lines[0], content=" ".join(lines[1:])))

    return items


def parse_recommendations(
    text: Any,
    preferences: Optional[TripPreferences] = None,
) -> List[RecommendationItem]:
    """
    Turn assistant text into recommendation cards.

    Args:
        text: Text returned by the chat proxy (anything else falls back)
        preferences: Submitted preferences, forwarded to the fallback

    Returns:
        Non-empty, ordered list of RecommendationItem
    """
    if not text or not isinstance(text, str):
        logger.info("No assistant text to parse, using fallback recommendations")
        return get_fallback_recommendations(preferences)

    parsed = classify_response(text)

    if isinstance(parsed, StructuredResponse):
        if parsed.items:
            logger.info(f"Parsed {len(parsed.items)} recommendations from JSON")
            return parsed.items
        items = []
    else:
        items = split_paragraphs(parsed.text)

    if not items:
        logger.info("Assistant text produced no recommendations, using fallback")
        return get_fallback_recommendations(preferences)

    logger.info(f"Parsed {len(items)} recommendations from plain text")
    return items
