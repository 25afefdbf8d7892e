"""
HTML markup for the recommendations panel.

Produces the same card markup the planner page styles: one
`.recommendation-item` per card, title and content escaped.
"""

from html import escape
from typing import Iterable

from trip_planner.schemas.trips import RecommendationItem

LOADING_MARKUP = (
    '<div class="loading">'
    '<div class="loading-spinner"></div>'
    '<p>AI is analyzing your preferences...</p>'
    '</div>'
)


def render_loading() -> str:
    return LOADING_MARKUP


def render_recommendation_card(item: RecommendationItem) -> str:
    return (
        '<div class="recommendation-item">'
        f'<div class="recommendation-title">{escape(item.title)}</div>'
        f'<div class="recommendation-content">{escape(item.content)}</div>'
        '</div>'
    )


def render_recommendation_cards(items: Iterable[RecommendationItem]) -> str:
    """Render cards in list order."""
    return "".join(render_recommendation_card(item) for item in items)
