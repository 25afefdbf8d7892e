"""
Static fallback recommendations.

Shown whenever the AI pipeline cannot produce at least one card: proxy
unreachable, upstream error, or a response that parses to nothing.
"""

from typing import List, Optional

from trip_planner.schemas.trips import RecommendationItem, TripPreferences

FALLBACK_RECOMMENDATIONS = (
    ("Recommended Destination", "Ranchi - The capital city with scenic beauty."),
    ("Top Attractions", "Ranchi Hill, Tagore Hill, Pahari Mandir"),
    ("Best Time to Visit", "October to March"),
)


def get_fallback_recommendations(
    preferences: Optional[TripPreferences] = None,
) -> List[RecommendationItem]:
    """
    Return a fresh copy of the hardcoded recommendation list.

    The preferences are accepted so every recommendation source shares one
    call signature; the list does not depend on them.
    """
    return [
        RecommendationItem(title=title, content=content)
        for title, content in FALLBACK_RECOMMENDATIONS
    ]
