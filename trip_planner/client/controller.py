"""
Trip plan form controller.

Drives the "Plan my trip" flow end to end:

    form -> TripPreferences -> prompt -> chat proxy -> parser -> cards

Any failure along the way (proxy unreachable, upstream error, unexpected
payload) is logged and the static fallback cards are shown instead. The user
never sees an error state, only recommendations.

The controller owns the single "last submitted preferences" slot used by the
regenerate action. Overlapping requests are not guarded: whichever finishes
last overwrites the displayed cards.
"""

import time
from typing import Any, Callable, List, Mapping, Optional

from trip_planner.agents.trip.prompts import build_trip_prompt
from trip_planner.client.proxy_client import ChatProxyClient
from trip_planner.client.rendering import render_loading, render_recommendation_cards
from trip_planner.schemas.trips import RecommendationItem, TripPreferences
from trip_planner.services.fallback import get_fallback_recommendations
from trip_planner.services.recommendation_parser import parse_recommendations
from trip_planner.utils.logging import get_logger

logger = get_logger(__name__)

NO_PREFERENCES_MESSAGE = "No previous preferences found. Submit the form first."
NO_RECOMMENDATIONS_MESSAGE = "No recommendations to export."
PDF_FAILED_MESSAGE = "Could not generate PDF. Check console."

# Field names used by the planner form markup
FORM_FIELDS = (
    "destination",
    "travelDate",
    "travellers",
    "tripType",
    "budget",
    "hotelNearby",
    "bestPlaces",
)


def preferences_from_form(form: Mapping[str, Any]) -> TripPreferences:
    """Build preferences from submitted form values; missing fields default."""
    return TripPreferences(**{name: form.get(name) for name in FORM_FIELDS if name in form})


class TripPlanController:
    """
    Glue between the planner form, the chat proxy and the results panel.

    Args:
        proxy: Client used to reach POST /api/chat
        render: Receives the markup to place in the results panel
        notify: Shows a blocking message to the user (alert)
    """

    def __init__(
        self,
        proxy: ChatProxyClient,
        render: Optional[Callable[[str], None]] = None,
        notify: Optional[Callable[[str], None]] = None,
    ):
        self.proxy = proxy
        self._render = render
        self._notify = notify
        self.last_preferences: Optional[TripPreferences] = None
        self.recommendations: List[RecommendationItem] = []
        self.rendered_markup: str = ""

    def render(self, markup: str) -> None:
        self.rendered_markup = markup
        if self._render is not None:
            self._render(markup)

    def notify(self, message: str) -> None:
        logger.info(f"User notice: {message}")
        if self._notify is not None:
            self._notify(message)

    def submit(self, preferences: TripPreferences) -> List[RecommendationItem]:
        """Handle a form submission: remember it, then run the pipeline."""
        self.last_preferences = preferences
        return self.process(preferences)

    def submit_form(self, form: Mapping[str, Any]) -> List[RecommendationItem]:
        return self.submit(preferences_from_form(form))

    def regenerate(self) -> Optional[List[RecommendationItem]]:
        """Re-run the pipeline with the last submission, if there is one."""
        if self.last_preferences is None:
            self.notify(NO_PREFERENCES_MESSAGE)
            return None
        return self.process(self.last_preferences)

    def process(self, preferences: TripPreferences) -> List[RecommendationItem]:
        """
        Run prompt -> proxy -> parser and display the result.

        Returns:
            The recommendations that were displayed (never empty)
        """
        self.render(render_loading())
        prompt = build_trip_prompt(preferences)

        try:
            ai_text = self.proxy.call_ai_backend(prompt)
            recommendations = parse_recommendations(ai_text, preferences)
        except Exception as e:
            logger.error(f"AI backend error: {e}")
            recommendations = get_fallback_recommendations(preferences)

        self.display(recommendations)
        return recommendations

    def display(self, recommendations: List[RecommendationItem]) -> None:
        self.recommendations = list(recommendations)
        self.render(render_recommendation_cards(self.recommendations))

    def export_pdf(self, exporter: Callable[[str, str], Any]) -> Optional[str]:
        """
        Hand the rendered cards to a PDF exporter.

        Args:
            exporter: Called with (markup, filename); does the actual rendering

        Returns:
            The filename on success, None otherwise. Failures are reported to
            the user and logged; displayed recommendations are untouched.
        """
        if not self.recommendations:
            self.notify(NO_RECOMMENDATIONS_MESSAGE)
            return None

        filename = f"trip-plan-{int(time.time() * 1000)}.pdf"
        try:
            exporter(self.rendered_markup, filename)
        except Exception as e:
            logger.error(f"PDF error: {e}")
            self.notify(PDF_FAILED_MESSAGE)
            return None
        return filename
