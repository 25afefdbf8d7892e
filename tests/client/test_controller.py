"""
Tests for the trip plan controller and the chat proxy client.

Tests cover:
- End-to-end form submission with a stubbed proxy
- Fallback on every failure path (proxy down, proxy error, bad payload)
- Regenerate with and without a previous submission
- PDF export success and failure
"""

import json
from unittest.mock import MagicMock

import pytest
import requests

from trip_planner.client.controller import (
    NO_PREFERENCES_MESSAGE,
    NO_RECOMMENDATIONS_MESSAGE,
    PDF_FAILED_MESSAGE,
    TripPlanController,
    preferences_from_form,
)
from trip_planner.client.proxy_client import ChatProxyClient, ProxyError
from trip_planner.client.rendering import render_loading
from trip_planner.services.fallback import get_fallback_recommendations

TWO_PARAGRAPHS = (
    "Recommended Destination\nNetarhat, the Queen of Chotanagpur.\n\n"
    "Top Attractions\nMagnolia Point\nUpper Ghaghri Falls"
)

FORM = {
    "destination": "Netarhat",
    "travelDate": "2025-12-20",
    "travellers": "4",
    "tripType": "adventure",
    "budget": "25000",
    "hotelNearby": True,
    "bestPlaces": False,
}


@pytest.fixture
def proxy_session(make_http_response):
    """Stubbed proxy answering with a two-paragraph plain-text plan."""
    session = MagicMock()
    session.post.return_value = make_http_response(
        200, json_data={"text": TWO_PARAGRAPHS, "raw": {}}
    )
    return session


@pytest.fixture
def rendered():
    return []


@pytest.fixture
def notices():
    return []


@pytest.fixture
def controller(proxy_session, rendered, notices):
    proxy = ChatProxyClient("http://localhost:3000", session=proxy_session)
    return TripPlanController(proxy, render=rendered.append, notify=notices.append)


class TestFormSubmission:

    def test_end_to_end_renders_two_cards(self, controller, proxy_session, rendered):
        items = controller.submit_form(FORM)

        assert [(i.title, i.content) for i in items] == [
            ("Recommended Destination", "Netarhat, the Queen of Chotanagpur."),
            ("Top Attractions", "Magnolia Point Upper Ghaghri Falls"),
        ]

        markup = rendered[-1]
        assert markup.count('class="recommendation-item"') == 2
        assert markup.index("Recommended Destination") < markup.index("Top Attractions")
        assert "Magnolia Point Upper Ghaghri Falls" in markup

        # Loading placeholder shown before the cards
        assert rendered[0] == render_loading()

        sent = proxy_session.post.call_args
        assert sent.args[0] == "http://localhost:3000/api/chat"
        assert "- Destination: Netarhat" in sent.kwargs["json"]["prompt"]

    def test_submission_is_remembered(self, controller):
        controller.submit_form(FORM)

        assert controller.last_preferences == preferences_from_form(FORM)

    def test_markup_is_escaped(self, controller, proxy_session, make_http_response, rendered):
        proxy_session.post.return_value = make_http_response(
            200, json_data={"text": '[{"title": "<b>Hi</b>", "content": "a & b"}]'}
        )

        controller.submit_form(FORM)

        assert "&lt;b&gt;Hi&lt;/b&gt;" in rendered[-1]
        assert "a &amp; b" in rendered[-1]


class TestFallbackPaths:

    def test_proxy_unreachable(self, controller, proxy_session, notices):
        proxy_session.post.side_effect = requests.ConnectionError("refused")

        items = controller.submit_form(FORM)

        assert items == get_fallback_recommendations()
        assert controller.recommendations == items
        assert notices == []

    def test_proxy_error_status(self, controller, proxy_session, make_http_response):
        proxy_session.post.return_value = make_http_response(
            502, text='{"error": "Upstream error"}'
        )

        assert controller.submit_form(FORM) == get_fallback_recommendations()

    def test_response_without_text_is_parsed_as_json_dump(
        self, controller, proxy_session, make_http_response
    ):
        proxy_session.post.return_value = make_http_response(200, json_data={"text": ""})

        items = controller.submit_form(FORM)

        # '{"text":""}' is an object without title/content: one prose card
        assert [(i.title, i.content) for i in items] == [('{"text":""}', "")]

    def test_undecodable_proxy_body(self, controller, proxy_session, make_http_response):
        response = make_http_response(200)
        response.json.side_effect = ValueError("not json")
        proxy_session.post.return_value = response

        assert controller.submit_form(FORM) == get_fallback_recommendations()


class TestRegenerate:

    def test_before_any_submission_notifies(self, controller, proxy_session, notices):
        assert controller.regenerate() is None

        assert notices == [NO_PREFERENCES_MESSAGE]
        proxy_session.post.assert_not_called()

    def test_reuses_last_submission(self, controller, proxy_session):
        controller.submit_form(FORM)
        first_prompt = proxy_session.post.call_args.kwargs["json"]["prompt"]

        items = controller.regenerate()

        assert len(items) == 2
        assert proxy_session.post.call_count == 2
        assert proxy_session.post.call_args.kwargs["json"]["prompt"] == first_prompt

    def test_only_latest_submission_kept(self, controller, proxy_session):
        controller.submit_form(FORM)
        controller.submit_form({**FORM, "destination": "Deoghar"})

        controller.regenerate()

        assert "- Destination: Deoghar" in proxy_session.post.call_args.kwargs["json"]["prompt"]


class TestExportPdf:

    def test_nothing_to_export(self, controller, notices):
        exporter = MagicMock()

        assert controller.export_pdf(exporter) is None
        assert notices == [NO_RECOMMENDATIONS_MESSAGE]
        exporter.assert_not_called()

    def test_exports_rendered_cards(self, controller):
        controller.submit_form(FORM)
        exporter = MagicMock()

        filename = controller.export_pdf(exporter)

        assert filename.startswith("trip-plan-") and filename.endswith(".pdf")
        exporter.assert_called_once_with(controller.rendered_markup, filename)

    def test_exporter_failure_is_reported(self, controller, notices):
        items = controller.submit_form(FORM)
        exporter = MagicMock(side_effect=RuntimeError("canvas tainted"))

        assert controller.export_pdf(exporter) is None
        assert notices == [PDF_FAILED_MESSAGE]
        assert controller.recommendations == items


class TestChatProxyClient:

    def test_returns_text(self, proxy_session):
        client = ChatProxyClient("http://localhost:3000/", session=proxy_session)

        assert client.call_ai_backend("hi") == TWO_PARAGRAPHS
        assert proxy_session.post.call_args.args[0] == "http://localhost:3000/api/chat"

    def test_missing_text_returns_json_dump(self, make_http_response):
        session = MagicMock()
        session.post.return_value = make_http_response(200, json_data={"raw": {"id": 1}})

        result = ChatProxyClient(session=session).call_ai_backend("hi")

        assert json.loads(result) == {"raw": {"id": 1}}

    def test_error_status_raises(self, make_http_response):
        session = MagicMock()
        session.post.return_value = make_http_response(400, text='{"error": "Missing prompt"}')

        with pytest.raises(ProxyError) as exc_info:
            ChatProxyClient(session=session).call_ai_backend("")

        assert exc_info.value.status_code == 400
        assert "Missing prompt" in exc_info.value.body


class TestPreferencesFromForm:

    def test_missing_fields_default(self):
        prefs = preferences_from_form({"destination": "Ranchi"})

        assert prefs.destination == "Ranchi"
        assert prefs.travel_date == ""
        assert prefs.hotel_nearby is False

    def test_unchecked_boxes(self):
        prefs = preferences_from_form({**FORM, "hotelNearby": None, "bestPlaces": ""})

        assert prefs.hotel_nearby is False
        assert prefs.best_places is False

    def test_string_false_values_stay_false(self):
        prefs = preferences_from_form({**FORM, "hotelNearby": "false", "bestPlaces": "off"})

        assert prefs.hotel_nearby is False
        assert prefs.best_places is False

    def test_checked_box_value_on(self):
        prefs = preferences_from_form({**FORM, "hotelNearby": "on", "bestPlaces": "true"})

        assert prefs.hotel_nearby is True
        assert prefs.best_places is True

    def test_string_false_renders_false_in_prompt(self, controller, proxy_session):
        controller.submit_form({**FORM, "hotelNearby": "false", "bestPlaces": "0"})

        prompt = proxy_session.post.call_args.kwargs["json"]["prompt"]
        assert "- Hotel near me: false" in prompt
        assert "- Show best places: false" in prompt
