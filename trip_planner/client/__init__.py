"""
Planner page logic: proxy client, form controller and card markup.
"""

from .controller import TripPlanController, preferences_from_form
from .proxy_client import ChatProxyClient, ProxyError
from .rendering import render_recommendation_cards

__all__ = [
    "ChatProxyClient",
    "ProxyError",
    "TripPlanController",
    "preferences_from_form",
    "render_recommendation_cards",
]
