"""
HTTP client for the chat proxy (POST /api/chat).

Used by the trip plan controller; the browser form talks to the same
endpoint with the same contract.
"""

import json
from typing import Optional

import requests

from trip_planner.utils.logging import get_logger

logger = get_logger(__name__)


class ProxyError(Exception):
    """Chat proxy answered with a non-success status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Backend error {status_code}: {body}")


class ChatProxyClient:
    """Calls the chat proxy and returns the assistant text."""

    def __init__(self, base_url: str = "", session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()

    @property
    def chat_url(self) -> str:
        return f"{self.base_url}/api/chat"

    def call_ai_backend(self, prompt: str) -> str:
        """
        Send a prompt through the proxy.

        Returns:
            The `text` field of the response, or the whole response as JSON
            when `text` is missing or empty.

        Raises:
            ProxyError: proxy answered non-2xx
            requests.RequestException: proxy unreachable
        """
        response = self.session.post(self.chat_url, json={"prompt": prompt})

        if not response.ok:
            raise ProxyError(response.status_code, response.text)

        data = response.json()
        text = data.get("text") if isinstance(data, dict) else None
        return text or json.dumps(data, separators=(",", ":"), ensure_ascii=False)
