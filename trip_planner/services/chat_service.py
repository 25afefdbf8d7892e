"""
Chat Service - relay to the upstream chat-completion provider

Forwards a prompt to an OpenAI-compatible chat-completions API with a fixed
travel-planning persona and fixed sampling parameters.

Architecture:
- Transport: requests (one POST per call, transport default timeout)
- Auth: Bearer API key from settings.A4F_API_KEY
- No retries, no caching, no pooling: every call is a fresh round trip

Result is an UpstreamCompletionResult:
- UpstreamCompletion: provider answered 2xx (text + raw payload)
- UpstreamFailure: provider answered non-2xx (status + raw error body)

Network errors and undecodable success bodies are raised to the caller.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import requests

from trip_planner.agents.trip.prompts import TRAVEL_SYSTEM_PROMPT
from trip_planner.config import settings
from trip_planner.utils.logging import get_logger, preview

logger = get_logger(__name__)


@dataclass(frozen=True)
class UpstreamCompletion:
    """Provider answered with a success status."""
    text: str
    raw: Any


@dataclass(frozen=True)
class UpstreamFailure:
    """Provider answered with a non-success status."""
    status_code: int
    detail: str


UpstreamCompletionResult = Union[UpstreamCompletion, UpstreamFailure]


def build_upstream_payload(prompt: str) -> Dict[str, Any]:
    """Build the chat-completions request body for a user prompt."""
    return {
        "model": settings.UPSTREAM_MODEL,
        "messages": [
            {"role": "system", "content": TRAVEL_SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ],
        "temperature": settings.UPSTREAM_TEMPERATURE,
        "max_tokens": settings.UPSTREAM_MAX_TOKENS,
    }


def extract_completion_text(payload: Any) -> str:
    """
    Extract the assistant text from a chat-completions payload.

    Checks choices[0].message.content, then choices[0].text (legacy
    completions shape). If neither is present the whole payload is returned
    as JSON so the caller still gets something to parse.
    """
    choice = None
    if isinstance(payload, dict):
        choices = payload.get("choices")
        if isinstance(choices, list) and choices and isinstance(choices[0], dict):
            choice = choices[0]

    if choice is not None:
        message = choice.get("message")
        if isinstance(message, dict) and message.get("content") is not None:
            return str(message["content"])
        if choice.get("text") is not None:
            return str(choice["text"])

    logger.warning("Upstream payload has no completion text, returning it stringified")
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def request_completion(
    prompt: str,
    session: Optional[requests.Session] = None,
) -> UpstreamCompletionResult:
    """
    Send one prompt upstream and return the normalized result.

    Args:
        prompt: User prompt (already validated as a non-empty string)
        session: Optional requests session (tests inject a stub here)

    Returns:
        UpstreamCompletion or UpstreamFailure

    Raises:
        requests.RequestException: transport failure (DNS, refused, reset)
        ValueError: success status with a body that is not JSON
    """
    http = session if session is not None else requests
    headers = {
        "Authorization": f"Bearer {settings.A4F_API_KEY}",
        "Content-Type": "application/json",
    }

    logger.info(f"Relaying prompt upstream: '{preview(prompt)}'")

    response = http.post(
        settings.chat_completions_url,
        headers=headers,
        json=build_upstream_payload(prompt),
    )

    if not response.ok:
        logger.error(f"Upstream error {response.status_code}: {response.text[:500]}")
        return UpstreamFailure(status_code=response.status_code, detail=response.text)

    raw = response.json()
    text = extract_completion_text(raw)
    logger.info(f"Upstream returned {response.status_code} with {len(text)} characters")

    return UpstreamCompletion(text=text, raw=raw)
