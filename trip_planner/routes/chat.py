"""
FastAPI route for the chat proxy.

Relays a prompt from the trip planning form to the upstream chat-completion
provider so the API key never reaches the browser.

Endpoints:
- POST /api/chat: relay a prompt, return the assistant text
"""

import json
from typing import Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from trip_planner.schemas.chat import (
    ChatErrorResponse,
    ChatResponse,
    UpstreamErrorResponse,
)
from trip_planner.services.chat_service import UpstreamFailure, request_completion
from trip_planner.utils.logging import get_logger, preview

logger = get_logger(__name__)

# Create router
router = APIRouter(
    prefix="/api",
    tags=["chat"]
)


# Largest JSON body accepted (1 MB)
MAX_BODY_BYTES = 1024 * 1024


class RequestBodyTooLarge(Exception):
    """Request body exceeds MAX_BODY_BYTES."""


async def _read_json_body(request: Request) -> Any:
    """
    Decode the request body; an empty body counts as an empty object.

    Raises:
        RequestBodyTooLarge: declared or actual size over MAX_BODY_BYTES
        ValueError: body is not valid JSON
    """
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > MAX_BODY_BYTES:
        raise RequestBodyTooLarge()

    body = await request.body()
    if len(body) > MAX_BODY_BYTES:
        raise RequestBodyTooLarge()
    if not body.strip():
        return {}
    return json.loads(body)


@router.post(
    "/chat",
    response_model=ChatResponse,
    status_code=200,
    summary="Relay a prompt to the chat-completion provider",
    description="""
    Forwards `{"prompt": "..."}` to the upstream provider with a fixed
    travel-planning persona, temperature and max_tokens.

    **Responses:**
    - 200: `{text, raw}` - text from the first completion choice
    - 400: `{error: "Missing prompt"}` - no upstream call is made
    - 413: `{error: "Request entity too large"}` - body over 1 MB
    - 502: `{error: "Upstream error", detail}` - provider returned non-2xx
    - 500: `{error}` - anything else (bad JSON body, network failure)
    """,
    responses={
        400: {"model": ChatErrorResponse},
        413: {"model": ChatErrorResponse},
        502: {"model": UpstreamErrorResponse},
        500: {"model": ChatErrorResponse},
    },
)
async def chat_endpoint(request: Request):
    """
    Chat proxy endpoint.

    - Parse/Validate: prompt must be a non-empty string
    - Call upstream: single call via service layer
    - Map output: success, upstream failure or internal error contract
    """
    try:
        payload = await _read_json_body(request)
        prompt = payload.get("prompt") if isinstance(payload, dict) else None

        if not prompt or not isinstance(prompt, str):
            logger.warning("POST /api/chat rejected: missing prompt")
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content=ChatErrorResponse(error="Missing prompt").model_dump()
            )

        logger.info(f"POST /api/chat called, prompt='{preview(prompt)}'")

        result = await run_in_threadpool(request_completion, prompt)

        if isinstance(result, UpstreamFailure):
            return JSONResponse(
                status_code=status.HTTP_502_BAD_GATEWAY,
                content=UpstreamErrorResponse(detail=result.detail).model_dump()
            )

        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content={"text": result.text, "raw": result.raw}
        )

    except RequestBodyTooLarge:
        logger.warning(f"POST /api/chat rejected: body over {MAX_BODY_BYTES} bytes")
        return JSONResponse(
            status_code=413,
            content=ChatErrorResponse(error="Request entity too large").model_dump()
        )

    except Exception as e:
        logger.exception(f"Server error in POST /api/chat: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ChatErrorResponse(error=str(e) or "Server error").model_dump()
        )
