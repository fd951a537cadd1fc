from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from core.chat_context import build_prompt
from core.profile_store import ProfileStore
from services import gemini
from api.v1.deps import get_profile_store
from api.v1.schemas import ChatError, ChatReply, ChatRequest

router = APIRouter()
_LOG = logging.getLogger(__name__)


@router.post(
    "",
    response_model=ChatReply,
    responses={400: {"model": ChatError}, 500: {"model": ChatError}},
)
def chat(
    body: ChatRequest,
    store: ProfileStore = Depends(get_profile_store),
):
    _LOG.info("chat request received: %r", body.message)

    if not isinstance(body.message, str) or not body.message.strip():
        _LOG.warning("chat request rejected: missing or invalid message")
        return JSONResponse(
            status_code=400,
            content={"error": "Message is required and must be a non-empty string."},
        )

    metrics = body.metrics
    if metrics is None:
        profile = store.current()
        metrics = profile.as_dict() if profile else None
    if metrics is None:
        _LOG.info("no metrics available for this chat request")

    prompt = build_prompt(body.message, metrics)
    try:
        reply = gemini.generate_reply(prompt)
    except gemini.ChatBlocked as e:
        return JSONResponse(status_code=400, content={"reply": e.user_message})
    except gemini.ChatServiceError as e:
        _LOG.error("chat relay failed: %s", e)
        return JSONResponse(
            status_code=500,
            content={"error": f"Failed to get response from the health assistant. {e}"},
        )
    return ChatReply(reply=reply)
