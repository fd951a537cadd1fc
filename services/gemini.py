# services/gemini.py
import functools
import logging
import random
import time

import httpx
from google import genai
from google.genai import types, errors as gerrors

from config import settings

_LOG = logging.getLogger(__name__)


class ChatServiceError(RuntimeError):
    """The assistant could not produce a reply."""


class ChatBlocked(ChatServiceError):
    """Gemini refused the prompt or the answer on safety grounds."""

    def __init__(self, reason: str, stage: str = "prompt") -> None:
        super().__init__(f"{stage} blocked: {reason}")
        self.reason = reason
        self.stage = stage   # "prompt" | "response"

    @property
    def user_message(self) -> str:
        if self.stage == "prompt":
            return (
                "I cannot process that request due to safety guidelines "
                f"({self.reason}). Please rephrase your question."
            )
        return (
            "I generated a response, but it was blocked due to safety guidelines "
            f"({self.reason}). Please try asking differently."
        )


# ───────────── Client ─────────────
@functools.lru_cache(maxsize=1)
def _get_client() -> genai.Client:
    if not settings.gemini_api_key:
        raise ChatServiceError("Server configuration error. API key missing.")
    return genai.Client(api_key=settings.gemini_api_key)


# ───────────── Safety ─────────────
_SAFETY_CATEGORIES = (
    types.HarmCategory.HARM_CATEGORY_HARASSMENT,
    types.HarmCategory.HARM_CATEGORY_HATE_SPEECH,
    types.HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT,
    types.HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT,
)

SAFETY_SETTINGS = [
    types.SafetySetting(
        category=cat,
        threshold=types.HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
    )
    for cat in _SAFETY_CATEGORIES
]

_OK_FINISH = {"STOP", "MAX_TOKENS"}


def _name(value) -> str:
    return getattr(value, "name", None) or str(value)


# ───────────── Generation (sync + retry) ─────────────
def _call(prompt: str, temperature: float, max_output_tokens: int):
    client = _get_client()
    for attempt in range(settings.chat_max_retries):
        try:
            return client.models.generate_content(
                model=settings.gemini_chat_model,
                contents=[prompt],
                config=types.GenerateContentConfig(
                    temperature=temperature,
                    max_output_tokens=max_output_tokens,
                    safety_settings=SAFETY_SETTINGS,
                ),
            )
        except gerrors.ClientError as e:
            if getattr(e, "status", None) == "RESOURCE_EXHAUSTED":
                backoff = (2 ** attempt) + random.random()
                _LOG.warning("Gemini 429, retrying in %.1fs", backoff)
                time.sleep(backoff)
                continue
            raise ChatServiceError(getattr(e, "message", None) or str(e)) from e
        except gerrors.APIError as e:
            raise ChatServiceError(getattr(e, "message", None) or str(e)) from e
        except httpx.HTTPError as e:
            _LOG.error("Gemini transport error: %s", e)
            raise ChatServiceError(f"AI service unreachable: {e}") from e
    raise ChatServiceError("AI service is rate limited, retries exhausted.")


def generate_reply(
    prompt: str,
    temperature: float | None = None,
    max_output_tokens: int | None = None,
) -> str:
    """Run one chat completion and return the assistant's text."""
    resp = _call(
        prompt,
        settings.chat_temperature if temperature is None else temperature,
        settings.chat_max_output_tokens if max_output_tokens is None else max_output_tokens,
    )
    _LOG.info("received response from Gemini")

    if not resp.candidates:
        feedback = getattr(resp, "prompt_feedback", None)
        reason = getattr(feedback, "block_reason", None)
        if reason:
            _LOG.warning("Gemini prompt blocked by safety settings: %s", _name(reason))
            raise ChatBlocked(_name(reason), stage="prompt")
        _LOG.error("Gemini returned no candidates")
        raise ChatServiceError("AI service returned an empty or invalid response.")

    candidate = resp.candidates[0]
    finish = candidate.finish_reason
    if finish is not None and _name(finish) not in _OK_FINISH:
        _LOG.warning("Gemini response finished with reason: %s", _name(finish))
        if _name(finish) == "SAFETY":
            raise ChatBlocked(_name(finish), stage="response")

    parts = candidate.content.parts if candidate.content and candidate.content.parts else []
    text = parts[0].text if parts else None
    if not text:
        _LOG.error("could not extract reply text from Gemini response")
        raise ChatServiceError("Could not process the content from the AI response structure.")
    return text.strip()
