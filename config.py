"""
Centralised settings loader (pydantic-settings).

Every field can be overridden by the upper-case env var of the same
name, or from a local `.env` file.
"""

from __future__ import annotations
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class _Settings(BaseSettings):
    # ─── runtime ────────────────────────────────────────────────────
    env_name: str = Field("local")
    log_level: str = Field("INFO")
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # ─── Gemini chat relay ──────────────────────────────────────────
    gemini_api_key: str | None = Field(None)
    gemini_chat_model: str = Field("models/gemini-1.5-flash")
    chat_temperature: float = Field(0.6)
    chat_max_output_tokens: int = Field(800)
    chat_max_retries: int = Field(5)

    # allow other teammates’ env-vars without crashing
    model_config = {"extra": "ignore", "env_file": ".env", "env_file_encoding": "utf-8"}


# ------------------------------------------------------------------ #
#  Cached singleton accessor
# ------------------------------------------------------------------ #
@lru_cache
def _cached() -> _Settings:  # pragma: no cover
    return _Settings()  # type: ignore[call-arg]


settings: _Settings = _cached()
