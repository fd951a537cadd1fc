from __future__ import annotations
from typing import Any, Dict

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    # type-checked in the route so bad input gets the {error} envelope
    message: Any = None
    metrics: Dict[str, Any] | None = Field(
        None,
        description=(
            "Flat profile as returned by /api/v1/metrics (snake_case); the "
            "dashboard's camelCase keys activityLevel, bmiCategory and bodyFat "
            "are accepted too. Null falls back to the current snapshot."
        ),
    )


class ChatReply(BaseModel):
    reply: str


class ChatError(BaseModel):
    error: str
