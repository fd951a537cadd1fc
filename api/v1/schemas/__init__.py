"""Re-export individual schema modules for easy imports."""

from .biometrics import (
    BiometricForm,
    MetricsResponse,
    MicronutrientsOut,
    ProfileOut,
    ValidationFailure,
)
from .chat import ChatRequest, ChatReply, ChatError

__all__ = [
    "BiometricForm",
    "MetricsResponse",
    "MicronutrientsOut",
    "ProfileOut",
    "ValidationFailure",
    "ChatRequest",
    "ChatReply",
    "ChatError",
]
