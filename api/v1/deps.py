from fastapi import Request

from core.metrics import MetricsEngine
from core.profile_store import ProfileStore

_engine = MetricsEngine()


def get_engine() -> MetricsEngine:
    return _engine


def get_profile_store(request: Request) -> ProfileStore:
    """One snapshot per application instance."""
    return request.app.state.profile_store
