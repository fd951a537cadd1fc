from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from core.charts import build_charts
from core.metrics import MetricsEngine
from core.models.profile import UserProfile
from core.profile_store import ProfileStore
from core.validation import validate_biometrics
from api.v1.deps import get_engine, get_profile_store
from api.v1.schemas import BiometricForm, MetricsResponse, ProfileOut, ValidationFailure

router = APIRouter()
_LOG = logging.getLogger(__name__)


# ───────────────────────── helpers ──────────────────────────
def _current_or_404(store: ProfileStore) -> UserProfile:
    profile = store.current()
    if profile is None:
        raise HTTPException(status_code=404, detail="No metrics calculated yet")
    return profile


# ───────────────────────── submit ───────────────────────────
@router.post(
    "",
    response_model=MetricsResponse,
    status_code=status.HTTP_200_OK,
    responses={422: {"model": ValidationFailure}},
)
def submit_metrics(
    body: BiometricForm,
    engine: MetricsEngine = Depends(get_engine),
    store: ProfileStore = Depends(get_profile_store),
) -> MetricsResponse:
    # BiometricValidationError propagates → 422 {field, error} (see main.py)
    inputs = validate_biometrics(body.model_dump(exclude={"unit"}), body.unit)
    metrics = engine.compute(inputs)
    profile = store.publish(UserProfile(inputs=inputs, metrics=metrics))

    return MetricsResponse(
        profile=ProfileOut(**profile.as_dict()),
        charts=build_charts(metrics),
    )


# ───────────────────────── current snapshot ─────────────────
@router.get("/current", response_model=ProfileOut)
def current_metrics(store: ProfileStore = Depends(get_profile_store)) -> ProfileOut:
    return ProfileOut(**_current_or_404(store).as_dict())


@router.get("/current/charts")
def current_charts(store: ProfileStore = Depends(get_profile_store)) -> dict:
    return build_charts(_current_or_404(store).metrics)


@router.delete("/current", status_code=status.HTTP_204_NO_CONTENT)
def clear_metrics(store: ProfileStore = Depends(get_profile_store)) -> Response:
    store.clear()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
