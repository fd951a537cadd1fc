# api/v1/router.py
from fastapi import APIRouter

from . import metrics, chat

api_router = APIRouter()

api_router.include_router(metrics.router, prefix="/metrics", tags=["Metrics"])
api_router.include_router(chat.router, prefix="/chat", tags=["Chat"])
