import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

from config import settings
from core.profile_store import ProfileStore
from core.validation import BiometricValidationError
from api.v1 import chat
from api.v1.router import api_router

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(title="HealthStat API", version="1.0.0")
    app.state.profile_store = ProfileStore()

    # CORS (public demo only – lock down in prod)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(BiometricValidationError)
    async def _invalid_biometrics(_: Request, exc: BiometricValidationError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"field": exc.field, "error": exc.message})

    app.include_router(api_router, prefix="/api/v1")
    # the dashboard's chat widget posts to /chat
    app.include_router(chat.router, prefix="/chat", tags=["Chat"])

    @app.get("/health", tags=["meta"])
    def health() -> dict[str, str]:
        return {"status": "ok", "env": settings.env_name}

    return app


app = create_app()
