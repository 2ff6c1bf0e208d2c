"""
Polar Bear Chatbot — FastAPI entry point.
"""

import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from polarbot.config import settings
from polarbot.middleware.error_handler import global_exception_handler
from polarbot.middleware.logging_middleware import logging_middleware
from polarbot.middleware.rate_limit import limiter
from polarbot.services import ai_service

# ── Routes ───────────────────────────────────────────────
from polarbot.routes.chat import router as chat_router
from polarbot.routes.blueprint import router as blueprint_router
from polarbot.routes.settings import router as settings_router


# ── Logging ──────────────────────────────────────────────
logger.remove()
logger.add(sys.stderr, level="DEBUG" if settings.DEBUG else settings.LOG_LEVEL)


# ── Lifespan ─────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    await ai_service.init()
    logger.info(f"AI mode: {ai_service.get_status()['ai_mode']}, languages: {settings.SUPPORTED_LANGUAGES}")
    yield
    logger.info("Shutting down")


# ── App ──────────────────────────────────────────────────
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Polar the polar bear: topic-aware replies and conversation blueprints",
    lifespan=lifespan,
)

# ── Rate Limiter ─────────────────────────────────────────
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# ── CORS ─────────────────────────────────────────────────
origins = settings.CORS_ORIGINS.split(",") if settings.CORS_ORIGINS != "*" else ["*"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Custom Middleware ────────────────────────────────────
app.middleware("http")(global_exception_handler)
app.middleware("http")(logging_middleware)

# ── Register Routers ────────────────────────────────────
app.include_router(chat_router)
app.include_router(blueprint_router)
app.include_router(settings_router)


# ── Health Check ─────────────────────────────────────────
@app.get("/api/health", tags=["health"])
async def health():
    return {
        "status": "ok",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
    }


def run():
    import uvicorn
    uvicorn.run(
        "polarbot.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="info",
    )


# ── Run ──────────────────────────────────────────────────
if __name__ == "__main__":
    run()
