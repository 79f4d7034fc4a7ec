"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bulletin import __version__
from bulletin.api.errors import register_exception_handlers
from bulletin.api.v1 import router as v1_router
from bulletin.core.config import LOG_DATEFMT, LOG_FORMAT, settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format=LOG_FORMAT,
    datefmt=LOG_DATEFMT,
)

app = FastAPI(
    title="Bulletin API",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)
app.include_router(v1_router, prefix=settings.API_V1_PREFIX)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "Bulletin API"}
