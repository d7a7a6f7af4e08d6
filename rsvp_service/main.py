# rsvp_service/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rsvp_service.api.v1.api import api_router
from rsvp_service.core.config import settings
from rsvp_service.core.logging import setup_logging

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Schema is owned by the Alembic migrations in alembic/versions.
    logger.info(f"RSVP service starting up (env={settings.ENV})")
    yield
    logger.info("RSVP service shutting down...")


app = FastAPI(
    title="RSVP Service",
    version="1.0.0",
    description="""
        **Event RSVP Service**

        ## Features

        * **RSVP submission**: reCAPTCHA-gated, one response per phone number
        * **Wallet passes**: Apple / Google / web passes for Yes and Maybe responses
        * **Lookup**: find an RSVP by phone number
        * **Public roster**: first names and last initials of everyone who responded
        """,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")


@app.get("/")
def read_root():
    return {"status": "RSVP Service is running"}
