# rsvp_service/api/v1/api.py

from fastapi import APIRouter
from rsvp_service.api.v1.endpoints import health, public, rsvps

# This is the main router for the v1 API.
api_router = APIRouter()

api_router.include_router(health.router)
api_router.include_router(rsvps.router)
api_router.include_router(public.router)
