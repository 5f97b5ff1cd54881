"""API route registration."""

from fastapi import APIRouter

from wolgate.api.routes import health, wake

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(wake.router, tags=["wake"])
