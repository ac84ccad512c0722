"""Top-level API router aggregation."""

from fastapi import APIRouter

from . import explain

api_router = APIRouter(prefix="/api")

api_router.include_router(explain.router)
