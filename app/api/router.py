"""
API router - aggregates all endpoint modules under /api.
"""

from fastapi import APIRouter

from app.api.endpoints import auth, health, inventories, items

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(inventories.router, prefix="/inventories", tags=["inventories"])
api_router.include_router(items.router, prefix="/items", tags=["items"])
