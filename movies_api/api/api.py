"""
API Router Module - Aggregates all endpoint routers
"""
from fastapi import APIRouter

from movies_api.api.endpoints import health, movies

# Create the main API router
api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["Health"])
api_router.include_router(movies.router, prefix="/movies", tags=["Movies"])
