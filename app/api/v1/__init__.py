"""API v1 router aggregation."""

from fastapi import APIRouter

from app.api.v1.endpoints import exercises, health, programs

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
api_router.include_router(programs.router, prefix="/programs", tags=["programs"])
