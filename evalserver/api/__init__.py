"""
API package for the Teacher Evaluation Server.

This package contains the HTTP endpoints of the server.
"""

from fastapi import APIRouter

from evalserver.api import v1

# Create the main API router
api_router = APIRouter()

# Include the v1 API router
api_router.include_router(
    v1.router,
    prefix="/v1"
)

# Export the API router
__all__ = ["api_router"]
