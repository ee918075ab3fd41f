"""
API Version 1 - Route definitions.
"""
from fastapi import APIRouter

from .auth import router as auth_router

# Create main v1 router
api_router = APIRouter(prefix="/v1")

api_router.include_router(auth_router)

__all__ = ['api_router']
