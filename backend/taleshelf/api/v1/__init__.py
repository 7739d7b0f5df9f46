"""HTTP routers."""
from fastapi import APIRouter

from taleshelf.api.v1.endpoints import stories

api_router = APIRouter()
api_router.include_router(stories.router, tags=["Stories"])

__all__ = ["api_router"]
