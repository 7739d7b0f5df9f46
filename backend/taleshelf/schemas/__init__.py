"""Pydantic schemas for API responses."""

from .story import StoryDetail, StoryDetailResponse, StoryListResponse, StorySummary

__all__ = [
    "StoryDetail",
    "StoryDetailResponse",
    "StoryListResponse",
    "StorySummary",
]
