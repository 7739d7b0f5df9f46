"""Schemas for story views."""
from typing import List
from pydantic import BaseModel, Field


class StorySummary(BaseModel):
    """Story entry in the index view."""
    id: int = Field(ge=0)
    title: str
    href: str


class StoryListResponse(BaseModel):
    texts: List[StorySummary] = Field(default_factory=list)


class StoryDetail(BaseModel):
    id: int = Field(ge=0)
    title: str
    body: str


class StoryDetailResponse(BaseModel):
    text: StoryDetail
