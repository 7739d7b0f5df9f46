"""View rendering for story endpoints."""
from __future__ import annotations

from typing import Any, Callable, Dict, Mapping

from pydantic import BaseModel

from taleshelf.domains.story.domain.entities import Story
from taleshelf.schemas.story import (
    StoryDetail,
    StoryDetailResponse,
    StoryListResponse,
    StorySummary,
)


def story_href(story: Story) -> str:
    return f"/text/{story.id}"


class ViewRenderer:
    """Turns a named view and its view-model values into a response body."""

    media_type = "text/plain"

    def render(self, view: str, context: Mapping[str, Any]) -> bytes:
        raise NotImplementedError


def _render_index(context: Mapping[str, Any]) -> BaseModel:
    return StoryListResponse(
        texts=[
            StorySummary(id=story.id, title=story.title, href=story_href(story))
            for story in context["texts"]
        ]
    )


def _render_text(context: Mapping[str, Any]) -> BaseModel:
    story = context["text"]
    return StoryDetailResponse(
        text=StoryDetail(id=story.id, title=story.title, body=story.body)
    )


class JSONViewRenderer(ViewRenderer):
    media_type = "application/json"

    def __init__(self) -> None:
        self._views: Dict[str, Callable[[Mapping[str, Any]], BaseModel]] = {
            "index": _render_index,
            "text": _render_text,
        }

    def render(self, view: str, context: Mapping[str, Any]) -> bytes:
        if view not in self._views:
            raise KeyError(f"Unknown view: {view}")
        return self._views[view](context).model_dump_json().encode("utf-8")
