"""Story endpoints"""
from typing import Union
import logging
import re

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response

from taleshelf.api.rendering import ViewRenderer
from taleshelf.domains.story.infrastructure.repositories import StoryRepository
from taleshelf.infrastructure.di.providers import get_renderer, get_story_store

router = APIRouter()
logger = logging.getLogger(__name__)


def parse_story_id(raw: str) -> Union[int, str]:
    """Return the id as an int, or the raw text when it is not a canonical id.

    Canonical ids are non-negative base-10 integers without leading zeros.
    """
    if re.fullmatch(r"0|[1-9][0-9]*", raw):
        try:
            return int(raw)
        except ValueError:
            # Longer than the interpreter allows to convert; no story has such an id.
            return raw
    return raw


@router.get("/")
def list_stories(
    store: StoryRepository = Depends(get_story_store),
    renderer: ViewRenderer = Depends(get_renderer),
) -> Response:
    """List every persisted story in insertion order."""
    body = renderer.render("index", {"texts": store.all()})
    return Response(content=body, media_type=renderer.media_type)


@router.get("/text/{story_id}")
def show_story(
    story_id: str,
    store: StoryRepository = Depends(get_story_store),
    renderer: ViewRenderer = Depends(get_renderer),
) -> Response:
    """Show one story, or 404 when no persisted story has that id."""
    story = store.find_by_id(parse_story_id(story_id))
    if story is None:
        logger.debug("Story %r not found", story_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Story not found",
        )
    body = renderer.render("text", {"text": story})
    return Response(content=body, media_type=renderer.media_type)
