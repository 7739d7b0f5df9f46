"""Service registration for the DI container."""
from __future__ import annotations

from fastapi import Request

from taleshelf.api.rendering import JSONViewRenderer, ViewRenderer
from taleshelf.domains.story.infrastructure.repositories import (
    InMemoryStoryRepository,
    StoryRepository,
)
from taleshelf.infrastructure.di.container import Container


def configure_container(container: Container) -> None:
    """Configure application dependencies."""
    container.register(StoryRepository, lambda c: InMemoryStoryRepository())
    container.register(ViewRenderer, lambda c: JSONViewRenderer())


def build_container() -> Container:
    """Return a freshly configured container with an empty story store."""
    container = Container()
    configure_container(container)
    return container


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_story_store(request: Request) -> StoryRepository:
    return get_container(request).resolve(StoryRepository)


def get_renderer(request: Request) -> ViewRenderer:
    return get_container(request).resolve(ViewRenderer)
