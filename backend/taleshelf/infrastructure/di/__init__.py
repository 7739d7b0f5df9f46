"""Dependency injection container and providers."""

from .container import Container
from .providers import (
    build_container,
    configure_container,
    get_container,
    get_renderer,
    get_story_store,
)

__all__ = [
    "Container",
    "build_container",
    "configure_container",
    "get_container",
    "get_renderer",
    "get_story_store",
]
