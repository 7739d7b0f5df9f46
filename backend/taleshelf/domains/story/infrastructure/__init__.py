from .repositories import InMemoryStoryRepository, StoryRepository

__all__ = ["InMemoryStoryRepository", "StoryRepository"]
