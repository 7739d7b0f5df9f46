"""Story repositories."""
from __future__ import annotations

import logging
import threading
from typing import Any, List, Optional

from taleshelf.domains.story.domain.entities import Story

logger = logging.getLogger(__name__)


class StoryRepository:
    def create(self, title: str, body: str) -> Story:
        raise NotImplementedError

    def persist(self, story: Story) -> None:
        raise NotImplementedError

    def remove(self, story: Story) -> None:
        raise NotImplementedError

    def contains(self, story: Story) -> bool:
        raise NotImplementedError

    def all(self) -> List[Story]:
        raise NotImplementedError

    def find_by_id(self, story_id: Any) -> Optional[Story]:
        raise NotImplementedError


class InMemoryStoryRepository(StoryRepository):
    """Process-lifetime story store.

    Ids come from a counter owned by the store, starting at 0 and never
    rewound, so an id is never reused even after its story is removed.
    Every operation runs under one lock.
    """

    def __init__(self) -> None:
        self._stories: List[Story] = []
        self._next_id = 0
        self._lock = threading.Lock()

    def create(self, title: str, body: str) -> Story:
        """Build a story with a fresh id. The story is not persisted."""
        with self._lock:
            story = Story(id=self._next_id, title=title, body=body)
            self._next_id += 1
        return story

    def persist(self, story: Story) -> None:
        with self._lock:
            if self._index_of(story) is not None:
                return
            self._stories.append(story)
        logger.debug("Persisted story %s", story.id)

    def remove(self, story: Story) -> None:
        with self._lock:
            index = self._index_of(story)
            if index is None:
                return
            del self._stories[index]
        logger.debug("Removed story %s", story.id)

    def contains(self, story: Story) -> bool:
        with self._lock:
            return self._index_of(story) is not None

    def all(self) -> List[Story]:
        with self._lock:
            return list(self._stories)

    def find_by_id(self, story_id: Any) -> Optional[Story]:
        """
        Look up a persisted story.

        Args:
            story_id: Story id. Anything that is not a non-negative int
                matches nothing.

        Returns:
            The story if persisted, None otherwise
        """
        if isinstance(story_id, bool) or not isinstance(story_id, int) or story_id < 0:
            return None
        with self._lock:
            for story in self._stories:
                if story.id == story_id:
                    return story
        return None

    def __contains__(self, story: object) -> bool:
        return isinstance(story, Story) and self.contains(story)

    def __len__(self) -> int:
        with self._lock:
            return len(self._stories)

    def _index_of(self, story: Story) -> Optional[int]:
        for index, candidate in enumerate(self._stories):
            if candidate is story:
                return index
        return None
