"""Stories seeded into a fresh store at startup."""
from typing import Iterable, List, Tuple

from taleshelf.domains.story.domain.entities import Story
from taleshelf.domains.story.infrastructure.repositories import StoryRepository

DEFAULT_STORIES: Tuple[Tuple[str, str], ...] = (
    (
        "Humpty Dumpty",
        "Humpty Dumpty sat on a wall,\n"
        "Humpty Dumpty had a great fall.\n"
        "All the king's horses and all the king's men\n"
        "Couldn't put Humpty together again.",
    ),
    (
        "Twinkle, Twinkle, Little Star",
        "Twinkle, twinkle, little star,\n"
        "How I wonder what you are!\n"
        "Up above the world so high,\n"
        "Like a diamond in the sky.",
    ),
)


def seed_stories(
    store: StoryRepository,
    fixtures: Iterable[Tuple[str, str]] = DEFAULT_STORIES,
) -> List[Story]:
    """Create and persist each (title, body) pair in order."""
    seeded = []
    for title, body in fixtures:
        story = store.create(title, body)
        store.persist(story)
        seeded.append(story)
    return seeded
