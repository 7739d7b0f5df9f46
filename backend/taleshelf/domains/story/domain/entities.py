"""Story domain entities."""
from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class Story:
    """A titled text.

    Stories compare and hash by identity: two stories with the same title and
    body are still different stories. Ids are handed out by the store.
    """

    id: int
    title: str
    body: str
