import os
import sys
from pathlib import Path

import pytest

BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from taleshelf.api.rendering import JSONViewRenderer  # noqa: E402
from taleshelf.domains.story.infrastructure.repositories import InMemoryStoryRepository  # noqa: E402


@pytest.fixture
def store():
    return InMemoryStoryRepository()


@pytest.fixture
def renderer():
    return JSONViewRenderer()
