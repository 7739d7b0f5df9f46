import json
from types import SimpleNamespace

import pytest
from fastapi import HTTPException

from taleshelf.api.v1.endpoints import stories as stories_module
from taleshelf.infrastructure.di.providers import build_container, get_renderer, get_story_store


def _payload(response):
    return json.loads(response.body.decode("utf-8"))


def test_list_stories_renders_index_in_order(store, renderer):
    first = store.create("Humpty Dumpty", "Humpty Dumpty sat on the wall...")
    second = store.create("Jack and Jill", "Jack and Jill went up the hill...")
    store.persist(first)
    store.persist(second)

    response = stories_module.list_stories(store=store, renderer=renderer)

    assert response.status_code == 200
    assert response.media_type == "application/json"
    assert _payload(response) == {
        "texts": [
            {"id": 0, "title": "Humpty Dumpty", "href": "/text/0"},
            {"id": 1, "title": "Jack and Jill", "href": "/text/1"},
        ]
    }


def test_list_stories_empty_store(store, renderer):
    response = stories_module.list_stories(store=store, renderer=renderer)
    assert _payload(response) == {"texts": []}


def test_show_story_renders_text(store, renderer):
    story = store.create("Humpty Dumpty", "Humpty Dumpty sat on the wall...")
    store.persist(story)

    response = stories_module.show_story("0", store=store, renderer=renderer)

    assert response.status_code == 200
    assert _payload(response)["text"] == {
        "id": 0,
        "title": "Humpty Dumpty",
        "body": "Humpty Dumpty sat on the wall...",
    }


@pytest.mark.parametrize("raw_id", ["1", "-1", "-0", "00", "abc", "0x0", "1.0", " 0", "", "9" * 5000])
def test_show_story_missing_raises_404(store, renderer, raw_id):
    store.persist(store.create("Humpty Dumpty", "text"))

    with pytest.raises(HTTPException) as excinfo:
        stories_module.show_story(raw_id, store=store, renderer=renderer)

    assert excinfo.value.status_code == 404


def test_show_story_removed_raises_404(store, renderer):
    story = store.create("A", "a")
    store.persist(story)
    store.remove(story)

    with pytest.raises(HTTPException) as excinfo:
        stories_module.show_story(str(story.id), store=store, renderer=renderer)

    assert excinfo.value.status_code == 404


def test_show_story_hands_story_to_renderer(store):
    story = store.create("A", "a")
    store.persist(story)
    calls = []

    class RecordingRenderer:
        media_type = "text/plain"

        def render(self, view, context):
            calls.append((view, context))
            return b"rendered"

    response = stories_module.show_story("0", store=store, renderer=RecordingRenderer())

    assert response.body == b"rendered"
    assert calls == [("text", {"text": story})]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("0", 0),
        ("42", 42),
        ("-1", "-1"),
        ("-0", "-0"),
        ("007", "007"),
        ("abc", "abc"),
        ("--1", "--1"),
        ("4a", "4a"),
    ],
)
def test_parse_story_id(raw, expected):
    assert stories_module.parse_story_id(raw) == expected


def test_dependencies_resolve_from_app_container():
    container = build_container()
    request = SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(container=container)))

    store = get_story_store(request)

    assert store is get_story_store(request)
    assert get_renderer(request) is get_renderer(request)
    assert store.all() == []
