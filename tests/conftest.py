"""Pytest fixtures for lwdita-bridge tests."""

import json

import pytest
from pathlib import Path

from lwdita_bridge import config
from lwdita_bridge.tree.schema import NodeSchema


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop the cached settings so every test sees the defaults."""
    config._settings = None
    yield
    config._settings = None


@pytest.fixture
def schema() -> NodeSchema:
    """Default schema with the LwDITA inline marks."""
    return NodeSchema()


@pytest.fixture
def sample_source() -> dict:
    """Minimal source document with a topic and a title."""
    return {
        "nodeName": "document",
        "children": [
            {
                "nodeName": "topic",
                "attributes": {"id": "intro-product"},
                "children": [
                    {
                        "nodeName": "title",
                        "attributes": {},
                        "children": [{"nodeName": "text", "content": "Overview"}],
                    }
                ],
            }
        ],
    }


@pytest.fixture
def sample_editor() -> dict:
    """Editor tree expected for ``sample_source``."""
    return {
        "type": "doc",
        "attrs": {},
        "content": [
            {
                "type": "topic",
                "attrs": {"id": "intro-product", "parent": "doc"},
                "content": [
                    {
                        "type": "title",
                        "attrs": {"parent": "topic"},
                        "content": [
                            {
                                "type": "text",
                                "text": "Overview",
                                "attrs": {"parent": "title"},
                            }
                        ],
                    }
                ],
            }
        ],
    }


@pytest.fixture
def video_source() -> dict:
    """Video with controls and loop markers and no poster."""
    return {
        "nodeName": "video",
        "attributes": {"outputclass": "wide", "width": "640", "height": None},
        "children": [
            {
                "nodeName": "desc",
                "attributes": {},
                "children": [{"nodeName": "text", "content": "Intro clip"}],
            },
            {"nodeName": "media-controls", "attributes": {"value": "true"}},
            {"nodeName": "media-loop", "attributes": {"value": "false"}},
            {
                "nodeName": "media-source",
                "attributes": {"name": "source", "value": "intro.mp4"},
            },
        ],
    }


@pytest.fixture
def audio_source() -> dict:
    """Audio with autoplay and muted markers."""
    return {
        "nodeName": "audio",
        "attributes": {"outputclass": None},
        "children": [
            {
                "nodeName": "desc",
                "attributes": {},
                "children": [{"nodeName": "text", "content": "Podcast"}],
            },
            {"nodeName": "media-autoplay", "attributes": {"value": "true"}},
            {"nodeName": "media-muted", "attributes": {"value": "true"}},
            {"nodeName": "media-source", "attributes": {"value": "ep1.mp3"}},
        ],
    }


@pytest.fixture
def rich_source(video_source: dict, audio_source: dict) -> dict:
    """Document mixing generic nodes, marks, an image and media."""
    return {
        "nodeName": "document",
        "children": [
            {
                "nodeName": "topic",
                "attributes": {"id": "media-topic"},
                "children": [
                    {
                        "nodeName": "title",
                        "children": [{"nodeName": "text", "content": "Media"}],
                    },
                    {
                        "nodeName": "body",
                        "children": [
                            {
                                "nodeName": "p",
                                "children": [
                                    {"nodeName": "text", "content": "Plain "},
                                    {
                                        "nodeName": "b",
                                        "children": [
                                            {
                                                "nodeName": "u",
                                                "children": [
                                                    {"nodeName": "text", "content": "loud"}
                                                ],
                                            }
                                        ],
                                    },
                                    {
                                        "nodeName": "image",
                                        "attributes": {"href": "logo.png"},
                                        "children": [
                                            {
                                                "nodeName": "alt",
                                                "children": [
                                                    {"nodeName": "text", "content": "Logo"}
                                                ],
                                            }
                                        ],
                                    },
                                ],
                            },
                            video_source,
                            audio_source,
                        ],
                    },
                ],
            }
        ],
    }


@pytest.fixture
def tmp_source_file(tmp_path: Path, sample_source: dict) -> Path:
    """Write ``sample_source`` to a temporary JSON file."""
    file_path = tmp_path / "topic.json"
    file_path.write_text(json.dumps(sample_source), encoding="utf-8")
    return file_path
