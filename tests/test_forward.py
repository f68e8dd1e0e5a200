"""Tests for the forward (source -> editor) transform."""

import pytest

from lwdita_bridge.tree.ir import SourceNode
from lwdita_bridge.tree.schema import NodeSchema
from lwdita_bridge.transform.errors import InvalidInputError, MalformedMarkError
from lwdita_bridge.transform.forward import default_travel, to_editor_tree, travel


def wrap(*children: dict) -> SourceNode:
    """Build a document root around the given source nodes."""
    return SourceNode.from_dict({"nodeName": "document", "children": list(children)})


class TestToEditorTree:
    """Tests for the forward entry point."""

    def test_sample_document(self, sample_source: dict, sample_editor: dict):
        """Test the documented topic/title sample end to end."""
        result = to_editor_tree(SourceNode.from_dict(sample_source))

        assert result.to_dict() == sample_editor

    def test_non_root_fails(self):
        """Test that a node other than the document root is rejected."""
        with pytest.raises(InvalidInputError, match="Not a document root"):
            to_editor_tree(SourceNode(node_name="topic", children=[]))

    def test_input_is_not_mutated(self):
        """Test that the caller's tree keeps its names and absent values."""
        root = SourceNode.from_dict({
            "nodeName": "document",
            "children": [{"nodeName": "topic", "attributes": {"id": None}}],
        })

        to_editor_tree(root)

        assert root.node_name == "document"
        assert root.children[0].attributes == {"id": None}

    def test_root_has_no_parent(self, sample_source: dict):
        """Test that the root does not get a parent link."""
        result = to_editor_tree(SourceNode.from_dict(sample_source))

        assert result.type == "doc"
        assert "parent" not in result.attrs

    def test_custom_root_names(self, monkeypatch: pytest.MonkeyPatch):
        """Test that root names come from the settings."""
        monkeypatch.setenv("LWDITA_SOURCE_ROOT", "xdita")
        monkeypatch.setenv("LWDITA_EDITOR_ROOT", "root")

        result = to_editor_tree(SourceNode(node_name="xdita", children=[]))

        assert result.type == "root"


class TestDefaultTravel:
    """Tests for the generic structural mapping."""

    def test_absent_attributes_dropped(self, schema: NodeSchema):
        """Test that None-valued attributes are left out of attrs."""
        node = SourceNode(
            node_name="section",
            attributes={"id": "s1", "outputclass": None},
            children=[],
        )

        result = default_travel(node, schema)

        assert result.attrs == {"id": "s1"}
        assert result.content == []

    def test_content_only_when_children(self, schema: NodeSchema):
        """Test that a childless node has no content field."""
        result = default_travel(SourceNode(node_name="section"), schema)

        assert result.content is None
        assert "content" not in result.to_dict()

    def test_hyphens_become_underscores(self, schema: NodeSchema):
        """Test node name normalization."""
        result = default_travel(SourceNode(node_name="media-track"), schema)

        assert result.type == "media_track"

    def test_parent_uses_original_name(self, schema: NodeSchema):
        """Test that the parent link is the source name, not the type."""
        parent = SourceNode(node_name="media-track")
        child = SourceNode(node_name="data", attributes={})

        result = travel(child, parent, schema)

        assert result.attrs["parent"] == "media-track"


class TestMarks:
    """Tests for inline mark collapsing."""

    def test_mark_collapses_into_text(self):
        """Test the documented underline example."""
        root = wrap({
            "nodeName": "p",
            "children": [
                {"nodeName": "u", "children": [{"nodeName": "text", "content": "hi"}]}
            ],
        })

        paragraph = to_editor_tree(root).content[0]

        assert paragraph.content[0].to_dict() == {
            "type": "text",
            "text": "hi",
            "attrs": {"parent": "p"},
            "marks": [{"type": "u"}],
        }

    def test_nested_marks_append(self):
        """Test that outer marks are appended after inner ones."""
        root = wrap({
            "nodeName": "p",
            "children": [{
                "nodeName": "b",
                "children": [
                    {"nodeName": "sup", "children": [{"nodeName": "text", "content": "2"}]}
                ],
            }],
        })

        text = to_editor_tree(root).content[0].content[0]

        assert [mark.type for mark in text.marks] == ["sup", "b"]

    def test_renamed_mark_type(self):
        """Test that the schema rename table applies to mark types."""
        schema = NodeSchema(renames={"b": "strong"})
        root = wrap({
            "nodeName": "p",
            "children": [{"nodeName": "b", "children": [{"nodeName": "text", "content": "x"}]}],
        })

        text = to_editor_tree(root, schema).content[0].content[0]

        assert text.marks[0].type == "strong"

    def test_mark_with_two_children_fails(self):
        """Test that a mark must wrap exactly one child."""
        root = wrap({
            "nodeName": "p",
            "children": [{
                "nodeName": "u",
                "children": [
                    {"nodeName": "text", "content": "a"},
                    {"nodeName": "text", "content": "b"},
                ],
            }],
        })

        with pytest.raises(MalformedMarkError, match="got 2"):
            to_editor_tree(root)

    def test_empty_mark_fails(self, schema: NodeSchema):
        """Test that a childless mark is rejected."""
        with pytest.raises(MalformedMarkError, match="got 0"):
            default_travel(SourceNode(node_name="s"), schema)


class TestSpecialNodes:
    """Tests for text, image, audio and video handlers."""

    def test_text_node(self):
        """Test that text nodes carry their content as text."""
        root = wrap({"nodeName": "text", "content": "Hello"})

        text = to_editor_tree(root).content[0]

        assert text.to_dict() == {"type": "text", "text": "Hello", "attrs": {"parent": "doc"}}

    def test_image_with_alt(self):
        """Test the documented image example."""
        root = wrap({
            "nodeName": "p",
            "children": [{
                "nodeName": "image",
                "children": [
                    {"nodeName": "alt", "children": [{"nodeName": "text", "content": "Logo"}]}
                ],
            }],
        })

        image = to_editor_tree(root).content[0].content[0]

        assert image.to_dict() == {"type": "image", "attrs": {"alt": "Logo", "parent": "p"}}

    def test_image_keeps_attributes(self):
        """Test that image attributes survive next to the alt text."""
        root = wrap({
            "nodeName": "image",
            "attributes": {"href": "logo.png", "height": None},
            "children": [
                {"nodeName": "alt", "children": [{"nodeName": "text", "content": "Logo"}]}
            ],
        })

        image = to_editor_tree(root).content[0]

        assert image.attrs == {"href": "logo.png", "alt": "Logo", "parent": "doc"}
        assert image.content is None

    def test_image_without_alt_is_generic(self):
        """Test that an image without a leading alt uses the generic rule."""
        root = wrap({
            "nodeName": "image",
            "attributes": {"href": "logo.png"},
            "children": [{"nodeName": "data", "attributes": {}}],
        })

        image = to_editor_tree(root).content[0]

        assert image.attrs == {"href": "logo.png", "parent": "doc"}
        assert image.content[0].type == "data"

    def test_video_flattens_markers(self, video_source: dict):
        """Test that video markers become flat attrs."""
        video = to_editor_tree(wrap(video_source)).content[0]

        assert video.attrs == {
            "outputclass": "wide",
            "width": "640",
            "controls": "true",
            "loop": "false",
            "parent": "doc",
        }
        assert [child.type for child in video.content] == ["desc", "media_source"]
        assert video.content[0].attrs["parent"] == "video"

    def test_video_poster(self):
        """Test that the poster marker maps to attrs.poster."""
        root = wrap({
            "nodeName": "video",
            "children": [
                {"nodeName": "video-poster", "attributes": {"value": "poster.png"}},
            ],
        })

        video = to_editor_tree(root).content[0]

        assert video.attrs == {"poster": "poster.png", "parent": "doc"}
        assert video.content == []

    def test_empty_video_keeps_attrs(self):
        """Test that video attrs are present even when empty."""
        video = to_editor_tree(wrap({"nodeName": "video"})).content[0]

        assert video.to_dict() == {"type": "video", "attrs": {"parent": "doc"}, "content": []}

    def test_audio_flattens_markers(self, audio_source: dict):
        """Test that audio markers become flat attrs."""
        audio = to_editor_tree(wrap(audio_source)).content[0]

        assert audio.attrs == {"autoplay": "true", "muted": "true", "parent": "doc"}
        assert [child.type for child in audio.content] == ["desc", "media_source"]

    def test_empty_audio_omits_attrs(self):
        """Test that empty audio attrs are left out entirely."""
        root = wrap({
            "nodeName": "audio",
            "attributes": {"id": None},
            "children": [{"nodeName": "desc", "attributes": {}}],
        })

        audio = to_editor_tree(root).content[0]

        assert audio.attrs is None
        assert audio.to_dict() == {
            "type": "audio",
            "content": [{"type": "desc", "attrs": {"parent": "audio"}}],
        }

    def test_media_drops_unknown_children(self):
        """Test that children outside the media content set are dropped."""
        root = wrap({
            "nodeName": "audio",
            "attributes": {"id": "a1"},
            "children": [
                {"nodeName": "fallback", "attributes": {}},
                {"nodeName": "media-track", "attributes": {"value": "en.vtt"}},
            ],
        })

        audio = to_editor_tree(root).content[0]

        assert [child.type for child in audio.content] == ["media_track"]

    def test_marker_without_value_is_skipped(self):
        """Test that a marker with no value does not add an attribute."""
        root = wrap({
            "nodeName": "video",
            "children": [{"nodeName": "media-muted", "attributes": {"value": None}}],
        })

        video = to_editor_tree(root).content[0]

        assert "muted" not in video.attrs
