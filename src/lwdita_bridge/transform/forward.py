"""Forward transform: source (LwDITA) tree -> editor (ProseMirror) tree.

Every node goes through :func:`travel`, which dispatches to a special
handler for audio, video, image and text nodes and to
:func:`default_travel` for everything else. After a node is built,
``travel`` records the original name of its structural parent in
``attrs["parent"]``.

Example::

    {"nodeName": "document", "children": [
        {"nodeName": "topic", "attributes": {"id": "intro-product"},
         "children": [{"nodeName": "title", "attributes": {},
                       "children": [{"nodeName": "text", "content": "Overview"}]}]}]}

becomes::

    {"type": "doc", "attrs": {}, "content": [
        {"type": "topic", "attrs": {"id": "intro-product", "parent": "doc"},
         "content": [{"type": "title", "attrs": {"parent": "topic"},
                      "content": [{"type": "text", "text": "Overview",
                                   "attrs": {"parent": "title"}}]}]}]}
"""

import logging
from dataclasses import replace
from typing import Optional

from lwdita_bridge.config import get_settings
from lwdita_bridge.tree.ir import EditorNode, Mark, SourceNode, drop_absent
from lwdita_bridge.tree.schema import NodeSchema, get_schema
from lwdita_bridge.transform.errors import InvalidInputError, MalformedMarkError
from lwdita_bridge.transform.special import (
    AUDIO_MARKERS,
    MEDIA_CONTENT,
    VIDEO_MARKERS,
    SpecialNode,
)

logger = logging.getLogger(__name__)


def to_editor_tree(
    root: SourceNode,
    schema: Optional[NodeSchema] = None,
) -> EditorNode:
    """Transform a source document into an editor document.

    Args:
        root: The source tree root, named after the document root tag
        schema: Schema lookups (defaults to the configured schema)

    Returns:
        The editor tree, rooted at the editor root type

    Raises:
        InvalidInputError: If ``root`` is not a document root
        MalformedMarkError: If a mark node does not wrap exactly one child
    """
    settings = get_settings()
    if root.node_name != settings.source_root:
        raise InvalidInputError(
            f"Not a document root: expected <{settings.source_root}>, "
            f"got <{root.node_name}>"
        )
    schema = schema or get_schema()

    # Walk a renamed copy; the caller's root keeps its name
    doc = replace(root, node_name=settings.editor_root)
    return travel(doc, None, schema)


def travel(
    node: SourceNode,
    parent: Optional[SourceNode],
    schema: NodeSchema,
) -> EditorNode:
    """Transform one node and record its parent link.

    Args:
        node: The source node to transform
        parent: Its structural parent, or None for the root
        schema: Schema lookups

    Returns:
        The transformed editor node
    """
    kind = SpecialNode.lookup(node.node_name)
    if kind is SpecialNode.AUDIO:
        result = _audio(node, schema)
    elif kind is SpecialNode.VIDEO:
        result = _video(node, schema)
    elif kind is SpecialNode.IMAGE:
        result = _image(node, schema)
    elif kind is SpecialNode.TEXT:
        result = _text(node)
    else:
        result = default_travel(node, schema)

    if parent is not None and result.attrs is not None:
        result.attrs["parent"] = parent.node_name
    return result


def default_travel(node: SourceNode, schema: NodeSchema) -> EditorNode:
    """Generic structural mapping of a source node.

    Children become content, attributes become attrs (without absent
    values) and the node name becomes the type. A mark node collapses
    into its single child, which gains the mark.
    """
    content = None
    if node.children is not None:
        content = [travel(child, node, schema) for child in node.children]
    attrs = drop_absent(node.attributes)
    node_type = schema.node_type(node.node_name)

    if schema.is_mark(node.node_name):
        if content is None or len(content) != 1:
            count = 0 if content is None else len(content)
            raise MalformedMarkError(
                f"Mark <{node.node_name}> must wrap exactly one child, got {count}"
            )
        result = content[0]
        result.add_mark(Mark(type=node_type))
        return result

    return EditorNode(type=node_type, attrs=attrs, content=content)


def _text(node: SourceNode) -> EditorNode:
    return EditorNode(type="text", text=node.content, attrs={})


def _image(node: SourceNode, schema: NodeSchema) -> EditorNode:
    """Fold a leading ``<alt>`` text into the image ``alt`` attribute."""
    alt = node.first_child
    if alt is not None and alt.node_name == "alt":
        alt_text = alt.first_child
        if alt_text is not None and alt_text.node_name == "text":
            attrs = drop_absent({**(node.attributes or {}), "alt": alt_text.content})
            return EditorNode(type="image", attrs=attrs)
    return default_travel(node, schema)


def _collect_media(
    node: SourceNode,
    markers: dict[str, str],
    schema: NodeSchema,
) -> tuple[dict, list[EditorNode]]:
    """Split media children into flattened attrs and kept content."""
    attrs = drop_absent(node.attributes)
    kept: list[SourceNode] = []
    for child in node.children or []:
        if child.node_name in markers:
            value = (child.attributes or {}).get("value")
            if value is not None:
                attrs[markers[child.node_name]] = value
        elif child.node_name in MEDIA_CONTENT:
            kept.append(child)
        else:
            logger.debug(
                "Dropping unexpected <%s> child of <%s>",
                child.node_name,
                node.node_name,
            )
    content = [travel(child, node, schema) for child in kept]
    return attrs, content


def _audio(node: SourceNode, schema: NodeSchema) -> EditorNode:
    attrs, content = _collect_media(node, AUDIO_MARKERS, schema)
    # Empty audio attrs are left out entirely, unlike video
    return EditorNode(type=node.node_name, attrs=attrs or None, content=content)


def _video(node: SourceNode, schema: NodeSchema) -> EditorNode:
    attrs, content = _collect_media(node, VIDEO_MARKERS, schema)
    return EditorNode(type=node.node_name, attrs=attrs, content=content)
