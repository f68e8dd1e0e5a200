"""Reverse transform: editor (ProseMirror) tree -> source (LwDITA) tree."""

import logging
from typing import Any, Optional

from lwdita_bridge.config import get_settings
from lwdita_bridge.tree.ir import Attributes, EditorNode, SourceNode
from lwdita_bridge.tree.schema import NodeSchema, get_schema
from lwdita_bridge.transform.errors import MalformedMediaError
from lwdita_bridge.transform.special import (
    AUDIO_ATTRIBUTES,
    AUDIO_KEPT_ATTRIBUTES,
    AUDIO_MARKER_ORDER,
    AUDIO_MARKER_SKELETON,
    VIDEO_ATTRIBUTES,
    VIDEO_KEPT_ATTRIBUTES,
    VIDEO_MARKER_ORDER,
    VIDEO_MARKER_SKELETON,
    SpecialNode,
)

logger = logging.getLogger(__name__)

# Attribute values the generic cleanup treats as empty.
# NOTE: this also drops legitimate "0" and "false" values.
FALSY_STRINGS = ("", "0", "false")


def to_source_tree(
    node: EditorNode,
    schema: Optional[NodeSchema] = None,
) -> SourceNode:
    """Transform an editor node (usually a document) into a source node.

    Args:
        node: The editor node to transform
        schema: Schema lookups (defaults to the configured schema)

    Returns:
        The source tree node

    Raises:
        MalformedMediaError: If an audio or video node lacks its
            positional children
    """
    result = un_travel(node, schema or get_schema())

    settings = get_settings()
    if result.node_name == settings.editor_root:
        result.node_name = settings.source_root
    return result


def un_travel(node: EditorNode, schema: NodeSchema) -> SourceNode:
    """Recursively rebuild a source node from an editor node."""
    children = None
    if node.content is not None:
        children = [un_travel(child, schema) for child in node.content]
    attrs = node.attrs or {}
    node_name = schema.node_name(node.type)

    kind = SpecialNode.lookup(node_name)
    if kind is SpecialNode.VIDEO:
        return _video(node_name, attrs, children)
    if kind is SpecialNode.AUDIO:
        return _audio(node_name, attrs, children)
    if kind is SpecialNode.TEXT:
        return _text(node, schema)
    if kind is SpecialNode.IMAGE and children is None and attrs.get("alt"):
        return _image(node_name, attrs)

    return SourceNode(
        node_name=node_name,
        attributes=clean_attributes(attrs),
        children=children,
    )


def is_falsy(value: Any) -> bool:
    """Check if an attribute value is dropped by the generic cleanup."""
    if isinstance(value, str):
        return value in FALSY_STRINGS
    return not value


def clean_attributes(attrs: dict[str, Any]) -> Attributes:
    """Copy editor attrs, dropping falsy values and the parent link."""
    return {
        key: value
        for key, value in attrs.items()
        if key != "parent" and not is_falsy(value)
    }


def _text(node: EditorNode, schema: NodeSchema) -> SourceNode:
    """Rebuild a text leaf, re-wrapping it in its mark nodes.

    The first mark was applied by the innermost wrapper, so it is
    rebuilt first.
    """
    result = SourceNode(node_name="text", content=node.text)
    for mark in node.marks or []:
        result = SourceNode(
            node_name=schema.node_name(mark.type),
            attributes={},
            children=[result],
        )
    return result


def _image(node_name: str, attrs: dict[str, Any]) -> SourceNode:
    """Rebuild the ``<alt>`` child folded into ``attrs["alt"]``."""
    alt = SourceNode(
        node_name="alt",
        attributes={},
        children=[SourceNode(node_name="text", content=attrs["alt"])],
    )
    attributes = clean_attributes({k: v for k, v in attrs.items() if k != "alt"})
    return SourceNode(node_name=node_name, attributes=attributes, children=[alt])


def _positional_children(
    node_name: str,
    children: Optional[list[SourceNode]],
) -> tuple[SourceNode, SourceNode]:
    """Return the two positional children of a media node.

    A well-formed editor media node has the description at index 0 and
    the media source at index 1. The children are taken by position,
    not by their names.
    """
    if children is None or len(children) < 2:
        count = 0 if children is None else len(children)
        raise MalformedMediaError(
            f"<{node_name}> needs two positional children "
            f"(description and source), got {count}"
        )
    return children[0], children[1]


def _marker(
    node_name: str,
    value: Any,
    skeleton: tuple[str, ...],
) -> SourceNode:
    attributes: Attributes = dict.fromkeys(skeleton)
    attributes["value"] = value
    return SourceNode(node_name=node_name, attributes=attributes, children=None)


def _expand_media(
    node_name: str,
    attrs: dict[str, Any],
    children: Optional[list[SourceNode]],
    attribute_keys: tuple[str, ...],
    kept_keys: tuple[str, ...],
    marker_order: tuple[tuple[str, str], ...],
    skeleton: tuple[str, ...],
) -> SourceNode:
    """Expand flat media attrs back into the marker child layout."""
    desc, source = _positional_children(node_name, children)

    attributes: Attributes = dict.fromkeys(attribute_keys)
    for key in kept_keys:
        attributes[key] = attrs.get(key)

    rebuilt = [desc]
    for marker_name, attr in marker_order:
        if attrs.get(attr) is not None:
            rebuilt.append(_marker(marker_name, attrs[attr], skeleton))
    rebuilt.append(source)

    logger.debug("Rebuilt <%s> with %d marker(s)", node_name, len(rebuilt) - 2)
    return SourceNode(node_name=node_name, attributes=attributes, children=rebuilt)


def _video(
    node_name: str,
    attrs: dict[str, Any],
    children: Optional[list[SourceNode]],
) -> SourceNode:
    return _expand_media(
        node_name,
        attrs,
        children,
        VIDEO_ATTRIBUTES,
        VIDEO_KEPT_ATTRIBUTES,
        VIDEO_MARKER_ORDER,
        VIDEO_MARKER_SKELETON,
    )


def _audio(
    node_name: str,
    attrs: dict[str, Any],
    children: Optional[list[SourceNode]],
) -> SourceNode:
    return _expand_media(
        node_name,
        attrs,
        children,
        AUDIO_ATTRIBUTES,
        AUDIO_KEPT_ATTRIBUTES,
        AUDIO_MARKER_ORDER,
        AUDIO_MARKER_SKELETON,
    )
