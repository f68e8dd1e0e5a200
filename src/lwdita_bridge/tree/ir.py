"""Tree models for both sides of the conversion.

The source tree is the XML-derived LwDITA document model, where every
element is a ``nodeName`` with optional ``attributes`` and ``children``.
The editor tree is the ProseMirror document model, where every node is
a ``type`` with an ``attrs`` map and either ``content`` or ``text``.

Both trees cross the process boundary as plain JSON, so each model
offers ``from_dict`` / ``to_dict`` in the wire shape.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


# An attribute value of ``None`` means "key present, value absent".
# It is kept distinct from a missing key until serialization.
AttrValue = Optional[str]
Attributes = dict[str, AttrValue]


def drop_absent(attributes: Optional[dict]) -> dict:
    """Return a copy of ``attributes`` without ``None``-valued keys."""
    if not attributes:
        return {}
    return {key: value for key, value in attributes.items() if value is not None}


@dataclass
class SourceNode:
    """A node of the source (LwDITA) tree.

    Attributes:
        node_name: Element name, e.g. ``topic`` or ``media-controls``
        attributes: Sparse attribute map; values may be ``None``
        children: Ordered child nodes (containers only)
        content: Literal text (``text`` leaves only)
    """

    node_name: str
    attributes: Optional[Attributes] = None
    children: Optional[list["SourceNode"]] = None
    content: Optional[str] = None

    @property
    def first_child(self) -> Optional["SourceNode"]:
        """The first child, if the node has any."""
        if self.children:
            return self.children[0]
        return None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SourceNode":
        """Build a node from its JSON shape."""
        attributes = data.get("attributes")
        children = data.get("children")
        return cls(
            node_name=data["nodeName"],
            attributes=dict(attributes) if attributes is not None else None,
            children=[cls.from_dict(child) for child in children]
            if children is not None else None,
            content=data.get("content"),
        )

    def to_dict(self, keep_absent: bool = False) -> dict[str, Any]:
        """Serialize to the JSON shape.

        Absent attribute values are dropped the same way a JSON encoder
        drops ``undefined``, unless ``keep_absent`` is set.
        """
        result: dict[str, Any] = {"nodeName": self.node_name}
        if self.attributes is not None:
            result["attributes"] = (
                dict(self.attributes) if keep_absent else drop_absent(self.attributes)
            )
        if self.children is not None:
            result["children"] = [
                child.to_dict(keep_absent=keep_absent) for child in self.children
            ]
        if self.content is not None:
            result["content"] = self.content
        return result


@dataclass
class Mark:
    """An inline formatting annotation on an editor text node."""

    type: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Mark":
        return cls(type=data["type"])

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type}


@dataclass
class EditorNode:
    """A node of the editor (ProseMirror) tree.

    Attributes:
        type: Node type name, e.g. ``topic`` or ``media_source``
        attrs: Dense attribute map; ``None`` only for an empty audio node
        content: Ordered child nodes (containers only)
        text: Literal text (text leaves only)
        marks: Inline formatting applied to a text leaf
    """

    type: str
    attrs: Optional[dict[str, Any]] = field(default_factory=dict)
    content: Optional[list["EditorNode"]] = None
    text: Optional[str] = None
    marks: Optional[list[Mark]] = None

    @property
    def is_text(self) -> bool:
        """Check if this node is a text leaf."""
        return self.text is not None

    def add_mark(self, mark: Mark) -> None:
        """Append a mark, creating the mark list if needed."""
        if self.marks is None:
            self.marks = []
        self.marks.append(mark)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EditorNode":
        """Build a node from its JSON shape."""
        attrs = data.get("attrs")
        content = data.get("content")
        marks = data.get("marks")
        return cls(
            type=data["type"],
            attrs=dict(attrs) if attrs is not None else None,
            content=[cls.from_dict(child) for child in content]
            if content is not None else None,
            text=data.get("text"),
            marks=[Mark.from_dict(mark) for mark in marks]
            if marks is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON shape."""
        result: dict[str, Any] = {"type": self.type}
        if self.attrs is not None:
            result["attrs"] = dict(self.attrs)
        if self.content is not None:
            result["content"] = [child.to_dict() for child in self.content]
        if self.text is not None:
            result["text"] = self.text
        if self.marks is not None:
            result["marks"] = [mark.to_dict() for mark in self.marks]
        return result
