"""Tree models and schema lookups for the source and editor trees."""

from lwdita_bridge.tree.ir import (
    AttrValue,
    Attributes,
    SourceNode,
    EditorNode,
    Mark,
    drop_absent,
)
from lwdita_bridge.tree.schema import NodeSchema, DEFAULT_MARKS, get_schema

__all__ = [
    "AttrValue",
    "Attributes",
    "SourceNode",
    "EditorNode",
    "Mark",
    "drop_absent",
    "NodeSchema",
    "DEFAULT_MARKS",
    "get_schema",
]
