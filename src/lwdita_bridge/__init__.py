"""lwdita-bridge - lossless conversion between LwDITA and editor document trees."""

__version__ = "0.1.0"

from lwdita_bridge.tree import SourceNode, EditorNode, Mark, NodeSchema
from lwdita_bridge.transform import (
    to_editor_tree,
    to_source_tree,
    TreeTransformError,
    InvalidInputError,
    MalformedMarkError,
    MalformedMediaError,
)

__all__ = [
    "__version__",
    "SourceNode",
    "EditorNode",
    "Mark",
    "NodeSchema",
    "to_editor_tree",
    "to_source_tree",
    "TreeTransformError",
    "InvalidInputError",
    "MalformedMarkError",
    "MalformedMediaError",
]
