"""Core data models for lwdita-bridge.

Re-exports the tree models for convenience.
"""

from lwdita_bridge.tree.ir import (
    SourceNode,
    EditorNode,
    Mark,
)

__all__ = [
    "SourceNode",
    "EditorNode",
    "Mark",
]
