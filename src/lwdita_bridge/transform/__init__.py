"""Forward and reverse tree transforms."""

from lwdita_bridge.transform.errors import (
    TreeTransformError,
    InvalidInputError,
    MalformedMarkError,
    MalformedMediaError,
)
from lwdita_bridge.transform.forward import to_editor_tree
from lwdita_bridge.transform.reverse import to_source_tree
from lwdita_bridge.transform.special import SpecialNode

__all__ = [
    "TreeTransformError",
    "InvalidInputError",
    "MalformedMarkError",
    "MalformedMediaError",
    "to_editor_tree",
    "to_source_tree",
    "SpecialNode",
]
