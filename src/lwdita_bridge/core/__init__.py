"""File-level conversion and round-trip checks for lwdita-bridge."""

from lwdita_bridge.core.models import SourceNode, EditorNode, Mark
from lwdita_bridge.core.roundtrip import VerifyResult, verify_roundtrip
from lwdita_bridge.core.transformer import DocumentConverter, TransformationError

__all__ = [
    "SourceNode",
    "EditorNode",
    "Mark",
    "VerifyResult",
    "verify_roundtrip",
    "DocumentConverter",
    "TransformationError",
]
