"""Schema lookups shared by both transforms.

The engine only needs two facts from the LwDITA schema: how a source
node name maps to an editor type, and which source nodes are inline
formatting marks.
"""

from dataclasses import dataclass, field
from typing import Optional

from lwdita_bridge.config import get_settings


DEFAULT_MARKS = frozenset({"u", "s", "b", "sup", "sub"})


@dataclass
class NodeSchema:
    """Read-only view of the schema used by the transforms.

    Attributes:
        marks: Source node names that are inline formatting marks
        renames: Explicit source name -> editor type overrides
    """

    marks: frozenset[str] = DEFAULT_MARKS
    renames: dict[str, str] = field(default_factory=dict)

    def node_type(self, node_name: str) -> str:
        """Map a source node name to its editor type."""
        if node_name in self.renames:
            return self.renames[node_name]
        return node_name.replace("-", "_")

    def node_name(self, node_type: str) -> str:
        """Map an editor type back to a source node name."""
        for source_name, renamed in self.renames.items():
            if renamed == node_type:
                return source_name
        return node_type.replace("_", "-")

    def is_mark(self, node_name: str) -> bool:
        """Check if a source node is an inline formatting mark."""
        return node_name in self.marks


def get_schema(renames: Optional[dict[str, str]] = None) -> NodeSchema:
    """Build the default schema from the current settings."""
    settings = get_settings()
    return NodeSchema(
        marks=frozenset(settings.mark_nodes),
        renames=dict(renames or {}),
    )
