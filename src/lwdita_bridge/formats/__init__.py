"""Tree file format handlers for lwdita-bridge."""

from lwdita_bridge.formats.base import TreeHandler
from lwdita_bridge.formats.json_handler import JSONHandler
from lwdita_bridge.formats.yaml_handler import YAMLHandler

__all__ = [
    "TreeHandler",
    "JSONHandler",
    "YAMLHandler",
]

# Map file extensions to handlers
HANDLER_MAP: dict[str, type[TreeHandler]] = {
    ".json": JSONHandler,
    ".yaml": YAMLHandler,
    ".yml": YAMLHandler,
}

SUPPORTED_EXTENSIONS = tuple(HANDLER_MAP.keys())


def get_handler(extension: str) -> type[TreeHandler]:
    """Get the appropriate handler class for a file extension."""
    ext = extension.lower()
    if ext not in HANDLER_MAP:
        raise ValueError(
            f"Unsupported file format: {ext}. "
            f"Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}"
        )
    return HANDLER_MAP[ext]
