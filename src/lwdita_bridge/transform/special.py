"""Node kinds that bypass the generic structural mapping.

Audio and video carry their playback flags as marker children in the
source tree and as flat attributes in the editor tree. The tables below
fix which marker feeds which attribute and the exact shapes the source
format expects when the markers are rebuilt.
"""

from enum import Enum
from typing import Optional


class SpecialNode(Enum):
    """Closed set of node names with dedicated handlers."""

    AUDIO = "audio"
    VIDEO = "video"
    IMAGE = "image"
    TEXT = "text"

    @classmethod
    def lookup(cls, name: str) -> Optional["SpecialNode"]:
        """Return the special kind for a node name, or None."""
        try:
            return cls(name)
        except ValueError:
            return None


# Marker child name -> flattened editor attribute
AUDIO_MARKERS: dict[str, str] = {
    "media-autoplay": "autoplay",
    "media-controls": "controls",
    "media-loop": "loop",
    "media-muted": "muted",
}
VIDEO_MARKERS: dict[str, str] = {
    **AUDIO_MARKERS,
    "video-poster": "poster",
}

# Media children kept as ordinary content
MEDIA_CONTENT = ("desc", "media-track", "media-source")

# Rebuild order of the conditional markers, as (node name, attribute)
VIDEO_MARKER_ORDER = (
    ("video-poster", "poster"),
    ("media-controls", "controls"),
    ("media-autoplay", "autoplay"),
    ("media-loop", "loop"),
    ("media-muted", "muted"),
)
AUDIO_MARKER_ORDER = (
    ("media-controls", "controls"),
    ("media-autoplay", "autoplay"),
    ("media-loop", "loop"),
    ("media-muted", "muted"),
    ("media-source", "source"),
)

# Full attribute key sets of a rebuilt media node, and the keys taken
# over from the editor attrs. Every other key is present but absent.
VIDEO_ATTRIBUTES = (
    "props", "dir", "xml:lang", "translate", "id",
    "conref", "outputclass", "class", "width", "height",
)
VIDEO_KEPT_ATTRIBUTES = ("outputclass", "width", "height")
AUDIO_ATTRIBUTES = (
    "class", "conref", "xml:lang", "dir", "id",
    "outputclass", "props", "translate",
)
AUDIO_KEPT_ATTRIBUTES = ("outputclass",)

# Attribute skeletons of the rebuilt marker children
VIDEO_MARKER_SKELETON = (
    "dir", "xml:lang", "translate", "name", "value", "outputclass", "class",
)
AUDIO_MARKER_SKELETON = (
    "class", "dir", "name", "translate", "outputclass", "value", "xml:lang",
)
