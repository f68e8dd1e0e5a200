"""JSON tree handler."""

import json
from pathlib import Path
from typing import Any, Optional

from lwdita_bridge.config import get_settings
from lwdita_bridge.formats.base import TreeHandler


class JSONHandler(TreeHandler):
    """Handler for JSON (.json) tree files.

    This is the native exchange format of both trees.
    """

    def __init__(self, indent: Optional[int] = None) -> None:
        self.indent = indent if indent is not None else get_settings().json_indent

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".json",)

    def read(self, path: Path) -> dict[str, Any]:
        """Read a tree from a JSON file."""
        return json.loads(path.read_text(encoding="utf-8"))

    def write(self, data: dict[str, Any], path: Path) -> None:
        """Write a tree as JSON, keeping non-ASCII text readable."""
        content = json.dumps(data, indent=self.indent, ensure_ascii=False)
        path.write_text(content + "\n", encoding="utf-8")
