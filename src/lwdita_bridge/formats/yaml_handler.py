"""YAML tree handler."""

from pathlib import Path
from typing import Any, Optional

import yaml

from lwdita_bridge.config import get_settings
from lwdita_bridge.formats.base import TreeHandler


class YAMLHandler(TreeHandler):
    """Handler for YAML (.yaml, .yml) tree files.

    Keys keep their insertion order so the output reads in the same
    order as the JSON form.
    """

    def __init__(self, indent: Optional[int] = None) -> None:
        self.indent = indent if indent is not None else get_settings().json_indent

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".yaml", ".yml")

    def read(self, path: Path) -> dict[str, Any]:
        """Read a tree from a YAML file."""
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def write(self, data: dict[str, Any], path: Path) -> None:
        """Write a tree as YAML."""
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(
                data,
                f,
                allow_unicode=True,
                sort_keys=False,
                indent=max(self.indent, 2),
            )
