"""Abstract base class for tree file format handlers."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any


class TreeHandler(ABC):
    """Abstract base class for tree file format handlers.

    Each handler reads a serialized tree into plain nested data and
    writes plain nested data back out. Trees are converted to and from
    the node models by the caller.
    """

    @property
    @abstractmethod
    def supported_extensions(self) -> tuple[str, ...]:
        """Return tuple of supported file extensions (e.g., ('.json',))."""
        ...

    @abstractmethod
    def read(self, path: Path) -> dict[str, Any]:
        """Load a serialized tree.

        Args:
            path: Path to the input file

        Returns:
            The tree as nested dicts and lists
        """
        ...

    @abstractmethod
    def write(self, data: dict[str, Any], path: Path) -> None:
        """Write a tree to file.

        Args:
            data: The tree as nested dicts and lists
            path: Path to write the output file
        """
        ...
