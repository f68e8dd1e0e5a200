"""File-level conversion between source and editor trees."""

import logging
from pathlib import Path
from typing import Any, Optional

import yaml

from lwdita_bridge.formats import get_handler, SUPPORTED_EXTENSIONS
from lwdita_bridge.tree.ir import EditorNode, SourceNode
from lwdita_bridge.tree.schema import NodeSchema, get_schema
from lwdita_bridge.transform.errors import TreeTransformError
from lwdita_bridge.transform.forward import to_editor_tree
from lwdita_bridge.transform.reverse import to_source_tree
from lwdita_bridge.core.roundtrip import VerifyResult, verify_roundtrip

logger = logging.getLogger(__name__)


class TransformationError(Exception):
    """Error during document conversion."""

    pass


def _describe(error: Exception) -> str:
    """Render a conversion error for the user."""
    if isinstance(error, KeyError):
        return f"missing required key {error.args[0]!r}"
    return str(error)


class DocumentConverter:
    """Converts tree files between the source and editor representations.

    Pipeline:
    1. Read the input file (JSON or YAML) into plain data
    2. Build the tree model for the input side
    3. Run the forward or reverse transform
    4. Write the other side in the output file's format
    """

    def __init__(
        self,
        schema: Optional[NodeSchema] = None,
        indent: Optional[int] = None,
    ) -> None:
        """Initialize the converter.

        Args:
            schema: Schema lookups (defaults to the configured schema)
            indent: Output indentation (defaults to the configured indent)
        """
        self.schema = schema or get_schema()
        self.indent = indent

    def to_editor_file(self, input_path: Path, output_path: Path) -> EditorNode:
        """Convert a source tree file into an editor tree file.

        Args:
            input_path: Path to the source tree file
            output_path: Path for the editor tree file

        Returns:
            The EditorNode that was written

        Raises:
            TransformationError: If conversion fails
        """
        data = self._read(input_path)
        try:
            document = to_editor_tree(SourceNode.from_dict(data), self.schema)
        except (TreeTransformError, KeyError) as e:
            raise TransformationError(f"{input_path.name}: {_describe(e)}") from e

        self._write(document.to_dict(), output_path)
        return document

    def to_source_file(self, input_path: Path, output_path: Path) -> SourceNode:
        """Convert an editor tree file into a source tree file.

        Args:
            input_path: Path to the editor tree file
            output_path: Path for the source tree file

        Returns:
            The SourceNode that was written

        Raises:
            TransformationError: If conversion fails
        """
        data = self._read(input_path)
        try:
            document = to_source_tree(EditorNode.from_dict(data), self.schema)
        except (TreeTransformError, KeyError) as e:
            raise TransformationError(f"{input_path.name}: {_describe(e)}") from e

        self._write(document.to_dict(), output_path)
        return document

    def verify_file(self, input_path: Path) -> VerifyResult:
        """Round-trip a source tree file and compare it with itself.

        Raises:
            TransformationError: If either transform fails
        """
        data = self._read(input_path)
        try:
            return verify_roundtrip(SourceNode.from_dict(data), self.schema)
        except (TreeTransformError, KeyError) as e:
            raise TransformationError(f"{input_path.name}: {_describe(e)}") from e

    def _read(self, input_path: Path) -> dict[str, Any]:
        """Validate and load an input file."""
        if not input_path.exists():
            raise TransformationError(f"Input file not found: {input_path}")

        ext = input_path.suffix.lower()
        if ext not in SUPPORTED_EXTENSIONS:
            raise TransformationError(
                f"Unsupported format: {ext}. "
                f"Supported: {', '.join(SUPPORTED_EXTENSIONS)}"
            )

        handler = get_handler(ext)(indent=self.indent)
        try:
            data = handler.read(input_path)
        except (ValueError, yaml.YAMLError) as e:
            raise TransformationError(f"Cannot parse {input_path.name}: {e}") from e

        if not data:
            raise TransformationError("Input file contains no document")
        if not isinstance(data, dict):
            raise TransformationError(
                f"Expected a tree object in {input_path.name}, "
                f"got {type(data).__name__}"
            )

        logger.debug("Loaded %s", input_path)
        return data

    def _write(self, data: dict[str, Any], output_path: Path) -> None:
        ext = output_path.suffix.lower()
        if ext not in SUPPORTED_EXTENSIONS:
            raise TransformationError(f"Unsupported output format: {ext}")
        handler = get_handler(ext)(indent=self.indent)
        handler.write(data, output_path)
        logger.debug("Wrote %s", output_path)
