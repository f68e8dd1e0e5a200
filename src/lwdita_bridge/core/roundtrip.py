"""Round-trip verification of the forward and reverse transforms."""

import difflib
import json
from dataclasses import dataclass
from typing import Any, Optional

from lwdita_bridge.tree.ir import SourceNode
from lwdita_bridge.tree.schema import NodeSchema
from lwdita_bridge.transform.forward import to_editor_tree
from lwdita_bridge.transform.reverse import to_source_tree


@dataclass
class VerifyResult:
    passed: bool
    diff_report: str


def _normalize(data: dict[str, Any]) -> dict[str, Any]:
    """Drop empty attribute maps so ``{}`` and a missing map compare equal."""
    result = dict(data)
    if not result.get("attributes"):
        result.pop("attributes", None)
    if "children" in result:
        result["children"] = [_normalize(child) for child in result["children"]]
    return result


def _dump(node: SourceNode) -> str:
    return json.dumps(_normalize(node.to_dict()), indent=2, sort_keys=True)


def verify_roundtrip(
    source: SourceNode,
    schema: Optional[NodeSchema] = None,
) -> VerifyResult:
    """Check that a source document survives forward then reverse transform.

    Absent attribute values and empty attribute maps are ignored; any
    other difference, including attributes dropped by the reverse
    cleanup, fails the check.

    Args:
        source: The source document root
        schema: Schema lookups (defaults to the configured schema)

    Returns:
        VerifyResult: passed=True on a match, otherwise with a diff report
    """
    restored = to_source_tree(to_editor_tree(source, schema), schema)

    expected = _dump(source)
    actual = _dump(restored)
    if expected == actual:
        return VerifyResult(passed=True, diff_report="")

    diff = difflib.unified_diff(
        expected.splitlines(),
        actual.splitlines(),
        fromfile="expected (source tree)",
        tofile="actual (round-tripped tree)",
        lineterm="",
    )
    return VerifyResult(passed=False, diff_report="\n".join(diff))
