"""Structured scene tree used for every graphic the package emits.

Nodes carry a tag, an attribute mapping (SVG attribute names as keys) and
children. Builders return trees so callers and tests can inspect structure
directly; :meth:`SceneNode.to_svg` produces markup only at the edge.
"""

import html
import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Set, Tuple

_URL_REF = re.compile(r"url\(#([^)]+)\)")


@dataclass(frozen=True)
class SceneNode:
    """A graphics primitive: tag, attributes and child nodes."""

    tag: str
    attributes: Mapping[str, Any] = field(default_factory=dict)
    children: Tuple["SceneNode", ...] = ()

    def iter_nodes(self) -> Iterator["SceneNode"]:
        """Yield this node and all descendants, depth-first in document order."""
        yield self
        for child in self.children:
            yield from child.iter_nodes()

    def find_all(self, tag: str) -> List["SceneNode"]:
        """Return all nodes in this subtree with the given tag."""
        return [node for node in self.iter_nodes() if node.tag == tag]

    def find(self, tag: str) -> Optional["SceneNode"]:
        """Return the first node in this subtree with the given tag, or None."""
        for node in self.iter_nodes():
            if node.tag == tag:
                return node
        return None

    def get(self, name: str, default: Any = None) -> Any:
        """Return an attribute value."""
        return self.attributes.get(name, default)

    def to_svg(self) -> str:
        """Serialize the subtree as SVG markup."""
        attrs = "".join(
            f' {name}="{html.escape(format_value(value), quote=True)}"'
            for name, value in self.attributes.items()
            if value is not None
        )
        if not self.children:
            return f"<{self.tag}{attrs}/>"
        inner = "".join(child.to_svg() for child in self.children)
        return f"<{self.tag}{attrs}>{inner}</{self.tag}>"


def element(
    tag: str,
    attributes: Optional[Dict[str, Any]] = None,
    children: Sequence[SceneNode] = (),
) -> SceneNode:
    """Build a SceneNode from a dict of attributes and any sequence of children."""
    return SceneNode(tag=tag, attributes=dict(attributes or {}), children=tuple(children))


def format_number(value: float) -> str:
    """
    Format a number compactly for markup, keeping ten significant digits.

    Examples:
        >>> format_number(25.0)
        '25'
        >>> format_number(0.1)
        '0.1'
        >>> format_number(1 / 3)
        '0.3333333333'
        >>> format_number(2e-7)
        '2e-07'
    """
    if not math.isfinite(value):
        return str(value)
    if value == int(value) and abs(value) < 1e15:
        return str(int(value))
    return format(value, ".10g")


def format_value(value: Any) -> str:
    """Format an attribute value; sequences become space-separated lists."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(float(value))
    if isinstance(value, (list, tuple)):
        return " ".join(format_value(item) for item in value)
    return str(value)


def collect_ids(node: SceneNode) -> Set[str]:
    """
    Collect every identifier a subtree defines or references.

    Includes ``id`` attributes, ``href`` / ``xlink:href`` fragment references
    and ``url(#...)`` references in any attribute.

    Args:
        node: Root of the subtree

    Returns:
        Set of identifier strings (without the leading '#')
    """
    identifiers: Set[str] = set()
    for current in node.iter_nodes():
        for name, value in current.attributes.items():
            if not isinstance(value, str):
                continue
            if name == "id":
                identifiers.add(value)
            elif name in ("href", "xlink:href") and value.startswith("#"):
                identifiers.add(value[1:])
            else:
                identifiers.update(_URL_REF.findall(value))
    return identifiers
