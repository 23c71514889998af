"""
Region Resolver - Annotates the node tree with absolute display regions.

Coordinate attributes of a node are offsets from its parent's origin. A node
whose four coordinates cannot all be read becomes a child without region and
its subtree is not resolved.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from memory_reading.core.errors import IntegerRecoveryError
from memory_reading.core.integers import int32_from_int64_numeral
from memory_reading.core.models import (
    ZERO_REGION,
    ChildSlot,
    ChildWithoutRegion,
    ChildWithRegion,
    DisplayRegion,
    RawNode,
    RegionNode,
)
from memory_reading.parsing.decoder import compact_json

logger = logging.getLogger("memory_reading")

REGION_ATTRIBUTES: Tuple[str, ...] = ("displayX", "displayY", "displayWidth", "displayHeight")


@dataclass
class _PendingRegionNode:
    """A node with a resolved region whose child slots are still being filled."""

    raw: RawNode
    region: DisplayRegion
    slots: List[ChildSlot] = field(default_factory=list)

    def next_child(self) -> Optional[RawNode]:
        children = self.raw.child_nodes
        if len(self.slots) == len(children):
            return None
        return children[len(self.slots)]

    def build(self) -> RegionNode:
        return RegionNode(raw=self.raw, region=self.region, children=tuple(self.slots))


def resolve_regions(root: RawNode) -> RegionNode:
    """
    Resolve the tree below ``root`` into absolute display regions.

    The root's own coordinates are taken as absolute, or zero if unreadable.
    The tree is built bottom-up with an explicit stack, so its depth is not
    bounded by the recursion limit.
    """
    stack = [_PendingRegionNode(raw=root, region=read_relative_region(root) or ZERO_REGION)]
    while True:
        top = stack[-1]
        child = top.next_child()
        if child is not None:
            absolute = _absolute_region(child, top.region)
            if absolute is None:
                top.slots.append(ChildWithoutRegion(raw=child))
            else:
                stack.append(_PendingRegionNode(raw=child, region=absolute))
            continue

        stack.pop()
        node = top.build()
        if not stack:
            return node
        stack[-1].slots.append(ChildWithRegion(node=node))


def read_relative_region(node: RawNode) -> Optional[DisplayRegion]:
    """
    Read the node's coordinates as they are stored, relative to its parent.

    Returns None if any of the four attributes is missing or cannot be
    recovered as a 32-bit integer.
    """
    values: Dict[str, int] = {}
    for name in REGION_ATTRIBUTES:
        if name not in node.attributes:
            logger.debug(f"Node {node.address} ({node.type_name}) has no '{name}'")
            return None
        try:
            values[name] = int32_from_int64_numeral(compact_json(node.attributes[name]))
        except IntegerRecoveryError as e:
            logger.debug(f"Node {node.address} ({node.type_name}) has unreadable '{name}': {e}")
            return None

    return DisplayRegion(
        x=values["displayX"],
        y=values["displayY"],
        width=values["displayWidth"],
        height=values["displayHeight"],
    )


def _absolute_region(node: RawNode, parent: DisplayRegion) -> Optional[DisplayRegion]:
    relative = read_relative_region(node)
    if relative is None:
        return None

    # Only the origin is inherited; width and height are sizes, not offsets.
    return DisplayRegion(
        x=parent.x + relative.x,
        y=parent.y + relative.y,
        width=relative.width,
        height=relative.height,
    )
