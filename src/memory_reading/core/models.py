"""
Memory Reading Models - Data classes for the node tree and the parsed snapshot.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from memory_reading.core.visibility import Visibility

# Attributes holding the text a UI element renders, in preference order.
DISPLAY_TEXT_ATTRIBUTES: Tuple[str, ...] = ("_setText", "_text")


@dataclass(frozen=True)
class RawNode:
    """
    One object from the inspected process, as decoded from the snapshot.

    ``children`` is None when the snapshot has no children entry (or null)
    and an empty tuple when it lists none.
    """

    address: str
    type_name: str
    attributes: Dict[str, Any]
    children: Optional[Tuple["RawNode", ...]] = None
    payload: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def child_nodes(self) -> Tuple["RawNode", ...]:
        return self.children or ()

    def iter_descendants(self) -> Iterator["RawNode"]:
        """Yield all descendants depth-first, pre-order, excluding this node."""
        stack: List[RawNode] = list(reversed(self.child_nodes))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.child_nodes))

    def count_nodes(self) -> int:
        return 1 + sum(1 for _ in self.iter_descendants())

    def display_text(self) -> Optional[str]:
        """Longest of the text attributes that hold a string, or None."""
        texts = [
            value for value in (self.attributes.get(name) for name in DISPLAY_TEXT_ATTRIBUTES)
            if isinstance(value, str)
        ]
        if not texts:
            return None
        return max(texts, key=len)

    def all_display_texts(self) -> List[str]:
        """Display texts of this node and its descendants, in traversal order."""
        texts = []
        for node in (self, *self.iter_descendants()):
            text = node.display_text()
            if text is not None:
                texts.append(text)
        return texts


@dataclass(frozen=True)
class DisplayRegion:
    """Absolute on-screen rectangle in pixels."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def center(self) -> Tuple[int, int]:
        return (self.x + self.width // 2, self.y + self.height // 2)

    def contains_point(self, x: int, y: int) -> bool:
        return self.x <= x <= self.right and self.y <= y <= self.bottom

    def overlaps(self, other: DisplayRegion) -> bool:
        return (self.x < other.right and self.right > other.x
                and self.y < other.bottom and self.bottom > other.y)

    def area(self) -> int:
        return self.width * self.height


ZERO_REGION = DisplayRegion(x=0, y=0, width=0, height=0)


@dataclass(frozen=True)
class ChildWithRegion:
    node: "RegionNode"


@dataclass(frozen=True)
class ChildWithoutRegion:
    raw: RawNode


ChildSlot = Union[ChildWithRegion, ChildWithoutRegion]


@dataclass(frozen=True)
class RegionNode:
    """A raw node together with its resolved absolute display region."""

    raw: RawNode
    region: DisplayRegion
    children: Tuple[ChildSlot, ...] = ()

    @property
    def type_name(self) -> str:
        return self.raw.type_name

    @property
    def address(self) -> str:
        return self.raw.address

    def children_with_region(self) -> List[RegionNode]:
        return [child.node for child in self.children if isinstance(child, ChildWithRegion)]

    def children_without_region(self) -> List[RawNode]:
        return [child.raw for child in self.children if isinstance(child, ChildWithoutRegion)]

    def iter_descendants(self) -> Iterator[RegionNode]:
        """
        Yield region-bearing descendants depth-first, pre-order, excluding this node.

        Children without a region are skipped together with everything below them.
        """
        stack: List[RegionNode] = list(reversed(self.children_with_region()))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children_with_region()))


class ManeuverKind(Enum):
    WARP = "Warp"
    JUMP = "Jump"
    ORBIT = "Orbit"
    APPROACH = "Approach"


@dataclass(frozen=True)
class ShipIndication:
    maneuver: Visibility[ManeuverKind]


@dataclass(frozen=True)
class ShipStatus:
    element: RegionNode
    indication: Visibility[ShipIndication]


@dataclass(frozen=True)
class ContextMenuEntry:
    element: RegionNode
    label: str


@dataclass(frozen=True)
class ContextMenu:
    element: RegionNode
    entries: Tuple[ContextMenuEntry, ...]


@dataclass(frozen=True)
class RouteMarker:
    element: RegionNode


@dataclass(frozen=True)
class RouteIndicator:
    markers: Tuple[RouteMarker, ...]


@dataclass(frozen=True)
class Snapshot:
    """
    Parsed view of one UI tree capture.

    This is the primary interface between the memory reading and the agent
    acting on it. Every part is read-only.
    """

    tree: RegionNode
    ship: Visibility[ShipStatus]
    context_menus: Tuple[ContextMenu, ...]
    route: Visibility[RouteIndicator]

    @property
    def raw_root(self) -> RawNode:
        return self.tree.raw

    def find_by_type(self, type_name: str) -> List[RegionNode]:
        """Region-bearing nodes with exactly this type name, root first if it matches."""
        return [
            node for node in (self.tree, *self.tree.iter_descendants())
            if node.type_name == type_name
        ]
