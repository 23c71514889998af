"""
Snapshot serialization utilities for turning a parsed Snapshot into
agent-friendly text plus an element map for resolving follow-up actions.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from memory_reading.core.models import ChildWithRegion, RawNode, RegionNode, Snapshot
from memory_reading.core.visibility import Visible


@dataclass(frozen=True)
class ElementEntry:
    """Lightweight metadata describing a numbered UI element."""

    address: str
    type_name: str
    region: Tuple[int, int, int, int]
    click_point: Tuple[int, int]
    display_text: str


@dataclass(frozen=True)
class SerializedOutput:
    """Result container for serialized snapshot state."""

    lines: List[str]
    element_map: Dict[int, ElementEntry]

    @property
    def text(self) -> str:
        """Convenience accessor returning the joined text representation."""
        return "\n".join(self.lines)


def describe_features(snapshot: Snapshot) -> List[str]:
    """One line each for the ship maneuver, context menus and route."""
    lines = []

    if isinstance(snapshot.ship, Visible):
        indication = snapshot.ship.value.indication
        if not isinstance(indication, Visible):
            lines.append("Ship: no indication")
        elif isinstance(indication.value.maneuver, Visible):
            lines.append(f"Ship: {indication.value.maneuver.value.value}")
        else:
            lines.append("Ship: no maneuver")
    else:
        lines.append("Ship: not visible")

    if snapshot.context_menus:
        for menu_index, menu in enumerate(snapshot.context_menus, start=1):
            labels = ", ".join(f'"{entry.label}"' for entry in menu.entries)
            lines.append(f"Context menu {menu_index}: {labels}")
    else:
        lines.append("Context menus: none")

    if isinstance(snapshot.route, Visible):
        lines.append(f"Route: {len(snapshot.route.value.markers)} markers")
    else:
        lines.append("Route: not visible")

    return lines


def serialize_snapshot(
    snapshot: Snapshot,
    *,
    max_lines: int = 400,
    max_text_length: int = 80,
    include_regionless: bool = False,
) -> SerializedOutput:
    """
    Serialize a snapshot to a compact, agent-friendly text representation.

    Args:
        snapshot: Parsed snapshot.
        max_lines: Maximum number of element lines to emit before truncating.
        max_text_length: Truncation threshold for display texts.
        include_regionless: Also list children that have no display region,
            without an index.

    Returns:
        SerializedOutput containing both the text lines and element map.
    """
    lines: List[str] = describe_features(snapshot)
    lines.append("")
    lines.append("=== UI Elements ===")
    element_map: Dict[int, ElementEntry] = {}

    def _truncate(value: str) -> str:
        value = value.strip()
        if len(value) <= max_text_length:
            return value
        return value[: max_text_length - 3] + "..."

    def _text_part(raw: RawNode) -> str:
        text = raw.display_text()
        return f' text="{_truncate(text)}"' if text else ""

    # (node, depth) pairs; regionless children are carried as RawNode
    stack: List[Tuple[object, int]] = [(snapshot.tree, 0)]
    emitted = 0
    remaining = 0

    while stack:
        item, depth = stack.pop()
        if emitted >= max_lines:
            if isinstance(item, RegionNode):
                remaining += 1 + sum(1 for _ in item.iter_descendants())
            continue

        indent = "  " * depth
        if isinstance(item, RawNode):
            lines.append(f"{indent}- <{item.type_name}> no region{_text_part(item)}")
            emitted += 1
            continue

        node: RegionNode = item
        index = len(element_map) + 1
        region = node.region
        element_map[index] = ElementEntry(
            address=node.address,
            type_name=node.type_name,
            region=(region.x, region.y, region.width, region.height),
            click_point=region.center(),
            display_text=node.raw.display_text() or "",
        )
        lines.append(
            f"{indent}[{index}] <{node.type_name}> "
            f"@({region.x},{region.y}) {region.width}x{region.height}{_text_part(node.raw)}"
        )
        emitted += 1

        children: List[Tuple[object, int]] = []
        for slot in node.children:
            if isinstance(slot, ChildWithRegion):
                children.append((slot.node, depth + 1))
            elif include_regionless:
                children.append((slot.raw, depth + 1))
        stack.extend(reversed(children))

    if remaining > 0:
        lines.append(f"... truncated {remaining} additional elements")

    return SerializedOutput(lines=lines, element_map=element_map)
