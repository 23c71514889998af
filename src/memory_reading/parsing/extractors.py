"""
Domain Extractors - Read named UI features out of a resolved region tree.

Each extractor is an independent read-only query. Type name constants are
the class names the game client uses for these UI elements.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from memory_reading.core.models import (
    ContextMenu,
    ContextMenuEntry,
    ManeuverKind,
    RawNode,
    RegionNode,
    RouteIndicator,
    RouteMarker,
    ShipIndication,
    ShipStatus,
)
from memory_reading.core.visibility import NOT_VISIBLE, Visibility, Visible

logger = logging.getLogger("memory_reading")

SHIP_UI_TYPE = "ShipUI"
INDICATION_CONTAINER_NAME = "indicationcontainer"
NAME_ATTRIBUTE = "_name"

CONTEXT_MENU_LAYER_TYPE = "l_menu"
CONTEXT_MENU_TYPE_FRAGMENT = "menu"
CONTEXT_MENU_ENTRY_TYPE_FRAGMENT = "menuentry"

ROUTE_PANEL_TYPE = "InfoPanelRoute"
ROUTE_MARKER_TYPE = "AutopilotDestinationIcon"

# Checked in this order; the first keyword found in any text wins.
MANEUVER_KEYWORDS: Tuple[Tuple[str, ManeuverKind], ...] = (
    ("Warp", ManeuverKind.WARP),
    ("Jump", ManeuverKind.JUMP),
    ("Orbit", ManeuverKind.ORBIT),
    ("Approach", ManeuverKind.APPROACH),
)


# =============================================================================
# Ship Status
# =============================================================================

def parse_ship_status(tree: RegionNode) -> Visibility[ShipStatus]:
    ship_node = _first_descendant_of_type(tree, SHIP_UI_TYPE)
    if ship_node is None:
        logger.debug("No ShipUI in snapshot")
        return NOT_VISIBLE

    return Visible(ShipStatus(
        element=ship_node,
        indication=parse_ship_indication(ship_node.raw),
    ))


def parse_ship_indication(ship_raw: RawNode) -> Visibility[ShipIndication]:
    """
    Find the indication container below the ship UI and read the maneuver.

    The search uses the raw subtree, so containers without a display region
    are found as well.
    """
    container = next(
        (node for node in ship_raw.iter_descendants() if _is_indication_container(node)),
        None,
    )
    if container is None:
        return NOT_VISIBLE

    return Visible(ShipIndication(maneuver=maneuver_from_texts(container.all_display_texts())))


def maneuver_from_texts(texts: List[str]) -> Visibility[ManeuverKind]:
    for keyword, maneuver in MANEUVER_KEYWORDS:
        if any(keyword in text for text in texts):
            return Visible(maneuver)
    return NOT_VISIBLE


def _is_indication_container(node: RawNode) -> bool:
    name = node.attributes.get(NAME_ATTRIBUTE)
    return isinstance(name, str) and INDICATION_CONTAINER_NAME in name.lower()


# =============================================================================
# Context Menus
# =============================================================================

def parse_context_menus(tree: RegionNode) -> Tuple[ContextMenu, ...]:
    layer = next(
        (child for child in tree.children_with_region()
         if child.type_name.lower() == CONTEXT_MENU_LAYER_TYPE),
        None,
    )
    if layer is None:
        return ()

    menus = tuple(
        parse_context_menu(child) for child in layer.children_with_region()
        if CONTEXT_MENU_TYPE_FRAGMENT in child.type_name.lower()
    )
    logger.debug(f"Found {len(menus)} open context menus")
    return menus


def parse_context_menu(menu_node: RegionNode) -> ContextMenu:
    entries = [
        ContextMenuEntry(element=node, label=entry_label(node))
        for node in menu_node.iter_descendants()
        if CONTEXT_MENU_ENTRY_TYPE_FRAGMENT in node.type_name.lower()
    ]
    entries.sort(key=lambda entry: entry.element.region.y)
    return ContextMenu(element=menu_node, entries=tuple(entries))


def entry_label(entry_node: RegionNode) -> str:
    """Longest display text in the entry's subtree, first one on ties."""
    texts = entry_node.raw.all_display_texts()
    if not texts:
        return ""
    return max(texts, key=len)


# =============================================================================
# Route Indicator
# =============================================================================

def parse_route_indicator(tree: RegionNode) -> Visibility[RouteIndicator]:
    panel = _first_descendant_of_type(tree, ROUTE_PANEL_TYPE)
    if panel is None:
        return NOT_VISIBLE

    markers = tuple(
        RouteMarker(element=node) for node in panel.iter_descendants()
        if node.type_name == ROUTE_MARKER_TYPE
    )
    logger.debug(f"Route panel shows {len(markers)} destination markers")
    return Visible(RouteIndicator(markers=markers))


def _first_descendant_of_type(tree: RegionNode, type_name: str) -> Optional[RegionNode]:
    return next((node for node in tree.iter_descendants() if node.type_name == type_name), None)
