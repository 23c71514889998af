"""
Memory Reading Parser - Typed UI model from a game client's memory snapshot.

This package turns the JSON UI tree captured from a running client into
UI elements with absolute screen regions, plus the features an automation
agent looks for: ship status, open context menus, and the route indicator.

Usage:
    from memory_reading import parse_snapshot, Visible

    snapshot = parse_snapshot(json_text)
    if isinstance(snapshot.ship, Visible):
        print(snapshot.ship.value.element.region)
    for menu in snapshot.context_menus:
        print([entry.label for entry in menu.entries])

For agent prompts:
    from memory_reading import serialize_snapshot

    output = serialize_snapshot(snapshot, max_lines=200)
    print(output.text)
"""
from memory_reading.config import ParserConfig, setup_logging
from memory_reading.core.errors import (
    DecodeError,
    DecodeSchemaError,
    DecodeSyntaxError,
    IntegerRecoveryError,
    InvalidEncoding,
    InvalidNumeral,
    MemoryReadingError,
)
from memory_reading.core.integers import int32_from_int64_numeral
from memory_reading.core.models import (
    ChildSlot,
    ChildWithoutRegion,
    ChildWithRegion,
    ContextMenu,
    ContextMenuEntry,
    DisplayRegion,
    ManeuverKind,
    RawNode,
    RegionNode,
    RouteIndicator,
    RouteMarker,
    ShipIndication,
    ShipStatus,
    Snapshot,
)
from memory_reading.core.serialization import ElementEntry, SerializedOutput, serialize_snapshot
from memory_reading.core.visibility import NOT_VISIBLE, NotVisible, Visibility, Visible
from memory_reading.parsing import (
    decode_tree,
    parse_context_menus,
    parse_route_indicator,
    parse_ship_status,
    parse_snapshot,
    resolve_regions,
)

__version__ = "0.1.0"

__all__ = [
    # Main API
    "parse_snapshot",
    "Snapshot",
    "ParserConfig",
    "setup_logging",
    # Pipeline stages
    "decode_tree",
    "resolve_regions",
    "parse_ship_status",
    "parse_context_menus",
    "parse_route_indicator",
    "int32_from_int64_numeral",
    # Tree
    "RawNode",
    "RegionNode",
    "DisplayRegion",
    "ChildSlot",
    "ChildWithRegion",
    "ChildWithoutRegion",
    # Features
    "Visible",
    "NotVisible",
    "NOT_VISIBLE",
    "Visibility",
    "ShipStatus",
    "ShipIndication",
    "ManeuverKind",
    "ContextMenu",
    "ContextMenuEntry",
    "RouteIndicator",
    "RouteMarker",
    # Serialization
    "ElementEntry",
    "SerializedOutput",
    "serialize_snapshot",
    # Errors
    "MemoryReadingError",
    "DecodeError",
    "DecodeSyntaxError",
    "DecodeSchemaError",
    "IntegerRecoveryError",
    "InvalidNumeral",
    "InvalidEncoding",
    # Version
    "__version__",
]
