"""
Core module - Data models, errors, integer recovery, and serialization.
"""
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

__all__ = [
    "DecodeError",
    "DecodeSchemaError",
    "DecodeSyntaxError",
    "IntegerRecoveryError",
    "InvalidEncoding",
    "InvalidNumeral",
    "MemoryReadingError",
    "int32_from_int64_numeral",
    "ChildSlot",
    "ChildWithoutRegion",
    "ChildWithRegion",
    "ContextMenu",
    "ContextMenuEntry",
    "DisplayRegion",
    "ManeuverKind",
    "RawNode",
    "RegionNode",
    "RouteIndicator",
    "RouteMarker",
    "ShipIndication",
    "ShipStatus",
    "Snapshot",
    "ElementEntry",
    "SerializedOutput",
    "serialize_snapshot",
    "NOT_VISIBLE",
    "NotVisible",
    "Visibility",
    "Visible",
]
