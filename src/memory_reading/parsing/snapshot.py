"""
Snapshot Assembler - The public entry point from JSON text to a Snapshot.
"""
from __future__ import annotations

import logging

from memory_reading.core.errors import DecodeError
from memory_reading.core.models import Snapshot
from memory_reading.parsing.decoder import decode_tree
from memory_reading.parsing.extractors import (
    parse_context_menus,
    parse_route_indicator,
    parse_ship_status,
)
from memory_reading.parsing.regions import resolve_regions

logger = logging.getLogger("memory_reading")


def parse_snapshot(json_text: str) -> Snapshot:
    """
    Parse one UI tree capture into a Snapshot.

    Args:
        json_text: The JSON text of the captured UI tree.

    Returns:
        A complete Snapshot. Nodes with unreadable coordinates are kept as
        children without region instead of failing the call.

    Raises:
        DecodeSyntaxError: If the text is not well-formed JSON.
        DecodeSchemaError: If a node has a missing or malformed field.
    """
    try:
        raw_root = decode_tree(json_text)
    except DecodeError as e:
        logger.warning(f"Failed to decode UI tree: {e}")
        raise

    tree = resolve_regions(raw_root)
    return Snapshot(
        tree=tree,
        ship=parse_ship_status(tree),
        context_menus=parse_context_menus(tree),
        route=parse_route_indicator(tree),
    )
