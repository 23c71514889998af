"""
Parsing module - JSON decoding, region resolution, and feature extraction.
"""
from memory_reading.parsing.decoder import decode_tree
from memory_reading.parsing.extractors import (
    parse_context_menus,
    parse_route_indicator,
    parse_ship_status,
)
from memory_reading.parsing.regions import resolve_regions
from memory_reading.parsing.snapshot import parse_snapshot

__all__ = [
    "decode_tree",
    "parse_context_menus",
    "parse_route_indicator",
    "parse_ship_status",
    "resolve_regions",
    "parse_snapshot",
]
