"""
Tree Decoder - Turns snapshot JSON text into a RawNode tree.

Every node object in the snapshot has the shape::

    {
        "nativeObjectAddress": 2208521737744 | "2208521737744",
        "nativeObjectTypeName": "ShipUI",           (optional)
        "attributesOfInterest": {...},
        "children": [...] | null                    (optional)
    }
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from memory_reading.core.errors import DecodeSchemaError, DecodeSyntaxError, InvalidEncoding
from memory_reading.core.integers import decimal_to_int
from memory_reading.core.models import RawNode

logger = logging.getLogger("memory_reading")

ADDRESS_FIELD = "nativeObjectAddress"
TYPE_NAME_FIELD = "nativeObjectTypeName"
ATTRIBUTES_FIELD = "attributesOfInterest"
CHILDREN_FIELD = "children"

ROOT_PATH = "$"


class SourceInt(int):
    """
    A JSON integer that remembers the exact text it was parsed from.

    Digits are converted in chunks, so numerals longer than the
    interpreter's int() digit limit still decode.
    """

    source: str

    def __new__(cls, text: str) -> "SourceInt":
        is_negative = text.startswith("-")
        magnitude = decimal_to_int(text[1:] if is_negative else text)
        value = super().__new__(cls, -magnitude if is_negative else magnitude)
        value.source = text
        return value

    def __repr__(self) -> str:
        return self.source

    __str__ = __repr__


class SourceFloat(float):
    """A JSON float that remembers the exact text it was parsed from."""

    source: str

    def __new__(cls, text: str) -> "SourceFloat":
        value = super().__new__(cls, text)
        value.source = text
        return value


@dataclass
class _PendingNode:
    """A validated node whose children are still being decoded."""

    value: Dict[str, Any]
    path: str
    address: str
    type_name: str
    attributes: Dict[str, Any]
    raw_children: Optional[List[Any]]
    children: List[RawNode] = field(default_factory=list)

    @property
    def next_child_index(self) -> Optional[int]:
        if self.raw_children is None or len(self.children) == len(self.raw_children):
            return None
        return len(self.children)

    def build(self) -> RawNode:
        return RawNode(
            address=self.address,
            type_name=self.type_name,
            attributes=self.attributes,
            children=None if self.raw_children is None else tuple(self.children),
            payload=self.value,
        )


def decode_tree(json_text: str) -> RawNode:
    """
    Decode a snapshot into its root RawNode.

    The whole tree is materialized before returning.

    Args:
        json_text: The snapshot JSON text.

    Returns:
        The root node.

    Raises:
        DecodeSyntaxError: If the text is not well-formed JSON.
        DecodeSchemaError: If a node lacks a required field or has a field
            of the wrong shape.
    """
    try:
        document = json.loads(json_text, parse_int=SourceInt, parse_float=SourceFloat)
    except json.JSONDecodeError as e:
        raise DecodeSyntaxError(
            f"Malformed JSON: {e.msg} at line {e.lineno} column {e.colno}",
            line=e.lineno,
            column=e.colno,
            position=e.pos,
        ) from e
    except RecursionError as e:
        raise DecodeSyntaxError("Malformed JSON: nesting is too deep") from e

    root = _decode_nodes(document)
    logger.debug(f"Decoded snapshot with {root.count_nodes()} nodes")
    return root


def _decode_nodes(document: Any) -> RawNode:
    """
    Build the node tree bottom-up with an explicit stack.

    Nodes are validated in pre-order, so the first malformed node in
    document order is the one reported.
    """
    stack = [_pending_node(document, ROOT_PATH)]
    while True:
        top = stack[-1]
        index = top.next_child_index
        if index is not None:
            child_path = f"{top.path}.{CHILDREN_FIELD}[{index}]"
            stack.append(_pending_node(top.raw_children[index], child_path))
            continue

        stack.pop()
        node = top.build()
        if not stack:
            return node
        stack[-1].children.append(node)


def _pending_node(value: Any, path: str) -> _PendingNode:
    if not isinstance(value, dict):
        raise DecodeSchemaError(
            f"Expected a node object, got {_json_type_name(value)}", path=path
        )

    if ADDRESS_FIELD not in value:
        raise DecodeSchemaError(
            f"Missing required field '{ADDRESS_FIELD}'", field=ADDRESS_FIELD, path=path
        )
    address = _address_text(value[ADDRESS_FIELD], path)

    type_name = value.get(TYPE_NAME_FIELD, "")
    if not isinstance(type_name, str):
        raise DecodeSchemaError(
            f"Field '{TYPE_NAME_FIELD}' must be a string, got {_json_type_name(type_name)}",
            field=TYPE_NAME_FIELD,
            path=path,
        )

    if ATTRIBUTES_FIELD not in value:
        raise DecodeSchemaError(
            f"Missing required field '{ATTRIBUTES_FIELD}'", field=ATTRIBUTES_FIELD, path=path
        )
    attributes = value[ATTRIBUTES_FIELD]
    if not isinstance(attributes, dict):
        raise DecodeSchemaError(
            f"Field '{ATTRIBUTES_FIELD}' must be an object, got {_json_type_name(attributes)}",
            field=ATTRIBUTES_FIELD,
            path=path,
        )

    raw_children = value.get(CHILDREN_FIELD)
    if raw_children is not None and not isinstance(raw_children, list):
        raise DecodeSchemaError(
            f"Field '{CHILDREN_FIELD}' must be an array or null, got {_json_type_name(raw_children)}",
            field=CHILDREN_FIELD,
            path=path,
        )

    return _PendingNode(
        value=value,
        path=path,
        address=address,
        type_name=type_name,
        attributes=attributes,
        raw_children=raw_children,
    )


def _address_text(value: Any, path: str) -> str:
    """Exact text of the address, without passing it through a fixed-width number."""
    if isinstance(value, str):
        return value
    if isinstance(value, (SourceInt, SourceFloat)):
        return value.source
    # bool is an int subclass but never a valid address
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    raise DecodeSchemaError(
        f"Field '{ADDRESS_FIELD}' must be a number or string, got {_json_type_name(value)}",
        field=ADDRESS_FIELD,
        path=path,
    )


def _json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def compact_json(value: Any) -> str:
    """Compact JSON text of a decoded value, as a JavaScript encoder would write it."""
    if isinstance(value, SourceInt):
        return value.source
    try:
        return json.dumps(_normalize_numbers(value), separators=(",", ":"), ensure_ascii=False)
    except (ValueError, RecursionError) as e:
        # Nested integers past the digit limit, or nesting past the recursion limit.
        raise InvalidEncoding(f"Value has no compact JSON encoding: {e}") from e


def _normalize_numbers(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, list):
        return [_normalize_numbers(item) for item in value]
    if isinstance(value, dict):
        return {key: _normalize_numbers(item) for key, item in value.items()}
    return value
