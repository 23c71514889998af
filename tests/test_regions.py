"""
Tests for resolving absolute display regions.

Run with: pytest tests/test_regions.py -v
"""
import json

import pytest

from memory_reading.core.models import (
    ChildWithoutRegion,
    ChildWithRegion,
    DisplayRegion,
    RawNode,
)
from memory_reading.parsing.decoder import decode_tree
from memory_reading.parsing.regions import read_relative_region, resolve_regions


def _resolve(node):
    return resolve_regions(decode_tree(json.dumps(node)))


# =============================================================================
# Root Region
# =============================================================================

class TestRootRegion:
    """Tests for the region of the root node."""

    def test_root_uses_own_coordinates(self, make_node):
        """Test that the root's coordinates are taken as absolute."""
        tree = _resolve(make_node("UIRoot", region=(10, 20, 100, 50)))
        assert tree.region == DisplayRegion(x=10, y=20, width=100, height=50)

    def test_root_without_coordinates_is_zero(self, make_node):
        """Test that a root without coordinates gets a zero region."""
        tree = _resolve(make_node("UIRoot", children=[make_node("Child", region=(5, 6, 7, 8))]))

        assert tree.region == DisplayRegion(x=0, y=0, width=0, height=0)
        assert tree.children_with_region()[0].region == DisplayRegion(x=5, y=6, width=7, height=8)


# =============================================================================
# Offset Inheritance
# =============================================================================

class TestOffsetInheritance:
    """Tests for adding parent origins to child offsets."""

    def test_child_offset_is_added_to_parent_origin(self, make_node):
        """Test the basic offset inheritance case."""
        tree = _resolve(make_node(
            "UIRoot",
            region=(10, 20, 100, 50),
            children=[make_node("Child", region=(5, -3, 10, 10))],
        ))

        child = tree.children_with_region()[0]
        assert child.region == DisplayRegion(x=15, y=17, width=10, height=10)

    def test_offsets_accumulate_over_generations(self, make_node):
        """Test that origins accumulate down the tree but sizes do not."""
        tree = _resolve(make_node("L0", region=(100, 100, 800, 600), children=[
            make_node("L1", region=(10, 20, 300, 200), children=[
                make_node("L2", region=(1, 2, 30, 40)),
            ]),
        ]))

        l2 = tree.children_with_region()[0].children_with_region()[0]
        assert l2.region == DisplayRegion(x=111, y=122, width=30, height=40)

    def test_wide_numerals_are_truncated(self, make_node):
        """Test that 64-bit coordinate words are read as 32-bit integers."""
        node = make_node("UIRoot", region=(0, 0, 10, 10), children=[
            make_node("Child", region=(2 ** 64 - 5, 4294967295, 10, 2 ** 32 + 20)),
        ])
        child = _resolve(node).children_with_region()[0]
        assert child.region == DisplayRegion(x=-5, y=-1, width=10, height=20)

    def test_integral_float_coordinates_are_read(self, make_node):
        """Test that 12.0 is read like 12."""
        node = make_node("UIRoot", children=[make_node("Child", region=(12.0, 3, 4, 5))])
        child = _resolve(node).children_with_region()[0]
        assert child.region.x == 12


# =============================================================================
# Nodes Without Region
# =============================================================================

class TestRegionlessNodes:
    """Tests for nodes whose coordinates cannot be read."""

    def test_missing_coordinate_makes_child_regionless(self, make_node):
        """Test that a child missing one coordinate has no region."""
        child = make_node("Child", displayX=1, displayY=2, displayWidth=3)
        tree = _resolve(make_node("UIRoot", children=[child]))

        assert len(tree.children) == 1
        assert isinstance(tree.children[0], ChildWithoutRegion)
        assert tree.children[0].raw.type_name == "Child"

    def test_unreadable_coordinate_makes_child_regionless(self, make_node):
        """Test that a non-integer coordinate value degrades only that node."""
        tree = _resolve(make_node("UIRoot", children=[
            make_node("Bad", displayX="12", displayY=0, displayWidth=1, displayHeight=1),
            make_node("Good", region=(1, 1, 1, 1)),
        ]))

        assert isinstance(tree.children[0], ChildWithoutRegion)
        assert isinstance(tree.children[1], ChildWithRegion)
        assert tree.children[1].node.type_name == "Good"

    def test_nested_huge_numeral_makes_child_regionless(self):
        """Test that a coordinate holding an array of a huge integer degrades only that node."""
        huge = "9" * 5000
        text = (
            '{"nativeObjectAddress": 1, "attributesOfInterest": {}, "children": ['
            '{"nativeObjectAddress": 2, "nativeObjectTypeName": "Bad", "attributesOfInterest": '
            '{"displayX": [' + huge + '], "displayY": 0, "displayWidth": 1, "displayHeight": 1}},'
            '{"nativeObjectAddress": 3, "nativeObjectTypeName": "Good", "attributesOfInterest": '
            '{"displayX": 1, "displayY": 1, "displayWidth": 1, "displayHeight": 1}}]}'
        )
        tree = resolve_regions(decode_tree(text))

        assert isinstance(tree.children[0], ChildWithoutRegion)
        assert tree.children[1].node.type_name == "Good"

    def test_regionless_node_prunes_its_subtree(self, make_node):
        """Test that children of a regionless node are not reachable in the region tree."""
        tree = _resolve(make_node("UIRoot", region=(0, 0, 100, 100), children=[
            make_node("Wrapper", children=[
                make_node("Inner", region=(1, 1, 1, 1)),
            ]),
        ]))

        assert tree.children_with_region() == []
        assert [node.type_name for node in tree.iter_descendants()] == []
        # The raw subtree still has the inner node.
        wrapper = tree.children_without_region()[0]
        assert wrapper.children[0].type_name == "Inner"

    def test_child_slots_keep_input_order(self, make_node):
        """Test that regioned and regionless children stay in array order."""
        tree = _resolve(make_node("UIRoot", children=[
            make_node("A", region=(0, 0, 1, 1)),
            make_node("B"),
            make_node("C", region=(0, 0, 1, 1)),
        ]))

        kinds = [type(slot) for slot in tree.children]
        assert kinds == [ChildWithRegion, ChildWithoutRegion, ChildWithRegion]

    def test_read_relative_region_reports_none(self, make_node):
        """Test the relative region reader directly."""
        raw = decode_tree(json.dumps(make_node("X", displayX=None, displayY=0, displayWidth=0, displayHeight=0)))
        assert read_relative_region(raw) is None


# =============================================================================
# Traversal
# =============================================================================

class TestRegionTraversal:
    """Tests for walking the region tree."""

    def test_iter_descendants_is_preorder(self, make_node):
        """Test that descendants come depth-first, parents before children."""
        tree = _resolve(make_node("Root", children=[
            make_node("A", region=(0, 0, 1, 1), children=[
                make_node("A1", region=(0, 0, 1, 1)),
                make_node("A2", region=(0, 0, 1, 1)),
            ]),
            make_node("B", region=(0, 0, 1, 1)),
        ]))

        assert [node.type_name for node in tree.iter_descendants()] == ["A", "A1", "A2", "B"]

    def test_address_is_never_altered(self, make_node):
        """Test that node addresses pass through resolution untouched."""
        text = json.dumps(make_node("Root", address="1234567890123456789"))
        text = text.replace('"1234567890123456789"', "1234567890123456789")
        tree = resolve_regions(decode_tree(text))
        assert tree.address == "1234567890123456789"

    @pytest.mark.slow
    def test_deep_chain_is_resolved(self):
        """Test resolving a chain thousands of nodes deep, ending in a regionless leaf."""
        depth = 3000
        coordinates = {"displayX": 1, "displayY": 2, "displayWidth": 5, "displayHeight": 5}
        node = RawNode(address="leaf", type_name="Leaf", attributes={})
        for level in range(depth):
            node = RawNode(
                address=str(level), type_name="Container", attributes=coordinates, children=(node,)
            )

        tree = resolve_regions(node)

        chain = list(tree.iter_descendants())
        assert len(chain) == depth - 1
        assert chain[-1].region == DisplayRegion(x=depth, y=2 * depth, width=5, height=5)
        assert chain[-1].children_without_region()[0].type_name == "Leaf"
