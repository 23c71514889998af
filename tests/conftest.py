"""
Pytest configuration and shared fixtures.
"""
import json
import os
import sys
from itertools import count

import pytest

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))


_addresses = count(2208521737744)


def ui_node(type_name=None, region=None, children=None, address=None, **attributes):
    """
    Build one node object in the memory reading JSON shape.

    ``region`` is an (x, y, width, height) tuple of relative coordinates.
    Extra keyword arguments become attributes of interest.
    """
    attrs = dict(attributes)
    if region is not None:
        x, y, width, height = region
        attrs.update(displayX=x, displayY=y, displayWidth=width, displayHeight=height)

    node = {
        "nativeObjectAddress": address if address is not None else str(next(_addresses)),
        "attributesOfInterest": attrs,
    }
    if type_name is not None:
        node["nativeObjectTypeName"] = type_name
    if children is not None:
        node["children"] = children
    return node


def ui_tree_json(root):
    return json.dumps(root)


@pytest.fixture
def make_node():
    """Factory for node objects, see ``ui_node``."""
    return ui_node


@pytest.fixture
def sample_tree():
    """A small capture with a ship UI, one context menu, and a route panel."""
    return ui_node(
        "UIRoot",
        region=(0, 0, 1920, 1080),
        children=[
            ui_node("ShipUI", region=(700, 800, 500, 280), children=[
                ui_node("Container", region=(10, 10, 300, 40), _name="indicationContainer", children=[
                    ui_node("EveLabelMedium", region=(0, 0, 200, 20), _setText="Warping"),
                ]),
            ]),
            ui_node("l_menu", region=(0, 0, 1920, 1080), children=[
                ui_node("ContextMenu", region=(300, 200, 180, 90), children=[
                    ui_node("MenuEntryView", region=(0, 30, 180, 20), _text="Approach"),
                    ui_node("MenuEntryView", region=(0, 0, 180, 20), _text="Warp to Within 0 m"),
                ]),
            ]),
            ui_node("InfoPanelContainer", region=(0, 100, 300, 400), children=[
                ui_node("InfoPanelRoute", region=(0, 0, 300, 100), children=[
                    ui_node("AutopilotDestinationIcon", region=(10, 40, 8, 8)),
                    ui_node("AutopilotDestinationIcon", region=(20, 40, 8, 8)),
                ]),
            ]),
        ],
    )


def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )
