import os
import sys

import pytest

# Ensure the project root is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from truck_loader.models import Container, Item


@pytest.fixture
def truck_20():
    """The 20 m³ preset interior, volume from its dimensions."""
    return Container("Truck 20 m³", L=4.2, W=2.1, H=2.3, payload_kg=3500.0)


@pytest.fixture
def stacking_setup():
    """Four items where the last one can only go on top of `item1`.

    Container x runs from -2 to 2. `wall` fills x in [-2, 0], `item1` sits at
    x in [0, 1], `filler` at x in [1, 2]. The leftover spaces above item1 and
    filler are 1 m wide, too narrow for the 1.8 m long `item2`.
    """
    container = Container("stack-test", L=4.0, W=1.0, H=2.0)
    wall = Item("wall", L=2.0, W=1.0, H=2.0, weight=10, fragile=True, name="Wall")
    item1 = Item("item1", L=1.0, W=1.0, H=1.2, weight=40, name="Item 1")
    filler = Item("filler", L=1.0, W=1.0, H=1.1, weight=10, fragile=True, name="Filler")
    return container, wall, item1, filler
