import pytest

from truck_loader.geometry import find_overlaps, out_of_bounds, overlap_volumes
from truck_loader.models import Container, Item, Placement
from truck_loader.packer import pack


def _box(pid, x, y, z, L=1.0, W=1.0, H=1.0):
    return Placement(pid, x, y, z, L, W, H)


def test_disjoint_and_touching_boxes_do_not_overlap():
    ps = [_box("a", 0, 0.5, 0), _box("b", 1, 0.5, 0), _box("c", 5, 0.5, 5)]
    assert find_overlaps(ps) == []


def test_overlap_reported_once_in_placement_order():
    ps = [_box("a", 0, 0.5, 0), _box("b", 0.5, 0.5, 0)]
    assert find_overlaps(ps) == [("a", "b")]
    vol = overlap_volumes(ps)
    assert vol[0, 1] == pytest.approx(0.5)
    assert vol[0, 0] == 0.0


def test_stacked_overhang_is_flagged(stacking_setup):
    c, wall, item1, filler = stacking_setup
    item2 = Item("item2", L=1.8, W=1.0, H=0.5, weight=35)
    res = pack(c, [wall, item1, filler, item2])
    assert res.placement_for("item2").stacked
    assert find_overlaps(res.placements) == [("wall", "item2")]


def test_out_of_bounds():
    c = Container("c", L=2, W=2, H=2)
    ps = [_box("in", 0, 0.5, 0), _box("high", 0, 1.8, 0), _box("side", 0.9, 0.5, 0)]
    assert out_of_bounds(ps, c) == ["high", "side"]


def test_empty_layout():
    assert find_overlaps([]) == []
    assert out_of_bounds([], Container("c", 1, 1, 1)) == []
