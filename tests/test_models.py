import math

import pytest

from truck_loader.models import (
    Container, Item, OrientationKind, Placement, PackingResult, orientations_for,
)


def test_item_volume_defaults_to_dimensions():
    it = Item("a", L=2.0, W=0.5, H=1.0)
    assert it.volume == pytest.approx(1.0)
    assert it.name == "a"


def test_item_keeps_quoted_volume():
    it = Item("sofa", L=2.0, W=0.9, H=0.8, volume=1.44)
    assert it.volume == 1.44


@pytest.mark.parametrize("dims", [(0, 1, 1), (1, -1, 1), (1, 1, 0)])
def test_non_positive_dimensions_rejected(dims):
    with pytest.raises(ValueError):
        Item("bad", *dims)
    with pytest.raises(ValueError):
        Container("bad", *dims)


def test_six_orientations_in_fixed_order():
    kinds = [o.kind for o in orientations_for(Item("a", L=1, W=2, H=3))]
    assert kinds == list(OrientationKind)
    assert kinds[0] is OrientationKind.NORMAL


def test_orientation_extents():
    got = [(o.L, o.W, o.H) for o in orientations_for(Item("a", L=1, W=2, H=3))]
    assert got == [(1, 2, 3), (2, 1, 3), (1, 3, 2), (3, 1, 2), (2, 3, 1), (3, 2, 1)]


def test_orientation_rotations_and_labels():
    os_ = orientations_for(Item("a", L=1, W=2, H=3))
    assert os_[0].rotation == (0.0, 0.0, 0.0)
    assert os_[1].rotation == (0.0, math.pi / 2, 0.0)
    assert os_[1].label == "rotated 90°"
    assert os_[2].label == "on its side"
    assert os_[3].label == "standing"


def test_cube_keeps_duplicate_orientations():
    assert len(orientations_for(Item("cube", L=1, W=1, H=1))) == 6


def test_rotation_disabled_only_normal():
    os_ = orientations_for(Item("a", L=1, W=2, H=3), allow_rotation=False)
    assert [o.kind for o in os_] == [OrientationKind.NORMAL]


def test_result_lookup():
    p = Placement("a", 0, 0.5, 0, 1, 1, 1)
    res = PackingResult(placements=(p,))
    assert res.placement_for("a") is p
    assert res.placement_for("b") is None
    assert not p.stacked


@pytest.mark.parametrize("volume", [0.0, -5.0])
def test_non_positive_quoted_volume_rejected(volume):
    with pytest.raises(ValueError, match="volume"):
        Item("a", 1, 1, 1, volume=volume)
    with pytest.raises(ValueError, match="volume"):
        Container("c", 2, 2, 2, volume=volume)
