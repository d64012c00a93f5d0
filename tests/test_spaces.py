import pytest

from truck_loader.models import Container, Item, orientations_for
from truck_loader.spaces import FreeSpace, SpaceCatalog


@pytest.fixture
def catalog():
    return SpaceCatalog(Container("c", L=4.0, W=2.0, H=3.0))


def _normal(L, W, H):
    return orientations_for(Item("x", L=L, W=W, H=H))[0]


def test_seeded_with_whole_interior(catalog):
    assert len(catalog) == 1
    s = catalog.spaces[0]
    assert (s.x, s.y, s.z) == (-2.0, 0.0, -1.0)
    assert (s.width, s.height, s.depth) == (4.0, 3.0, 2.0)
    assert not s.occupied


def test_fits_compares_length_depth_height():
    s = FreeSpace(0, 0, 0, width=2.0, height=1.0, depth=3.0)
    assert s.fits(_normal(2.0, 3.0, 1.0))
    assert not s.fits(_normal(3.0, 2.0, 1.0))
    assert not s.fits(_normal(2.0, 3.0, 1.5))


def test_split_appends_right_top_back(catalog):
    s = catalog.spaces[0]
    new = catalog.split(s, _normal(1.0, 0.5, 2.0))
    assert s.occupied
    right, top, back = new
    assert (right.x, right.y, right.z) == (-1.0, 0.0, -1.0)
    assert (right.width, right.height, right.depth) == (3.0, 3.0, 2.0)
    assert (top.x, top.y, top.z) == (-2.0, 2.0, -1.0)
    assert (top.width, top.height, top.depth) == (1.0, 1.0, 2.0)
    assert (back.x, back.y, back.z) == (-2.0, 0.0, -0.5)
    assert (back.width, back.height, back.depth) == (1.0, 2.0, 1.5)
    assert len(catalog) == 4


def test_split_skips_degenerate_leftovers(catalog):
    new = catalog.split(catalog.spaces[0], _normal(4.0, 2.0, 1.0))
    assert len(new) == 1
    assert new[0].y == 1.0 and new[0].height == 2.0


def test_occupied_spaces_are_not_free(catalog):
    catalog.split(catalog.spaces[0], _normal(1.0, 2.0, 3.0))
    free = list(catalog.free())
    assert catalog.spaces[0] not in free
    assert len(free) == 1


def test_within_bounds(catalog):
    s = catalog.spaces[0]
    assert catalog.within_bounds(s, _normal(4.0, 2.0, 3.0))
    outside = FreeSpace(1.5, 0.0, -1.0, width=5.0, height=3.0, depth=2.0)
    assert not catalog.within_bounds(outside, _normal(1.0, 1.0, 1.0))
