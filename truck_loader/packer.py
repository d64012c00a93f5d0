import logging
from typing import List, Optional, Sequence, Tuple

from .config import EPS, STACK_MAX_WEIGHT, Flags
from .models import (
    Container, Item, Orientation, OrientationKind, PackingResult, Placement,
    NO_ROTATION, orientations_for,
)
from .report import volumetric_efficiency
from .spaces import FreeSpace, SpaceCatalog

logger = logging.getLogger(__name__)


def find_slot(catalog: SpaceCatalog, it: Item, flags: Flags) -> Optional[Tuple[FreeSpace, Orientation]]:
    """First (space, orientation) pair that holds the item, scanning spaces then orientations."""
    orientations = orientations_for(it, flags.orientation_allowed)
    for s in catalog.free():
        for o in orientations:
            if s.fits(o) and catalog.within_bounds(s, o):
                return s, o
    return None


def try_stack(it: Item, placed: Sequence[Tuple[Placement, Item]], container: Container) -> Optional[Tuple[Placement, Item]]:
    """Rest `it` centred on top of the first acceptable placed item, unrotated.

    Returns the new placement and the base item it rests on.
    """
    if it.fragile or it.weight > STACK_MAX_WEIGHT:
        return None
    half_l, half_w = container.L / 2.0, container.W / 2.0
    for p, base in placed:
        if base.fragile or base.weight < it.weight:
            continue
        # base height as listed, even when the base went in rotated
        y = p.y + base.H / 2.0 + it.H / 2.0
        if y + it.H / 2.0 > container.H + EPS:
            continue
        # footprint centred on the base must stay inside the walls
        if abs(p.x) + it.L / 2.0 > half_l + EPS or abs(p.z) + it.W / 2.0 > half_w + EPS:
            continue
        stacked = Placement(it.id, p.x, y, p.z, it.L, it.W, it.H,
                            rotation=NO_ROTATION,
                            orientation=OrientationKind.NORMAL.value,
                            stacked_on=base.id)
        return stacked, base
    return None


def pack(container: Optional[Container], items: Sequence[Item], flags: Optional[Flags] = None) -> PackingResult:
    """Greedy first-fit placement of `items` inside `container`.

    Items go largest volume first (ties keep input order). Each one gets the
    first free space and orientation that holds it; failing that it may be
    stacked on an earlier item; failing that it is reported as unplaced.
    Nothing is raised for items that do not fit.
    """
    if container is None:
        logger.debug("pack called without a container")
        return PackingResult()
    if not items:
        return PackingResult()
    flags = flags or Flags()

    items_sorted = sorted(items, key=lambda i: -i.volume)
    catalog = SpaceCatalog(container)

    placed: List[Tuple[Placement, Item]] = []
    unplaced: List[Item] = []
    advisories: List[str] = []

    for it in items_sorted:
        slot = find_slot(catalog, it, flags)
        if slot is not None:
            s, o = slot
            p = Placement(it.id,
                          s.x + o.L / 2.0, s.y + o.H / 2.0, s.z + o.W / 2.0,
                          o.L, o.W, o.H,
                          rotation=o.rotation, orientation=o.label)
            catalog.split(s, o)
            placed.append((p, it))
            if o.kind is not OrientationKind.NORMAL:
                advisories.append(f"{it.name} placed {o.label}")
            logger.debug("[PLACE] %s at (%.3f, %.3f, %.3f) %s, %d spaces",
                         it.id, p.x, p.y, p.z, o.label, len(catalog))
            continue

        stack = try_stack(it, placed, container) if flags.stacking else None
        if stack is not None:
            p, base = stack
            placed.append((p, it))
            advisories.append(f"{it.name} stacked on {base.name}")
            logger.debug("[STACK] %s on %s", it.id, base.id)
            continue

        unplaced.append(it)
        advisories.append(f"{it.name} could not be placed")
        logger.debug("[SKIP] %s (%.3f x %.3f x %.3f)", it.id, it.L, it.W, it.H)

    logger.info("packed %d/%d items into %s (%d spaces)",
                len(placed), len(items_sorted), container.name, len(catalog))
    return PackingResult(
        placements=tuple(p for p, _ in placed),
        unplaced=tuple(unplaced),
        advisories=tuple(advisories),
        efficiency=volumetric_efficiency(container, items),
    )
