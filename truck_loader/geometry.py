"""Vectorised checks on a finished layout.

The packer does not prove that its placements are disjoint: top/back
leftover spaces only cover the placed box's footprint and stacked items are
not tested against whatever already sits above their base. These helpers
report such cases; they never move anything.
"""
from typing import List, Sequence, Tuple

import numpy as np

from .models import Container, Placement

# faces that merely touch after float rounding are not an overlap
AUDIT_TOL: float = 1e-6


def bounds(placements: Sequence[Placement]) -> Tuple[np.ndarray, np.ndarray]:
    """(lo, hi) corner arrays of shape (n, 3) in (x, y, z) order."""
    if not placements:
        empty = np.zeros((0, 3))
        return empty, empty
    centre = np.array([[p.x, p.y, p.z] for p in placements], dtype=np.float64)
    half = np.array([[p.L, p.H, p.W] for p in placements], dtype=np.float64) / 2.0
    return centre - half, centre + half


def overlap_volumes(placements: Sequence[Placement]) -> np.ndarray:
    """(n, n) matrix of pairwise intersection volumes, zero on the diagonal."""
    lo, hi = bounds(placements)
    ext = np.minimum(hi[:, None, :], hi[None, :, :]) - np.maximum(lo[:, None, :], lo[None, :, :])
    ext = np.where(ext > AUDIT_TOL, ext, 0.0)
    vol = np.prod(ext, axis=2)
    np.fill_diagonal(vol, 0.0)
    return vol


def find_overlaps(placements: Sequence[Placement]) -> List[Tuple[str, str]]:
    """Item id pairs whose boxes share a positive volume, in placement order."""
    if len(placements) < 2:
        return []
    vol = overlap_volumes(placements)
    ii, jj = np.nonzero(np.triu(vol, k=1))
    return [(placements[i].item_id, placements[j].item_id) for i, j in zip(ii.tolist(), jj.tolist())]


def out_of_bounds(placements: Sequence[Placement], container: Container) -> List[str]:
    if not placements:
        return []
    lo, hi = bounds(placements)
    c_lo = np.array([-container.L / 2.0, 0.0, -container.W / 2.0])
    c_hi = np.array([container.L / 2.0, container.H, container.W / 2.0])
    bad = np.any(lo < c_lo - AUDIT_TOL, axis=1) | np.any(hi > c_hi + AUDIT_TOL, axis=1)
    return [placements[i].item_id for i in np.nonzero(bad)[0].tolist()]
