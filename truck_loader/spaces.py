"""Free-space catalog for the cargo packer.

A catalog is an append-only list of empty cuboids. It starts with one space
spanning the whole container and grows by at most three spaces per placement.
Spaces are flagged occupied once used and are never shrunk, merged or removed.

Axes: x along the container length, y up from the floor, z across the width.
`width`, `height`, `depth` are the extents along x, y, z.
"""
from dataclasses import dataclass
from typing import Iterator, List

from .config import EPS
from .models import Container, Orientation


@dataclass
class FreeSpace:
    x: float; y: float; z: float
    width: float; height: float; depth: float
    occupied: bool = False

    def fits(self, o: Orientation) -> bool:
        return (o.L <= self.width + EPS and
                o.W <= self.depth + EPS and
                o.H <= self.height + EPS)


class SpaceCatalog:
    def __init__(self, container: Container):
        self.container = container
        self.spaces: List[FreeSpace] = [FreeSpace(
            x=-container.L / 2.0, y=0.0, z=-container.W / 2.0,
            width=container.L, height=container.H, depth=container.W,
        )]

    def __len__(self):
        return len(self.spaces)

    def free(self) -> Iterator[FreeSpace]:
        """Unoccupied spaces, oldest first."""
        return (s for s in self.spaces if not s.occupied)

    def within_bounds(self, s: FreeSpace, o: Orientation) -> bool:
        c = self.container
        return (s.x + o.L <= c.L / 2.0 + EPS and
                s.y + o.H <= c.H + EPS and
                s.z + o.W <= c.W / 2.0 + EPS and
                s.x >= -c.L / 2.0 - EPS and
                s.y >= -EPS and
                s.z >= -c.W / 2.0 - EPS)

    def split(self, s: FreeSpace, o: Orientation) -> List[FreeSpace]:
        """Mark `s` used by a box of extents `o` at its origin and append the leftovers.

        Top and back leftovers only cover the placed box's own footprint, so the
        rest of `s` beside them is not offered again in this run.
        """
        s.occupied = True
        new = []
        right = FreeSpace(s.x + o.L, s.y, s.z, s.width - o.L, s.height, s.depth)
        top = FreeSpace(s.x, s.y + o.H, s.z, o.L, s.height - o.H, s.depth)
        back = FreeSpace(s.x, s.y, s.z + o.W, o.L, o.H, s.depth - o.W)
        if right.width > EPS: new.append(right)
        if top.height > EPS: new.append(top)
        if back.depth > EPS: new.append(back)
        self.spaces.extend(new)
        return new
