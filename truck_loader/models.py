import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

Rotation = Tuple[float, float, float]

NO_ROTATION: Rotation = (0.0, 0.0, 0.0)


def _check_dims(kind, name, L, W, H, volume=None):
    for axis, v in (("L", L), ("W", W), ("H", H)):
        if not v > 0:
            raise ValueError(f"{kind} {name!r}: {axis} must be > 0, got {v!r}")
    if volume is not None and not volume > 0:
        raise ValueError(f"{kind} {name!r}: volume must be > 0, got {volume!r}")


@dataclass
class Container:
    """Interior of a cargo box. x runs along L, z along W, y is up from the floor."""
    name: str
    L: float; W: float; H: float
    payload_kg: float = 0.0
    volume: Optional[float] = None
    def __post_init__(self):
        _check_dims("container", self.name, self.L, self.W, self.H, self.volume)
        if self.volume is None: self.volume = self.L*self.W*self.H


@dataclass
class Item:
    id: str
    L: float; W: float; H: float
    weight: float = 0.0
    fragile: bool = False
    name: str = ""
    category: str = ""
    color: str = ""
    volume: Optional[float] = None
    def __post_init__(self):
        if not self.name: self.name = str(self.id)
        _check_dims("item", self.name, self.L, self.W, self.H, self.volume)
        if self.volume is None: self.volume = self.L*self.W*self.H


class OrientationKind(Enum):
    NORMAL = "normal"
    ROTATED_90 = "rotated 90°"
    ON_SIDE = "on its side"
    STANDING = "standing"
    COMPLEX_A = "complex rotation A"
    COMPLEX_B = "complex rotation B"


HALF_PI = math.pi / 2

# (kind, indices into (l, w, h) giving (L', W', H'), rotation about x/y/z)
# Order is the first-fit priority used by the packer.
_ORIENTATIONS = [
    (OrientationKind.NORMAL,     (0, 1, 2), NO_ROTATION),
    (OrientationKind.ROTATED_90, (1, 0, 2), (0.0, HALF_PI, 0.0)),
    (OrientationKind.ON_SIDE,    (0, 2, 1), (HALF_PI, 0.0, 0.0)),
    (OrientationKind.STANDING,   (2, 0, 1), (0.0, 0.0, HALF_PI)),
    (OrientationKind.COMPLEX_A,  (1, 2, 0), (HALF_PI, HALF_PI, 0.0)),
    (OrientationKind.COMPLEX_B,  (2, 1, 0), (0.0, HALF_PI, HALF_PI)),
]


@dataclass(frozen=True)
class Orientation:
    kind: OrientationKind
    L: float; W: float; H: float
    rotation: Rotation

    @property
    def label(self) -> str:
        return self.kind.value


def orientations_for(it: Item, allow_rotation: bool = True) -> List[Orientation]:
    """All six axis-aligned orientations of an item, in priority order.

    Duplicates (cubes, square faces) are kept so the index of an orientation
    never depends on the item's proportions.
    """
    dims = (it.L, it.W, it.H)
    out = []
    for kind, (a, b, c), rot in _ORIENTATIONS:
        out.append(Orientation(kind, dims[a], dims[b], dims[c], rot))
        if not allow_rotation:
            break
    return out


@dataclass(frozen=True)
class Placement:
    item_id: str
    x: float; y: float; z: float
    L: float; W: float; H: float
    rotation: Rotation = NO_ROTATION
    orientation: str = OrientationKind.NORMAL.value
    stacked_on: Optional[str] = None

    @property
    def position(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @property
    def stacked(self) -> bool:
        return self.stacked_on is not None


@dataclass(frozen=True)
class PackingResult:
    placements: Tuple[Placement, ...] = ()
    unplaced: Tuple[Item, ...] = ()
    advisories: Tuple[str, ...] = ()
    efficiency: float = 0.0

    def placement_for(self, item_id: str) -> Optional[Placement]:
        for p in self.placements:
            if p.item_id == item_id:
                return p
        return None
