from typing import Dict, List, Sequence

from .config import (
    EFFICIENCY_CAP, HEAVY_ITEM_KG, HIGH_EFFICIENCY_PCT, MANY_ITEMS,
)
from .geometry import find_overlaps, out_of_bounds
from .models import Container, Item, PackingResult


def volumetric_efficiency(container: Container, items: Sequence[Item]) -> float:
    """Requested load as a percentage of the container volume, capped at 100.

    Counts every item, placed or not.
    """
    if container is None or not container.volume or container.volume <= 0:
        return 0.0
    total = sum(it.volume for it in items)
    return min(100.0 * total / container.volume, EFFICIENCY_CAP)


def used_volume(result: PackingResult, items: Sequence[Item]) -> float:
    by_id = {it.id: it for it in items}
    return sum(by_id[p.item_id].volume for p in result.placements if p.item_id in by_id)


def usage_percentage(container: Container, result: PackingResult, items: Sequence[Item]) -> float:
    # not capped: stacked items can push this past 100
    if container is None or not container.volume:
        return 0.0
    return 100.0 * used_volume(result, items) / container.volume


def weight_utilisation(container: Container, items: Sequence[Item]) -> float:
    if container is None or container.payload_kg <= 0:
        return 0.0
    return 100.0 * sum(it.weight for it in items) / container.payload_kg


def optimization_tips(container: Container, items: Sequence[Item]) -> List[str]:
    tips = []
    if any(it.fragile for it in items):
        tips.append("Fragile items are kept safe (never stacked on or under)")
    if volumetric_efficiency(container, items) > HIGH_EFFICIENCY_PCT:
        tips.append("High volume: 3D optimisation recommended")
    if len(items) > MANY_ITEMS:
        tips.append("3D algorithm used to make the most of the space")
    if any(it.weight > HEAVY_ITEM_KG for it in items):
        tips.append("Heavy items stay on the floor for stability")
    total_w = sum(it.weight for it in items)
    if container is not None and container.payload_kg > 0 and total_w > container.payload_kg:
        tips.append(f"Total weight {total_w:.0f} kg exceeds payload {container.payload_kg:.0f} kg")
    return tips


def summarize(container: Container, items: Sequence[Item], result: PackingResult) -> Dict:
    return {
        "container": container.name,
        "requested_items": len(items),
        "placed_items": len(result.placements),
        "stacked_items": sum(1 for p in result.placements if p.stacked),
        "unplaced_items": [it.id for it in result.unplaced],
        "efficiency_pct": round(result.efficiency, 1),
        "used_volume_m3": round(used_volume(result, items), 3),
        "usage_pct": round(usage_percentage(container, result, items), 1),
        "weight_kg": round(sum(it.weight for it in items), 1),
        "weight_utilisation_pct": round(weight_utilisation(container, items), 1),
        "overlapping_pairs": [list(pair) for pair in find_overlaps(result.placements)],
        "out_of_bounds": out_of_bounds(result.placements, container),
        "advisories": list(result.advisories),
        "tips": optimization_tips(container, items),
    }
