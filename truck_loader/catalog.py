"""Preset trucks and furniture offered by the moving-quote tool."""
from typing import Dict, Iterable, List, Optional

from .models import Container, Item

TRUCK_MODELS: Dict[str, Container] = {
    "van-12": Container("Van 12 m³", L=3.0, W=1.8, H=2.2, payload_kg=1500.0, volume=12.0),
    "truck-20": Container("Truck 20 m³", L=4.2, W=2.1, H=2.3, payload_kg=3500.0, volume=20.0),
    "truck-35": Container("Truck 35 m³", L=6.2, W=2.4, H=2.4, payload_kg=7500.0, volume=35.0),
    "trailer-60": Container("Trailer 60 m³", L=8.5, W=2.5, H=2.8, payload_kg=15000.0, volume=60.0),
}

FURNITURE_CATALOG: Dict[str, Item] = {
    "sofa-3": Item("sofa-3", L=2.0, W=0.9, H=0.8, weight=60, fragile=False,
                   name="3-seat sofa", category="Living room", color="#8B5CF6", volume=1.44),
    "wardrobe-2": Item("wardrobe-2", L=1.2, W=0.6, H=2.0, weight=80, fragile=False,
                       name="2-door wardrobe", category="Bedroom", color="#06B6D4", volume=1.44),
    "dining-table": Item("dining-table", L=1.5, W=0.9, H=0.75, weight=45, fragile=True,
                         name="Dining table", category="Dining room", color="#F59E0B", volume=1.01),
    "fridge": Item("fridge", L=0.6, W=0.65, H=1.8, weight=120, fragile=True,
                   name="Fridge", category="Kitchen", color="#EF4444", volume=0.70),
    "mattress-160": Item("mattress-160", L=2.0, W=1.6, H=0.25, weight=25, fragile=False,
                         name="Mattress 160x200", category="Bedroom", color="#10B981", volume=0.80),
}


def _lookup(table, key, what):
    try:
        return table[key]
    except KeyError:
        raise KeyError(f"unknown {what} {key!r}, expected one of: {', '.join(sorted(table))}") from None


def get_truck(key: str) -> Container:
    return _lookup(TRUCK_MODELS, key, "truck")


def furniture(keys: Optional[Iterable[str]] = None) -> List[Item]:
    """Catalog items for `keys` (all of them, in catalog order, when omitted)."""
    if keys is None:
        return list(FURNITURE_CATALOG.values())
    return [_lookup(FURNITURE_CATALOG, k, "furniture") for k in keys]
