"""
Debug runner: load items from a CSV and run the packer directly.
Prints every placement, stacking decision and audit finding.
Run:
    python3 run_pack_debug.py inventory.csv [truck-20]
"""
import sys, logging
from truck_loader.main import load_items_csv
from truck_loader.catalog import get_truck
from truck_loader.config import DEFAULT_TRUCK
from truck_loader.packer import pack
from truck_loader.geometry import find_overlaps, out_of_bounds
from truck_loader.report import usage_percentage

if len(sys.argv) < 2:
    print('Usage: python3 run_pack_debug.py <items.csv> [truck]')
    sys.exit(1)

logging.basicConfig(level=logging.DEBUG, format="%(message)s")

path = sys.argv[1]
items = load_items_csv(path)
truck = get_truck(sys.argv[2] if len(sys.argv) > 2 else DEFAULT_TRUCK)
print(f'Loaded {len(items)} items from {path}, truck {truck.name}')

result = pack(truck, items)
print(f'Pack returned {len(result.placements)} placements, {len(result.unplaced)} unplaced')
print(f'Efficiency {result.efficiency:.2f}% requested, {usage_percentage(truck, result, items):.2f}% placed')

for p in result.placements:
    how = f'on {p.stacked_on}' if p.stacked else p.orientation
    print(f' {p.item_id:>12}: ({p.x:+.3f}, {p.y:.3f}, {p.z:+.3f})  {p.L:.2f}x{p.W:.2f}x{p.H:.2f}  {how}')
for it in result.unplaced:
    print(f' {it.id:>12}: UNPLACED {it.L:.2f}x{it.W:.2f}x{it.H:.2f}')

overlaps = find_overlaps(result.placements)
print(f'Overlapping pairs: {len(overlaps)}')
for a, b in overlaps:
    print(f'  {a} <-> {b}')
print('Out of bounds:', out_of_bounds(result.placements, truck) or 'none')
