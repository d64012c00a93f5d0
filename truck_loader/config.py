from dataclasses import dataclass

@dataclass
class Flags:
    orientation_allowed: bool = True
    stacking: bool = True

EPS: float = 1e-9

# Stacking fallback: only non-fragile items up to this weight (kg) may ride on another item
STACK_MAX_WEIGHT: float = 50.0

# Tips thresholds
HIGH_EFFICIENCY_PCT: float = 80.0
MANY_ITEMS: int = 5
HEAVY_ITEM_KG: float = 50.0

EFFICIENCY_CAP: float = 100.0

# CSV loader defaults
DEFAULT_WEIGHT_KG: float = 20.0
DEFAULT_TRUCK: str = "truck-20"

# Output file names written by the CLI
LAYOUT_CSV: str = "packed_layout.csv"
REPORT_JSON: str = "report.json"
SESSION_JSON: str = "session.json"
PLOT_PNG: str = "plot3d.png"
