import argparse, logging, os
import pandas as pd
from .config import (
    DEFAULT_TRUCK, DEFAULT_WEIGHT_KG, Flags,
    LAYOUT_CSV, REPORT_JSON, SESSION_JSON, PLOT_PNG,
)
from .catalog import TRUCK_MODELS, get_truck, furniture
from .models import Container, Item
from .packer import pack
from .report import summarize
from .utils import save_layout_csv, save_report_json, save_session_json, draw3d

# Accepted headers per axis, meters first; the *_mm variant is divided by 1000.
DIM_COLUMNS = {
    "L": ("L_m", "length_m", "length_mm"),
    "W": ("W_m", "width_m", "width_mm"),
    "H": ("H_m", "height_m", "height_mm"),
}

def _opt(r, df, col, default):
    if col in df.columns and not pd.isna(r[col]):
        return r[col]
    return default

def _id_str(v):
    # iterrows upcasts numeric rows to float: 7.0 -> "7"
    if isinstance(v, float) and v.is_integer():
        v = int(v)
    return str(v)

def _flag(v):
    if isinstance(v, str):
        return v.strip().lower() in ("1", "true", "yes", "y")
    return bool(v)

def _dim_column(df, path, axis):
    for col in DIM_COLUMNS[axis]:
        if col in df.columns:
            return col
    raise ValueError(f"{path}: no column for {axis} (expected one of {', '.join(DIM_COLUMNS[axis])})")

def load_items_csv(path):
    df = pd.read_csv(path)
    cols = {axis: _dim_column(df, path, axis) for axis in DIM_COLUMNS}

    items = []
    for idx, r in df.iterrows():
        dims = {}
        for axis, col in cols.items():
            v = float(r[col])
            dims[axis] = v / 1000.0 if col.endswith("_mm") else v
        base_id = _id_str(_opt(r, df, "id", _opt(r, df, "item_id", idx)))
        name = str(_opt(r, df, "name", base_id))
        qty = int(_opt(r, df, "quantity", 1))
        vol = _opt(r, df, "volume_m3", None)
        for k in range(1, qty + 1):
            suffix = f"-{k}" if qty > 1 else ""
            items.append(Item(
                id=base_id + suffix,
                L=dims["L"], W=dims["W"], H=dims["H"],
                weight=float(_opt(r, df, "weight_kg", DEFAULT_WEIGHT_KG)),
                fragile=_flag(_opt(r, df, "fragile", 0)),
                name=name + (f" #{k}" if qty > 1 else ""),
                category=str(_opt(r, df, "category", "")),
                volume=None if vol is None else float(vol),
            ))
    return items


def build_parser():
    ap = argparse.ArgumentParser(prog="truck-loader", description="Place furniture inside a truck.")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--items", help="CSV inventory")
    src.add_argument("--demo", action="store_true", help="load the whole furniture catalog")
    ap.add_argument("--truck", default=DEFAULT_TRUCK, help=f"preset: {', '.join(TRUCK_MODELS)}")
    ap.add_argument("--dims", type=float, nargs=3, metavar=("L", "W", "H"), help="custom interior in meters")
    ap.add_argument("--payload", type=float, default=None, help="payload in kg")
    ap.add_argument("--no-rotate", action="store_true")
    ap.add_argument("--no-stack", action="store_true")
    ap.add_argument("--out", default=".", help="output directory")
    ap.add_argument("--plot", action=argparse.BooleanOptionalAction, default=True)
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv=None):
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.dims:
            L, W, H = args.dims
            truck = Container("custom", L=L, W=W, H=H, payload_kg=args.payload or 0.0)
        else:
            truck = get_truck(args.truck)
            if args.payload is not None:
                truck = Container(truck.name, truck.L, truck.W, truck.H,
                                  payload_kg=args.payload, volume=truck.volume)
        items = furniture() if args.demo else load_items_csv(args.items)
    except (KeyError, ValueError, OSError) as e:
        ap.error(str(e).strip("'\""))

    flags = Flags(orientation_allowed=not args.no_rotate, stacking=not args.no_stack)
    print(f"[INFO] {len(items)} items -> {truck.name} ({truck.L}x{truck.W}x{truck.H} m)")

    result = pack(truck, items, flags)
    rep = summarize(truck, items, result)

    os.makedirs(args.out, exist_ok=True)
    out = lambda name: os.path.join(args.out, name)
    save_layout_csv(result.placements, out(LAYOUT_CSV))
    save_report_json(rep, out(REPORT_JSON))
    save_session_json(truck, items, result, out(SESSION_JSON))
    written = [LAYOUT_CSV, REPORT_JSON, SESSION_JSON]
    if args.plot:
        draw3d(result.placements, truck, out(PLOT_PNG), items=items,
               title=f"{truck.name}: {len(result.placements)}/{len(items)} placed")
        written.append(PLOT_PNG)

    for msg in result.advisories:
        print(f"[INFO] {msg}")
    if rep["overlapping_pairs"]:
        print(f"[WARN] {len(rep['overlapping_pairs'])} overlapping pair(s) in layout")
    print(f"Placed: {len(result.placements)} | Unplaced: {len(result.unplaced)} | "
          f"Efficiency: {result.efficiency:.1f}% | Used: {rep['usage_pct']:.1f}%")
    print("Wrote: " + ", ".join(written))
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
