import csv, json
from dataclasses import asdict
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.colors import to_rgba
from mpl_toolkits.mplot3d.art3d import Poly3DCollection

from .models import Container, Item, Placement

# Fallback colours by how the item went in
STATUS_COLORS = {
    "normal": (0.1,0.3,0.9,0.65),   # blue
    "rotated": (0.95,0.55,0.15,0.65), # orange
    "stacked": (0.1,0.7,0.2,0.65),  # green
}

LAYOUT_KEYS = ["item_id","x","y","z","L","W","H","rx","ry","rz","orientation","stacked_on"]

def _layout_row(p):
    row = {k: getattr(p, k) for k in LAYOUT_KEYS if hasattr(p, k)}
    row["rx"], row["ry"], row["rz"] = p.rotation
    row["stacked_on"] = p.stacked_on or ""
    return row

def save_layout_csv(placements, path):
    with open(path, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=LAYOUT_KEYS); w.writeheader()
        for p in placements: w.writerow(_layout_row(p))

def save_report_json(rep, path):
    with open(path, "w") as f: json.dump(rep, f, indent=2, ensure_ascii=False)

def save_session_json(container, items, result, path):
    """Container, items and placements of one run, enough to redraw it later."""
    doc = {
        "container": asdict(container),
        "items": [asdict(it) for it in items],
        "placements": [asdict(p) for p in result.placements],
        "unplaced": [it.id for it in result.unplaced],
        "advisories": list(result.advisories),
        "efficiency": result.efficiency,
    }
    with open(path, "w") as f: json.dump(doc, f, indent=2, ensure_ascii=False)

def load_session_json(path):
    with open(path) as f: doc = json.load(f)
    container = Container(**doc["container"])
    items = [Item(**d) for d in doc["items"]]
    placements = []
    for d in doc["placements"]:
        d = dict(d); d["rotation"] = tuple(d["rotation"])
        placements.append(Placement(**d))
    return container, items, placements

def _color(p, items_by_id):
    it = items_by_id.get(p.item_id)
    if it is not None and it.color:
        return to_rgba(it.color, alpha=0.65)
    if p.stacked: return STATUS_COLORS["stacked"]
    if p.orientation != "normal": return STATUS_COLORS["rotated"]
    return STATUS_COLORS["normal"]

def box_faces(lo, hi):
    """Six quads of the axis-aligned box spanning corners lo..hi (plot axes)."""
    faces = []
    for axis in range(3):
        u, v = [a for a in range(3) if a != axis]
        for side in (lo, hi):
            quad = []
            for cu, cv in ((lo[u], lo[v]), (hi[u], lo[v]), (hi[u], hi[v]), (lo[u], hi[v])):
                pt = [0.0, 0.0, 0.0]
                pt[axis], pt[u], pt[v] = side[axis], cu, cv
                quad.append(tuple(pt))
            faces.append(quad)
    return faces

def draw3d(placements, container, out_png, title=None, items=None):
    items_by_id = {it.id: it for it in (items or [])}
    fig = plt.figure()
    ax = fig.add_subplot(projection='3d')
    # plot axes: length, width, height -> container x, z, y
    ax.set_xlim(-container.L/2, container.L/2); ax.set_ylim(-container.W/2, container.W/2); ax.set_zlim(0, container.H)
    for p in placements:
        color = _color(p, items_by_id)
        lo = (p.x - p.L/2, p.z - p.W/2, p.y - p.H/2)
        hi = (p.x + p.L/2, p.z + p.W/2, p.y + p.H/2)
        ax.add_collection3d(Poly3DCollection(box_faces(lo, hi), facecolors=[color]*6, edgecolors='k', linewidths=0.2))
    ax.set_xlabel("L (m)"); ax.set_ylabel("W (m)"); ax.set_zlabel("H (m)")
    if title: ax.set_title(title)
    fig.tight_layout(); fig.savefig(out_png, dpi=150); plt.close(fig)
