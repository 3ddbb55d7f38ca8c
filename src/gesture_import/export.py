from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Sequence

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from gesture_core.models import Gesture

GESTURES_SCHEMA = pa.schema(
    [
        ("gesture_index", pa.int32()),
        ("gesture_id", pa.string()),
        ("stroke_count", pa.int32()),
        ("point_count", pa.int32()),
    ]
)

POINTS_SCHEMA = pa.schema(
    [
        ("gesture_index", pa.int32()),
        ("gesture_id", pa.string()),
        ("stroke_index", pa.int32()),
        ("point_index", pa.int32()),
        ("x", pa.float64()),
        ("y", pa.float64()),
    ]
)

CANONICAL_JSON_KW = {"sort_keys": True, "separators": (",", ":"), "ensure_ascii": False}


def gesture_rows(gestures: Sequence[Gesture]) -> tuple[list[dict], list[dict]]:
    """Flatten gestures into (gesture rows, point rows), file order preserved."""
    g_rows: list[dict] = []
    p_rows: list[dict] = []
    for g_idx, gesture in enumerate(gestures):
        g_rows.append(
            {
                "gesture_index": g_idx,
                "gesture_id": gesture.id,
                "stroke_count": len(gesture.strokes),
                "point_count": gesture.point_count,
            }
        )
        for s_idx, stroke in enumerate(gesture.strokes):
            for p_idx, point in enumerate(stroke.points):
                p_rows.append(
                    {
                        "gesture_index": g_idx,
                        "gesture_id": gesture.id,
                        "stroke_index": s_idx,
                        "point_index": p_idx,
                        "x": float(point.x),
                        "y": float(point.y),
                    }
                )
    return g_rows, p_rows


def _write_table(rows: list[dict], schema: pa.Schema, destination: Path) -> None:
    if rows:
        table = pa.Table.from_pandas(pd.DataFrame(rows), schema=schema, preserve_index=False)
    else:
        table = schema.empty_table()
    pq.write_table(table, destination)


def integrity_root(root_dir: Path, rel_files: Sequence[str]) -> str:
    """sha256 over per-file leaves of (rel_path + NUL + bytes), in sorted order."""
    acc = hashlib.sha256()
    for rel in sorted(rel_files):
        h = hashlib.sha256()
        h.update(rel.encode("utf-8"))
        h.update(b"\x00")
        h.update((root_dir / rel).read_bytes())
        acc.update(h.digest())
    return acc.hexdigest()


def export_gestures(gestures: Sequence[Gesture], out_path: Path, source_hash: str | None = None) -> dict:
    """Write gestures.parquet, points.parquet and manifest.json under out_path.

    Returns the manifest.
    """
    out_path = Path(out_path)
    out_path.mkdir(parents=True, exist_ok=True)

    g_rows, p_rows = gesture_rows(gestures)
    _write_table(g_rows, GESTURES_SCHEMA, out_path / "gestures.parquet")
    _write_table(p_rows, POINTS_SCHEMA, out_path / "points.parquet")

    files_rel = ["gestures.parquet", "points.parquet"]
    manifest = {
        "source_hash": source_hash,
        "gestures": len(g_rows),
        "points": len(p_rows),
        "integrity": {
            "algorithm": "sha256",
            "files": files_rel,
            "root": integrity_root(out_path, files_rel),
        },
    }
    (out_path / "manifest.json").write_bytes(json.dumps(manifest, **CANONICAL_JSON_KW).encode("utf-8"))
    return manifest
