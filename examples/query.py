"""Query an exported gesture store - per-gesture bounds of the normalized points."""
from __future__ import annotations

import sys
from pathlib import Path

import duckdb


def main() -> None:
    if len(sys.argv) < 2:
        print("Usage: python query.py <export_path> [gesture_id]")
        print("Example: python query.py export/ swipe")
        sys.exit(1)

    export = Path(sys.argv[1])
    gesture_id = sys.argv[2] if len(sys.argv) > 2 else None

    con = duckdb.connect(":memory:")
    con.execute(f"CREATE VIEW gestures AS SELECT * FROM '{export}/gestures.parquet'")
    con.execute(f"CREATE VIEW points AS SELECT * FROM '{export}/points.parquet'")

    sql = """
    SELECT
        g.gesture_index,
        g.gesture_id,
        g.stroke_count,
        g.point_count,
        MIN(p.x) AS min_x,
        MAX(p.x) AS max_x,
        MIN(p.y) AS min_y,
        MAX(p.y) AS max_y
    FROM gestures g
    LEFT JOIN points p ON p.gesture_index = g.gesture_index
    WHERE ? IS NULL OR g.gesture_id = ?
    GROUP BY g.gesture_index, g.gesture_id, g.stroke_count, g.point_count
    ORDER BY g.gesture_index
    """

    print(f"--- Gestures: {gesture_id or 'all'} ---\n")

    df = con.execute(sql, [gesture_id, gesture_id]).fetchdf()
    if df.empty:
        print("No gestures found.")
    else:
        for _, row in df.iterrows():
            print(f"GESTURE #{row['gesture_index']}: {row['gesture_id']}")
            print(f"  Strokes: {row['stroke_count']}  Points: {row['point_count']}")
            print(f"  x: [{row['min_x']:.1f}, {row['max_x']:.1f}]  y: [{row['min_y']:.1f}, {row['max_y']:.1f}]")
            print()


if __name__ == "__main__":
    main()
