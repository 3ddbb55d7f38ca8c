"""Gesture Store Import - command line."""
from __future__ import annotations

import hashlib
import json
from pathlib import Path

import click

from gesture_core.models import Gesture
from gesture_import.decoder import decode_gestures, load_gestures, read_store_bytes
from gesture_import.export import CANONICAL_JSON_KW, export_gestures
from gesture_import.resources import default_store_path


def gesture_summary(gesture: Gesture) -> dict:
    return {
        "id": gesture.id,
        "stroke_count": len(gesture.strokes),
        "point_count": gesture.point_count,
        "strokes": [[[p.x, p.y] for p in stroke.points] for stroke in gesture.strokes],
    }


@click.group()
def main() -> None:
    pass


@main.command("decode")
@click.argument("path", required=False, type=click.Path(path_type=Path))
@click.option("--debug", is_flag=True, help="Trace every header, entry, gesture, stroke and point")
def decode_cmd(path: Path | None, debug: bool) -> None:
    """Decode a gesture store and print its gestures as JSON."""
    if path is None:
        path = default_store_path()
    if path is None:
        click.echo("[]")
        return

    try:
        gestures = load_gestures(path, debug=debug)
    except Exception as e:
        # Fail closed with a single-line reason.
        click.echo(f"FATAL: {e}")
        raise SystemExit(1)

    click.echo(json.dumps([gesture_summary(g) for g in gestures], **CANONICAL_JSON_KW))


@main.command("export")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("out", type=click.Path(path_type=Path))
def export_cmd(path: Path, out: Path) -> None:
    """Export a gesture store to parquet tables."""
    print(f"Exporting gesture store: {path}")
    try:
        data = read_store_bytes(path)
        gestures = decode_gestures(data)
        manifest = export_gestures(gestures, out, source_hash=hashlib.sha256(data).hexdigest())
    except Exception as e:
        click.echo(f"FATAL: {e}")
        raise SystemExit(1)

    print(f"PASS: Export written to {out}")
    print(f"  Gestures: {manifest['gestures']}")
    print(f"  Points: {manifest['points']}")


if __name__ == "__main__":
    main()
