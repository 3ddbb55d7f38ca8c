import math
import random
import struct
from pathlib import Path

from gesture_core.protocol import (
    COUNT_FMT,
    ENTRY_RESERVED_FMT,
    GESTURE_ID_FMT,
    HEADER_FMT,
    POINT_FMT,
    TEXT_ENCODING,
)

# --- CONFIGURATION ---
VERSION = 1
GESTURE_NAMES = ["swipe", "circle", "check", "zigzag"]
POINTS_PER_STROKE = 24
SEED = 1234


def encode_store(entries, version=VERSION, reserved=None):
    """
    Encode [(name, [[[(x, y, ts), ...], ...stroke], ...gesture])] into store bytes.
    Gesture ids are assigned sequentially from 1. Names follow the writeUTF
    layout (u16 byte length, then the bytes) unless `reserved` overrides the length.
    """
    blob = bytearray(struct.pack(HEADER_FMT, version, len(entries)))
    gesture_id = 1
    for name, gestures in entries:
        raw = name.encode(TEXT_ENCODING)
        blob += struct.pack(ENTRY_RESERVED_FMT, len(raw)) if reserved is None else reserved
        blob += raw
        blob += struct.pack(COUNT_FMT, len(gestures))
        for strokes in gestures:
            blob += struct.pack(GESTURE_ID_FMT, gesture_id)
            blob += struct.pack(COUNT_FMT, len(strokes))
            gesture_id += 1
            for points in strokes:
                blob += struct.pack(COUNT_FMT, len(points))
                for x, y, ts in points:
                    blob += struct.pack(POINT_FMT, x, y, ts)
    return bytes(blob)


def synth_stroke(name, start_ts, rng):
    # Shapes live in a 0..1000 canvas, like raw touch coordinates
    pts = []
    for i in range(POINTS_PER_STROKE):
        t = i / (POINTS_PER_STROKE - 1)
        if name == "circle":
            x, y = 500 + 400 * math.cos(t * math.tau), 500 + 400 * math.sin(t * math.tau)
        elif name == "check":
            x, y = (100 + 300 * t * 2, 600 + 300 * t * 2) if t < 0.5 else (400 + 500 * (t - 0.5) * 2, 900 - 800 * (t - 0.5) * 2)
        elif name == "zigzag":
            x, y = 100 + 800 * t, 300 + (400 if int(t * 6) % 2 else 0)
        else:
            x, y = 100 + 800 * t, 500 + rng.uniform(-20, 20)
        pts.append((x, y, start_ts + i * 16))
    return pts


def generate_store(out_file, gestures_per_entry=2, truncate=0):
    rng = random.Random(SEED)
    entries = []
    ts = 1_700_000_000_000
    for name in GESTURE_NAMES:
        gestures = []
        for _ in range(gestures_per_entry):
            gestures.append([synth_stroke(name, ts, rng)])
            ts += 1000
        entries.append((name, gestures))

    blob = encode_store(entries)
    if truncate:
        blob = blob[:-truncate]

    out = Path(out_file)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(blob)
    print(f"GENERATED: {out} ({len(blob)} bytes)")
    return out


if __name__ == "__main__":
    import sys

    # Usage:
    #   python tools/make_gesture_store.py OUT_FILE [--gestures N] [--truncate N]
    args = [a for a in sys.argv[1:] if a]

    def pop_value(arg_list, flag, default):
        """Remove `flag VALUE` from an argv-style list."""
        if flag not in arg_list:
            return default, arg_list
        i = arg_list.index(flag)
        if i + 1 >= len(arg_list):
            raise SystemExit(f"{flag} requires a value")
        return int(arg_list[i + 1]), arg_list[:i] + arg_list[i + 2:]

    per_entry, args = pop_value(args, "--gestures", 2)
    truncate, args = pop_value(args, "--truncate", 0)

    out = args[0] if args else "gestures.bin"
    generate_store(out, gestures_per_entry=per_entry, truncate=truncate)
