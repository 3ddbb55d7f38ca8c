import struct

import pytest


def build_store(entries, version=1, reserved=None):
    """entries: [(name, [(gesture_id, [[(x, y, ts), ...], ...]), ...]), ...]

    Names are laid out the way Android's writeUTF writes them: an unsigned
    16-bit byte length, then the bytes, with no terminator.
    """
    blob = bytearray(struct.pack(">hi", version, len(entries)))
    for name, gestures in entries:
        raw = name.encode("utf-8")
        blob += struct.pack(">H", len(raw)) if reserved is None else reserved
        blob += raw
        blob += struct.pack(">i", len(gestures))
        for gesture_id, strokes in gestures:
            blob += struct.pack(">qi", gesture_id, len(strokes))
            for points in strokes:
                blob += struct.pack(">i", len(points))
                for x, y, ts in points:
                    blob += struct.pack(">ffq", x, y, ts)
    return bytes(blob)


SWIPE = [("swipe", [(42, [[(0.0, 0.0, 0), (100.0, 50.0, 1)]])])]


@pytest.fixture
def store_bytes():
    return build_store


@pytest.fixture
def swipe_store(tmp_path):
    p = tmp_path / "gestures.bin"
    p.write_bytes(build_store(SWIPE))
    return p
