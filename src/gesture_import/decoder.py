"""Gesture Store Import - Android gesture store decoder.

Walks file -> entries -> gestures -> strokes -> points in a single forward
pass. Decoding is all-or-nothing: any failed read aborts the whole file.
"""
from __future__ import annotations

from pathlib import Path

from gesture_core.cursor import ByteCursor
from gesture_core.errors import OutOfBoundsError, ResourceUnavailableError, TruncatedInputError
from gesture_core.models import Gesture, Point, Stroke
from gesture_core.protocol import COUNT_LEN, COUNT_MASK, ENTRY_RESERVED_LEN, GESTURE_ID_LEN, TIMESTAMP_LEN, VERSION_LEN
from gesture_import.normalize import normalize_stroke


class GestureStoreDecoder:
    """Decode one gesture store buffer.

    - Counts are int32 on disk and iterated as unsigned.
    - Gesture ids, timestamps and the reserved entry bytes are read and dropped.
    - The entry name is the externally visible id of every gesture under it.
    """

    def __init__(self, data: bytes, debug: bool = False):
        self.cursor = ByteCursor(data)
        self.debug = debug
        self.stats = {
            "version": None,
            "entries": 0,
            "gestures": 0,
            "strokes": 0,
            "points": 0,
        }

    def _trace(self, message: str) -> None:
        if self.debug:
            print(message)

    def _read_count(self) -> int:
        return self.cursor.read_int(COUNT_LEN) & COUNT_MASK

    def decode(self) -> list[Gesture]:
        try:
            return self._read_store()
        except OutOfBoundsError as e:
            self._trace(f"Truncated input: {e}")
            raise TruncatedInputError(
                f"Gesture store truncated at offset {self.cursor.offset}: {e}",
                offset=self.cursor.offset,
            ) from e

    def _read_store(self) -> list[Gesture]:
        version = self.cursor.read_int(VERSION_LEN)
        entry_count = self._read_count()
        self.stats["version"] = version
        self._trace(f"Header data: version={version} entries={entry_count}")

        gestures: list[Gesture] = []
        for entry_number in range(entry_count):
            gestures.extend(self._read_entry(entry_number))
        return gestures

    def _read_entry(self, entry_number: int) -> list[Gesture]:
        unk = self.cursor.read_int(ENTRY_RESERVED_LEN)
        name = self.cursor.read_text()
        gesture_count = self._read_count()
        self._trace(f"Entry #{entry_number}: name={name} gestures={gesture_count} unk={unk}")

        gestures = [self._read_gesture(name, n) for n in range(gesture_count)]
        self.stats["entries"] += 1
        return gestures

    def _read_gesture(self, name: str, gesture_number: int) -> Gesture:
        gesture_id = self.cursor.read_int(GESTURE_ID_LEN)
        stroke_count = self._read_count()
        self._trace(f"Gesture #{gesture_number}: id={gesture_id} strokes={stroke_count}")

        strokes = tuple(self._read_stroke(n) for n in range(stroke_count))
        self.stats["gestures"] += 1
        return Gesture(id=name, strokes=strokes)

    def _read_stroke(self, stroke_number: int) -> Stroke:
        point_count = self._read_count()
        self._trace(f"Stroke #{stroke_number}: points={point_count}")

        points: list[Point] = []
        for point_number in range(point_count):
            x = self.cursor.read_float32()
            y = self.cursor.read_float32()
            timestamp = self.cursor.read_int(TIMESTAMP_LEN)
            points.append(Point(x, y))
            self._trace(f"Point #{point_number}: ({x}, {y}) timestamp:{timestamp}")

        self.stats["strokes"] += 1
        self.stats["points"] += len(points)
        return normalize_stroke(Stroke(tuple(points)))

    def get_stats(self) -> dict:
        return dict(self.stats)


def decode_gestures(data: bytes, *, debug: bool = False) -> list[Gesture]:
    """Decode a gesture store buffer into gestures with normalized strokes."""
    return GestureStoreDecoder(data, debug=debug).decode()


def read_store_bytes(path: Path | str) -> bytes:
    """Read the whole store eagerly."""
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise ResourceUnavailableError(f"Cannot read gesture store {path}: {e}") from e


def load_gestures(path: Path | str, *, debug: bool = False) -> list[Gesture]:
    """Decode the store at `path`.

    A missing or unreadable file means nothing to import and yields [].
    Decode failures propagate.
    """
    if debug:
        print(f"load_gestures invoked. path={path}")

    try:
        data = read_store_bytes(path)
    except ResourceUnavailableError:
        if debug:
            print("Error reading data")
        return []

    if debug:
        print(f"Read {len(data)} bytes")
    return decode_gestures(data, debug=debug)
