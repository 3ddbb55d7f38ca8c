from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class Point(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class Stroke:
    points: tuple[Point, ...] = ()

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class Gesture:
    id: str
    strokes: tuple[Stroke, ...] = ()

    @property
    def all_points(self) -> list[Point]:
        """Points of every stroke concatenated in stroke order."""
        return [p for stroke in self.strokes for p in stroke.points]

    @property
    def point_count(self) -> int:
        return sum(len(stroke) for stroke in self.strokes)
