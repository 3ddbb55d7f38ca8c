from __future__ import annotations

from gesture_core.models import Point, Stroke
from gesture_core.protocol import NORMALIZED_SCALE


def stroke_max(stroke: Stroke) -> float:
    """Largest x or y coordinate of the stroke, 1.0 when there is no positive one."""
    max_coord = max((c for p in stroke.points for c in p), default=1.0)
    return max_coord if max_coord > 0 else 1.0


def normalize_stroke(stroke: Stroke, scale: float = NORMALIZED_SCALE) -> Stroke:
    """Rescale a stroke against its own maximum coordinate into [0, scale]."""
    m = stroke_max(stroke)
    return Stroke(tuple(Point(p.x / m * scale, p.y / m * scale) for p in stroke.points))
