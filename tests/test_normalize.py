from gesture_core.models import Point, Stroke
from gesture_import.normalize import normalize_stroke, stroke_max


def test_normalize_maps_max_to_scale():
    stroke = Stroke((Point(0.0, 0.0), Point(100.0, 50.0)))
    out = normalize_stroke(stroke)
    assert out.points == (Point(0.0, 0.0), Point(300.0, 150.0))


def test_normalize_uses_max_over_both_axes():
    stroke = Stroke((Point(10.0, 400.0), Point(20.0, 200.0)))
    out = normalize_stroke(stroke)
    assert out.points[0] == Point(7.5, 300.0)
    assert out.points[1] == Point(15.0, 150.0)


def test_normalize_range():
    stroke = Stroke(tuple(Point(float(i), float(i * 3 % 17)) for i in range(25)))
    out = normalize_stroke(stroke)
    coords = [c for p in out.points for c in p]
    assert all(0.0 <= c <= 300.0 for c in coords)
    assert max(coords) == 300.0


def test_normalize_empty_stroke():
    out = normalize_stroke(Stroke(()))
    assert out.points == ()
    assert stroke_max(Stroke(())) == 1.0


def test_normalize_non_positive_max_falls_back_to_one():
    stroke = Stroke((Point(0.0, 0.0), Point(-1.0, -2.0)))
    assert stroke_max(stroke) == 1.0
    out = normalize_stroke(stroke)
    assert out.points == (Point(0.0, 0.0), Point(-300.0, -600.0))


def test_normalize_custom_scale_and_purity():
    stroke = Stroke((Point(2.0, 4.0),))
    out = normalize_stroke(stroke, scale=1.0)
    assert out.points == (Point(0.5, 1.0),)
    assert stroke.points == (Point(2.0, 4.0),)


def test_normalize_is_per_stroke():
    a = normalize_stroke(Stroke((Point(10.0, 10.0),)))
    b = normalize_stroke(Stroke((Point(1000.0, 500.0),)))
    assert a.points == (Point(300.0, 300.0),)
    assert b.points == (Point(300.0, 150.0),)
