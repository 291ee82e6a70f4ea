import pytest

from quadkit.geometry import Rect, RectOffset, Vec2


def test_vec2_add_sub_round_trip():
    a = Vec2(1.5, -2.0)
    b = Vec2(4.0, 7.25)
    assert (a + b) - b == a
    assert -(-a) == a


def test_vec2_distance():
    assert Vec2(0.0, 0.0).distance(Vec2(3.0, 4.0)) == pytest.approx(5.0)
    p = Vec2(2.0, 9.0)
    assert p.distance(p) == 0.0
    q = Vec2(-1.0, 3.0)
    assert p.distance(q) == pytest.approx(q.distance(p))


def test_point_and_size():
    r = Rect(10.0, 20.0, 30.0, 40.0)
    assert r.point() == Vec2(r.x, r.y)
    assert r.size() == Vec2(r.w, r.h)


def test_contains_includes_top_left_excludes_bottom_right():
    r = Rect(10.0, 20.0, 30.0, 40.0)
    assert r.contains(r.point())
    assert not r.contains(Vec2(r.x + r.w, r.y))
    assert not r.contains(Vec2(r.x, r.y + r.h))
    assert not r.contains(Vec2(r.x - 1.0, r.y))


def test_overlaps_is_symmetric_and_inclusive():
    a = Rect(0.0, 0.0, 10.0, 10.0)
    touching = Rect(10.0, 0.0, 5.0, 5.0)
    far = Rect(100.0, 100.0, 5.0, 5.0)
    assert a.overlaps(touching) and touching.overlaps(a)
    assert not a.overlaps(far)
    assert not far.overlaps(a)


def test_intersect_with_self_and_commutative():
    a = Rect(0.0, 0.0, 10.0, 10.0)
    b = Rect(5.0, 5.0, 10.0, 10.0)
    assert a.intersect(a) == a
    assert a.intersect(b) == b.intersect(a)
    inner = a.intersect(b)
    assert inner.point() == b.point()
    assert inner.right == a.right


def test_intersect_disjoint_is_none():
    a = Rect(0.0, 0.0, 10.0, 10.0)
    assert a.intersect(Rect(50.0, 50.0, 1.0, 1.0)) is None


def test_combine_with_encloses_both():
    a = Rect(0.0, 5.0, 10.0, 10.0)
    b = Rect(-3.0, 8.0, 4.0, 20.0)
    c = a.combine_with(b)
    assert c == b.combine_with(a)
    assert c.intersect(a) == a
    assert c.intersect(b) == b
    assert a.combine_with(a) == a


def test_offset_round_trip():
    r = Rect(1.0, 2.0, 3.0, 4.0)
    shift = Vec2(7.0, -2.0)
    moved = r.offset(shift)
    assert moved.size() == r.size()
    assert moved.point() == r.point() + shift
    assert moved.offset(-shift) == r


def test_rect_offset_fields():
    off = RectOffset(1.0, 2.0, 3.0, 4.0)
    assert (off.left, off.right, off.top, off.bottom) == (1.0, 2.0, 3.0, 4.0)
    assert RectOffset() == RectOffset(0.0, 0.0, 0.0, 0.0)