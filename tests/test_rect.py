import pytest

from quadgrid.rect import Rect


@pytest.mark.parametrize(
    "rect, x, y, want",
    [
        (Rect(0, 0, 10, 10), 2, 2, True),
        (Rect(5, 5, 10, 10), 1, 1, False),
        (Rect(5, 5, 10, 10), 15, 15, False),
        (Rect(5, 5, 10, 10), 6, 15, False),
        (Rect(5, 5, 10, 10), 15, 6, False),
    ],
)
def test_contains_point(rect, x, y, want):
    assert rect.contains_point(x, y) is want


def test_contains_point_edges_inclusive():
    r = Rect(0, 0, 10, 10)
    assert r.contains_point(0, 0) is True
    assert r.contains_point(10, 10) is True


@pytest.mark.parametrize(
    "a, b, want",
    [
        (Rect(0, 0, 10, 10), Rect(2, 2, 8, 8), True),
        (Rect(5, 5, 10, 10), Rect(1, 1, 6, 6), False),
        (Rect(5, 5, 10, 10), Rect(6, 6, 12, 12), False),
    ],
)
def test_contains_rect(a, b, want):
    assert a.contains_rect(b) is want


@pytest.mark.parametrize(
    "a, b, want",
    [
        (Rect(0, 0, 10, 10), Rect(2, 2, 8, 8), True),
        (Rect(5, 5, 10, 10), Rect(1, 1, 6, 6), True),
        (Rect(5, 5, 10, 10), Rect(6, 6, 12, 12), True),
        (Rect(5, 5, 10, 10), Rect(15, 0, 4, 4), False),
    ],
)
def test_overlaps(a, b, want):
    assert a.overlaps(b) is want


@pytest.mark.parametrize(
    "rect, want",
    [
        (
            Rect(0, 0, 8, 8),
            (Rect(0, 0, 4, 4), Rect(4, 0, 8, 4), Rect(0, 4, 4, 8), Rect(4, 4, 8, 8)),
        ),
        (
            Rect(0, 0, 20, 20),
            (
                Rect(0, 0, 10, 10),
                Rect(10, 0, 20, 10),
                Rect(0, 10, 10, 20),
                Rect(10, 10, 20, 20),
            ),
        ),
    ],
)
def test_split(rect, want):
    assert rect.split() == want


def test_dimensions():
    r = Rect.from_size(0, 0, 8.0, 9.0)
    assert r.width == pytest.approx(8.0)
    assert r.height == pytest.approx(9.0)


def test_from_size_corners():
    assert Rect.from_size(1, 2, 3, 4) == Rect(1, 2, 4, 6)


def test_pad():
    r = Rect.from_size(0, 0, 8.0, 9.0).pad(10.0)
    assert r == Rect(-10, -10, 18, 19)
    assert r.width == pytest.approx(28.0)
    assert r.height == pytest.approx(29.0)


def test_center():
    assert Rect(2, 4, 6, 10).center == (4.0, 7.0)


@pytest.mark.parametrize(
    "case",
    [
        Rect.from_size(-1, -1, 2, 4),
        Rect.from_size(-1, 4, 4, 5),
        Rect.from_size(4, -2, 10, 10),
        Rect.from_size(19, 5, 6, 6),
        Rect.from_size(6, 14, 5, 5),
        Rect.from_size(25, 16, 5, 5),
    ],
)
def test_clip_stays_in_area(case):
    area = Rect.from_size(0, 0, 20.0, 15.0)
    clipped = case.clip(area)
    assert clipped.x0 >= area.x0
    assert clipped.x1 <= area.x1
    assert clipped.y0 >= area.y0
    assert clipped.y1 <= area.y1


def test_clip_value():
    assert Rect(-1, -1, 1, 3).clip(Rect(0, 0, 20, 15)) == Rect(0, 0, 1, 3)