import logging

import attrs
import pytest

from image_layers.geometry import Point, Rectangle, Size

logger = logging.getLogger(__name__)


def test_point() -> None:
    point = Point(3, 4)
    assert point.x == 3
    assert point.y == 4
    assert Point() == Point(0, 0)
    assert point + Point(1, 1) == Point(4, 5)
    assert point - Point(5, 5) == Point(-2, -1)
    x, y = point
    assert (x, y) == (3, 4)
    assert Point(2.9, -1.2) == Point(2, -1)


def test_size() -> None:
    size = Size(20, 10)
    assert size.width == 20
    assert size.height == 10
    assert tuple(size) == (20, 10)
    assert Size() == Size(0, 0)


@pytest.mark.parametrize("value", [Point(1, 2), Size(1, 2), Rectangle()])
def test_frozen(value: object) -> None:
    field_name = attrs.fields(type(value))[0].name
    with pytest.raises(attrs.exceptions.FrozenInstanceError):
        setattr(value, field_name, 5)


def test_hashable() -> None:
    assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2
    assert hash(Rectangle.from_bbox((0, 0, 1, 1))) == hash(
        Rectangle(Point(0, 0), Point(1, 1))
    )


def test_rectangle_properties() -> None:
    rect = Rectangle.from_size(Size(50, 30), Point(10, 20))
    assert rect.min == Point(10, 20)
    assert rect.max == Point(60, 50)
    assert rect.left == 10
    assert rect.top == 20
    assert rect.right == 60
    assert rect.bottom == 50
    assert rect.width == 50
    assert rect.height == 30
    assert rect.size == Size(50, 30)
    assert rect.bbox == (10, 20, 60, 50)
    assert not rect.is_empty()


def test_rectangle_from_bbox() -> None:
    assert Rectangle.from_bbox((1, 2, 3, 4)) == Rectangle(Point(1, 2), Point(3, 4))
    with pytest.raises(ValueError):
        Rectangle.from_bbox((1, 2, 3))  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "bbox, expected",
    [
        ((0, 0, 0, 0), True),
        ((0, 0, 10, 0), True),
        ((5, 5, 4, 10), True),
        ((0, 0, 1, 1), False),
    ],
)
def test_rectangle_is_empty(bbox: tuple[int, int, int, int], expected: bool) -> None:
    assert Rectangle.from_bbox(bbox).is_empty() is expected


def test_rectangle_degenerate_extent_is_kept() -> None:
    rect = Rectangle.from_bbox((10, 10, 4, 10))
    assert rect.width == -6
    assert rect.height == 0


def test_rectangle_translate() -> None:
    rect = Rectangle.from_bbox((0, 0, 10, 5)).translate(3, -2)
    assert rect.bbox == (3, -2, 13, 3)


def test_rectangle_intersect() -> None:
    a = Rectangle.from_bbox((0, 0, 10, 10))
    b = Rectangle.from_bbox((5, -5, 20, 7))
    assert a.intersect(b).bbox == (5, 0, 10, 7)
    assert b.intersect(a) == a.intersect(b)
    c = Rectangle.from_bbox((10, 0, 20, 10))
    assert a.intersect(c) == Rectangle()
