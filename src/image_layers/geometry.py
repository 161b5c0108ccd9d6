"""
Integer geometry primitives.

:py:class:`Point` and :py:class:`Size` are immutable value pairs, and
:py:class:`Rectangle` is an axis-aligned box given by its min and max corners.
The (left, top, right, bottom) tuple returned by :py:attr:`Rectangle.bbox` is
the box convention used by Pillow.

Example::

    from image_layers.geometry import Point, Rectangle, Size

    rect = Rectangle.from_size(Size(50, 30), Point(10, 10))
    assert rect.bbox == (10, 10, 60, 40)
"""

from attrs import define, field


@define(frozen=True)
class Point:
    """
    Integer (x, y) pair.

    .. py:attribute:: x
    .. py:attribute:: y
    """

    x: int = field(default=0, converter=int)
    y: int = field(default=0, converter=int)

    def __add__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __iter__(self):
        return iter((self.x, self.y))


@define(frozen=True)
class Size:
    """
    Integer (width, height) pair.

    .. py:attribute:: width
    .. py:attribute:: height
    """

    width: int = field(default=0, converter=int)
    height: int = field(default=0, converter=int)

    def __iter__(self):
        return iter((self.width, self.height))


@define(frozen=True)
class Rectangle:
    """
    Axis-aligned integer bounds given by the ``min`` and ``max`` corners.

    Width and height are ``max - min`` and may be zero. Callers are expected
    not to pass inverted corners; nothing is validated here.
    """

    min: Point = field(factory=Point)
    max: Point = field(factory=Point)

    @classmethod
    def from_size(cls, size: Size, origin: Point = Point(0, 0)) -> "Rectangle":
        """Rectangle of ``size`` whose min corner is ``origin``."""
        return cls(origin, Point(origin.x + size.width, origin.y + size.height))

    @classmethod
    def from_bbox(cls, bbox: tuple[int, int, int, int]) -> "Rectangle":
        """Rectangle from a (left, top, right, bottom) tuple."""
        if len(bbox) != 4:
            raise ValueError(f"Expected 4 values in bbox, got {len(bbox)}")
        left, top, right, bottom = bbox
        return cls(Point(left, top), Point(right, bottom))

    @property
    def left(self) -> int:
        return self.min.x

    @property
    def top(self) -> int:
        return self.min.y

    @property
    def right(self) -> int:
        return self.max.x

    @property
    def bottom(self) -> int:
        return self.max.y

    @property
    def width(self) -> int:
        return self.max.x - self.min.x

    @property
    def height(self) -> int:
        return self.max.y - self.min.y

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def bbox(self) -> tuple[int, int, int, int]:
        """(left, top, right, bottom) tuple."""
        return self.left, self.top, self.right, self.bottom

    def is_empty(self) -> bool:
        """Return True if the rectangle covers no pixels."""
        return self.width <= 0 or self.height <= 0

    def translate(self, dx: int, dy: int) -> "Rectangle":
        """Return a copy moved by (dx, dy)."""
        delta = Point(dx, dy)
        return Rectangle(self.min + delta, self.max + delta)

    def intersect(self, other: "Rectangle") -> "Rectangle":
        """
        Intersection of two rectangles, or an empty rectangle at the origin
        when they do not overlap.
        """
        inter = Rectangle(
            Point(max(self.left, other.left), max(self.top, other.top)),
            Point(min(self.right, other.right), min(self.bottom, other.bottom)),
        )
        if inter.is_empty():
            return Rectangle()
        return inter
