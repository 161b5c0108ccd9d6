"""
Rectangle aligner.

:py:func:`compute_rect` places a source rectangle inside a parent rectangle
according to a horizontal and a vertical alignment. Each axis is computed
independently. The result is expressed in the parent's local coordinates, so
``LEFT`` and ``TOP`` put the rectangle at 0 regardless of where the parent
itself sits.

Example::

    from image_layers import Alignment, Point, Rectangle, Size, VerticalAlignment
    from image_layers.align import compute_rect

    parent = Rectangle.from_size(Size(200, 200))
    child = Rectangle.from_size(Size(50, 50))
    dest = compute_rect(parent, child, Alignment.CENTER, VerticalAlignment.MIDDLE)
    assert dest.bbox == (75, 75, 125, 125)
"""

from typing import Any

from image_layers.constants import Alignment, VerticalAlignment
from image_layers.geometry import Point, Rectangle

__all__ = ["compute_rect"]


def _half(value: int) -> int:
    # Truncates toward zero, unlike floor division.
    quotient = abs(value) // 2
    return -quotient if value < 0 else quotient


def _align_axis(
    parent_extent: int,
    source_min: int,
    source_max: int,
    start: bool,
    center: bool,
    end: bool,
) -> tuple[int, int]:
    extent = source_max - source_min
    if start:
        return 0, extent
    if center:
        lo = _half(parent_extent - extent)
        return lo, lo + extent
    if end:
        lo = parent_extent - extent
        return lo, lo + extent
    return source_min, source_max


def compute_rect(
    parent_rect: Rectangle,
    source_rect: Rectangle,
    alignment: Any = Alignment.DEFAULT,
    vertical_alignment: Any = VerticalAlignment.DEFAULT,
) -> Rectangle:
    """
    Compute where ``source_rect`` lands inside ``parent_rect``.

    :param parent_rect: Bounds of the parent. Only its width and height are used.
    :param source_rect: Bounds of the layer being placed.
    :param alignment: :py:class:`~image_layers.constants.Alignment`. Values
        that are not members of the enum behave like ``DEFAULT``.
    :param vertical_alignment:
        :py:class:`~image_layers.constants.VerticalAlignment`. Values that are
        not members of the enum behave like ``DEFAULT``.
    :return: A new :py:class:`~image_layers.geometry.Rectangle` with the same
        width and height as ``source_rect``.
    """
    min_x, max_x = _align_axis(
        parent_rect.width,
        source_rect.min.x,
        source_rect.max.x,
        alignment == Alignment.LEFT,
        alignment == Alignment.CENTER,
        alignment == Alignment.RIGHT,
    )
    min_y, max_y = _align_axis(
        parent_rect.height,
        source_rect.min.y,
        source_rect.max.y,
        vertical_alignment == VerticalAlignment.TOP,
        vertical_alignment == VerticalAlignment.MIDDLE,
        vertical_alignment == VerticalAlignment.BOTTOM,
    )
    return Rectangle(Point(min_x, min_y), Point(max_x, max_y))
