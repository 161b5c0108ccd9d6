"""
Composer module.

Positions child layers inside a parent canvas with
:py:func:`~image_layers.align.compute_rect` and blits their rendered pixels
with source-over alpha compositing. Layers are drawn in the given order, so
later layers cover earlier ones.
"""

import logging
from typing import Callable, Iterable, Optional

from PIL import Image

from image_layers.align import compute_rect
from image_layers.api.protocols import LayerProtocol
from image_layers.geometry import Point, Rectangle, Size

logger = logging.getLogger(__name__)

Color = tuple[int, ...]

TRANSPARENT: Color = (0, 0, 0, 0)


def _default_filter(layer: LayerProtocol) -> bool:
    return getattr(layer, "visible", True)


def _blend(target: Image.Image, image: Image.Image, offset: Point) -> Image.Image:
    # alpha_composite rejects negative destinations, crop the overhang first.
    if offset.x < 0:
        if image.width <= -offset.x:
            return target
        image = image.crop((-offset.x, 0, image.width, image.height))
        offset = Point(0, offset.y)

    if offset.y < 0:
        if image.height <= -offset.y:
            return target
        image = image.crop((0, -offset.y, image.width, image.height))
        offset = Point(offset.x, 0)

    if image.mode != "RGBA":
        image = image.convert("RGBA")
    target.alpha_composite(image, (offset.x, offset.y))
    return target


def layout(
    parent_rect: Rectangle, layers: Iterable[LayerProtocol]
) -> list[tuple[LayerProtocol, Rectangle]]:
    """
    Destination rectangles of ``layers`` inside ``parent_rect``.

    :param parent_rect: Bounds of the parent layer.
    :param layers: Child layers in drawing order.
    :return: list of (layer, destination rectangle) pairs in the same order.
    """
    return [
        (
            layer,
            compute_rect(
                parent_rect, layer.rect, layer.alignment, layer.vertical_alignment
            ),
        )
        for layer in layers
    ]


def compose(
    parent_rect: Rectangle,
    layers: Iterable[LayerProtocol],
    background: Optional[Color] = None,
    layer_filter: Optional[Callable[[LayerProtocol], bool]] = None,
) -> Image.Image:
    """
    Compose ``layers`` into a single RGBA :py:class:`PIL.Image.Image` of the
    size of ``parent_rect``.

    Example::

        image = compose(group.rect, [background, logo])

    In order to skip some layers, pass ``layer_filter`` which takes a layer
    and returns `True` to keep it::

        image = compose(rect, layers, layer_filter=lambda x: x.name != "debug")

    By default, visible layers are composed.

    :param parent_rect: Bounds of the parent. The canvas has its size and the
        children are positioned relative to its min corner.
    :param layers: iterable of layers in drawing order.
    :param background: RGBA fill of the canvas. Default is transparent.
    :param layer_filter: a callable that takes a layer and returns `bool`.
    :return: :py:class:`PIL.Image.Image` in RGBA mode.
    """
    layer_filter = layer_filter or _default_filter
    size = parent_rect.size
    canvas = Image.new(
        "RGBA",
        (max(size.width, 0), max(size.height, 0)),
        color=background if background is not None else TRANSPARENT,
    )
    bounds = Rectangle.from_size(Size(*canvas.size))

    for layer, dest in layout(parent_rect, (x for x in layers if layer_filter(x))):
        if dest.intersect(bounds).is_empty():
            logger.debug("Skipping %r outside of %s", layer, bounds.bbox)
            continue

        image = layer.render()
        logger.debug("Composing %r at %s", layer, dest.bbox)
        canvas = _blend(canvas, image, dest.min)

    return canvas
