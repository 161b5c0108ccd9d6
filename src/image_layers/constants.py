"""
Various constants for image_layers
"""

from enum import Enum, IntEnum


class Alignment(IntEnum):
    """
    Horizontal alignment of a layer inside its parent.

    ``DEFAULT`` keeps the layer's own horizontal coordinates, while ``LEFT``
    always pins the layer to the left edge of the parent.
    """

    DEFAULT = 0
    LEFT = 1
    CENTER = 2
    RIGHT = 3


class VerticalAlignment(IntEnum):
    """
    Vertical alignment of a layer inside its parent.

    ``DEFAULT`` keeps the layer's own vertical coordinates, while ``TOP``
    always pins the layer to the top edge of the parent.
    """

    DEFAULT = 0
    TOP = 1
    MIDDLE = 2
    BOTTOM = 3


class ImageFormat(str, Enum):
    """Output format names understood by :py:func:`image_layers.api.pil_io.save`."""

    PNG = "PNG"
    JPEG = "JPEG"
