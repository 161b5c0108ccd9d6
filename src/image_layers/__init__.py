"""
image-layers: compose aligned image layers and write them as PNG or JPEG.

Basic usage::

    from image_layers import Alignment, ColorLayer, Group, VerticalAlignment
    from image_layers import write_to_png

    root = Group((200, 200), background="white")
    root.append(
        ColorLayer(
            (50, 50),
            color="red",
            alignment=Alignment.CENTER,
            vertical_alignment=VerticalAlignment.MIDDLE,
        )
    )
    write_to_png(root, "output.png")

Architecture:

- :py:mod:`image_layers.geometry`: Point, Size and Rectangle value types
- :py:mod:`image_layers.align`: The rectangle aligner
- :py:mod:`image_layers.api`: Layers, composition and file output
"""

from image_layers.align import compute_rect
from image_layers.api.layers import ColorLayer, Group, ImageLayer, Layer
from image_layers.api.layout import load_layout, open_layout
from image_layers.api.pil_io import save, write_to_jpeg, write_to_png
from image_layers.api.protocols import LayerProtocol
from image_layers.constants import Alignment, VerticalAlignment
from image_layers.geometry import Point, Rectangle, Size
from image_layers.version import __version__

__all__ = [
    "Alignment",
    "ColorLayer",
    "Group",
    "ImageLayer",
    "Layer",
    "LayerProtocol",
    "Point",
    "Rectangle",
    "Size",
    "VerticalAlignment",
    "compute_rect",
    "load_layout",
    "open_layout",
    "save",
    "write_to_jpeg",
    "write_to_png",
    "__version__",
]
