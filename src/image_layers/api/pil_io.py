"""
PIL IO module.

Encodes rendered layers to PNG or JPEG files with Pillow.

The destination file is opened in a ``with`` block, written, and flushed
explicitly before it is closed, so an error raised while flushing or closing
reaches the caller instead of leaving a truncated file behind unnoticed. All
errors from :py:func:`open` and from the Pillow encoders propagate unchanged.

Example::

    from image_layers.api.pil_io import save, write_to_jpeg, write_to_png

    write_to_png(root, "out.png")
    write_to_jpeg(root, "out.jpg", quality=90)
    save(root, "out.jpeg", quality=90)  # format from the extension
"""

import logging
import os
from typing import IO, Any, Callable, Optional, Union

from attrs import define, field
from PIL import Image

from image_layers.api.protocols import LayerProtocol
from image_layers.constants import ImageFormat
from image_layers.registry import new_registry
from image_layers.validators import range_

logger = logging.getLogger(__name__)

PathLike = Union[str, bytes, "os.PathLike[Any]"]
Renderable = Union[LayerProtocol, Image.Image]

ENCODERS, register = new_registry(attribute="format")

EXTENSIONS = {
    ".png": ImageFormat.PNG,
    ".jpg": ImageFormat.JPEG,
    ".jpeg": ImageFormat.JPEG,
}


@define
class JPEGOptions:
    """
    JPEG encoder settings.

    .. py:attribute:: quality

        Quality on the usual 1-100 JPEG scale.

    .. py:attribute:: background

        RGB color that transparent pixels are flattened onto, as JPEG has no
        alpha channel. Black by default.
    """

    quality: int = field(default=75, converter=int, validator=range_(1, 100))
    background: tuple[int, int, int] = field(default=(0, 0, 0), converter=tuple)


def to_image(layer: Renderable) -> Image.Image:
    """
    Render ``layer`` unless it is already a PIL image.

    :raises TypeError: If ``layer`` is neither a layer nor an image.
    :raises ValueError: If the rendered image has no pixels.
    """
    if isinstance(layer, Image.Image):
        image = layer
    elif isinstance(layer, LayerProtocol):
        image = layer.render()
    else:
        raise TypeError(
            f"Expected LayerProtocol or PIL Image, got {type(layer).__name__}"
        )
    if image.width <= 0 or image.height <= 0:
        raise ValueError(f"Cannot encode an empty image of size {image.size}")
    return image


def flatten(image: Image.Image, background: tuple[int, ...] = (0, 0, 0)) -> Image.Image:
    """
    Drop the alpha channel by compositing ``image`` over ``background``.

    :return: RGB :py:class:`PIL.Image.Image`.
    """
    if image.mode == "RGB":
        return image
    if "A" not in image.getbands() and image.mode != "P":
        return image.convert("RGB")
    backdrop = Image.new("RGBA", image.size, tuple(background[:3]) + (255,))
    return Image.alpha_composite(backdrop, image.convert("RGBA")).convert("RGB")


def _write(path: PathLike, encode: Callable[[IO[bytes]], None]) -> None:
    with open(path, "wb") as f:
        encode(f)
        f.flush()
    logger.debug("Wrote %s", os.fsdecode(path))


@register(ImageFormat.PNG)
def write_to_png(layer: Renderable, path: PathLike) -> None:
    """
    Render ``layer`` and write it as a lossless PNG file, overwriting ``path``.

    :param layer: a layer or a rendered :py:class:`PIL.Image.Image`.
    :param path: destination filename.
    :raises OSError: If the file cannot be created or written.
    :raises ValueError: If the rendered image is empty.
    """
    image = to_image(layer)
    _write(path, lambda f: image.save(f, format=ImageFormat.PNG.value))


@register(ImageFormat.JPEG)
def write_to_jpeg(
    layer: Renderable,
    path: PathLike,
    quality: int = 75,
    background: tuple[int, int, int] = (0, 0, 0),
) -> None:
    """
    Render ``layer`` and write it as a JPEG file, overwriting ``path``.

    Transparent pixels are flattened onto ``background``.

    :param layer: a layer or a rendered :py:class:`PIL.Image.Image`.
    :param path: destination filename.
    :param quality: JPEG quality in [1, 100].
    :param background: RGB color for transparent areas.
    :raises OSError: If the file cannot be created or written.
    :raises ValueError: If quality is out of range or the image is empty.
    """
    options = JPEGOptions(quality=quality, background=background)
    image = flatten(to_image(layer), options.background)
    _write(
        path,
        lambda f: image.save(f, format=ImageFormat.JPEG.value, quality=options.quality),
    )


def get_format(path: PathLike, format: Optional[str] = None) -> ImageFormat:
    """
    Resolve the output format from an explicit name or the file extension.

    :raises ValueError: If the format is unknown.
    """
    if format is not None:
        name = format.upper()
        if name == "JPG":
            name = "JPEG"
        try:
            return ImageFormat(name)
        except ValueError:
            raise ValueError(f"Unsupported image format: {format!r}") from None

    ext = os.path.splitext(os.fsdecode(path))[1].lower()
    if ext not in EXTENSIONS:
        raise ValueError(
            f"Cannot determine image format from extension {ext!r}, "
            f"expected one of {sorted(EXTENSIONS)}"
        )
    return EXTENSIONS[ext]


def save(
    layer: Renderable, path: PathLike, format: Optional[str] = None, **kwargs: Any
) -> None:
    """
    Write ``layer`` to ``path`` with the encoder for ``format``.

    :param layer: a layer or a rendered :py:class:`PIL.Image.Image`.
    :param path: destination filename.
    :param format: 'PNG' or 'JPEG'. Default is guessed from the extension.
    :param kwargs: encoder options, e.g. ``quality`` for JPEG.
    """
    image_format = get_format(path, format)
    logger.debug("Saving %r as %s", layer, image_format.value)
    ENCODERS[image_format](layer, path, **kwargs)
