import logging
from typing import Optional, Union

import numpy as np
from PIL import Image

from image_layers.api.protocols import LayerProtocol

logger = logging.getLogger(__name__)

CHANNELS = (None, "color", "alpha")


def get_array(
    layer: Union[LayerProtocol, Image.Image], channel: Optional[str] = None
) -> np.ndarray:
    """
    Render ``layer`` and return its pixels as a float32 array in [0, 1].

    :param layer: a layer, or an already rendered PIL image.
    :param channel: 'color' for RGB, 'alpha' for the alpha channel, or None
        for RGBA.
    :return: array of shape (height, width, channels).
    """
    if channel not in CHANNELS:
        raise ValueError(f"Unknown channel {channel!r}, expected one of {CHANNELS}")

    if isinstance(layer, Image.Image):
        image = layer
    elif isinstance(layer, LayerProtocol):
        image = layer.render()
    else:
        raise TypeError(
            f"Expected LayerProtocol or PIL Image, got {type(layer).__name__}"
        )

    array = _to_array(image)
    if channel == "color":
        return array[:, :, :3]
    elif channel == "alpha":
        return array[:, :, 3:]
    return array


def _to_array(image: Image.Image) -> np.ndarray:
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    array = np.asarray(image, dtype=np.float32) / 255.0
    return array.reshape((image.height, image.width, 4))
