from typing import Any

import numpy as np
from PIL import Image

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
WHITE = (255, 255, 255, 255)
TRANSPARENT = (0, 0, 0, 0)


def pixel(image: Image.Image, x: int, y: int) -> Any:
    return image.getpixel((x, y))


def painted_bbox(image: Image.Image) -> tuple[int, int, int, int]:
    """Bounding box of the pixels with non-zero alpha."""
    alpha = np.asarray(image.getchannel("A"))
    ys, xs = np.nonzero(alpha)
    return int(xs.min()), int(ys.min()), int(xs.max()) + 1, int(ys.max()) + 1
