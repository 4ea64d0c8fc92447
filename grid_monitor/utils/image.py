import numpy as np
import numpy.typing as npt
from PIL import Image, ImageColor
from typing import Tuple

from grid_monitor.styles import TRANSPARENT
from grid_monitor.types import Color

# Type aliases for clarity
UInt8Array = npt.NDArray[np.uint8]
BoolArray = npt.NDArray[np.bool_]

RGBA = Tuple[int, int, int, int]


def to_rgba(color: Color) -> RGBA:
    """Parse a CSS color name or ``#rrggbb`` string into an opaque RGBA tuple."""
    r, g, b = ImageColor.getrgb(color)[:3]
    return (r, g, b, 255)


def clear_image(image: Image.Image) -> Image.Image:
    """Reset every pixel of ``image`` to fully transparent, in place."""
    image.paste(TRANSPARENT, (0, 0, image.width, image.height))
    return image


def opaque_mask(image: Image.Image) -> BoolArray:
    """Boolean ``[y, x]`` mask of pixels with non-zero alpha."""
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    arr: UInt8Array = np.asarray(image, dtype=np.uint8)
    return arr[..., 3] > 0


def is_blank(image: Image.Image) -> bool:
    return not bool(opaque_mask(image).any())


def pixel(image: Image.Image, x: int, y: int) -> RGBA:
    arr: UInt8Array = np.asarray(image.convert("RGBA"), dtype=np.uint8)
    r, g, b, a = (int(v) for v in arr[y, x])
    return (r, g, b, a)
