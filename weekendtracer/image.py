"""
Image buffer produced by a render.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Union

import numpy as np

from .vec3 import Colour

logger = logging.getLogger(__name__)


class Image:
    """A width x height buffer of gamma-corrected colours.

    Pixels are stored row-major in a (height, width, 3) float64 array, so
    pixel (0, 0) is the top-left corner of the picture.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._pixels = np.zeros((height, width, 3), dtype=np.float64)

    @classmethod
    def from_array(cls, pixels: np.ndarray) -> Image:
        """Wrap an existing (height, width, 3) array."""
        pixels = np.asarray(pixels, dtype=np.float64)
        if pixels.ndim != 3 or pixels.shape[2] != 3:
            raise ValueError(f"Expected a (height, width, 3) array, got shape {pixels.shape}")
        image = cls(pixels.shape[1], pixels.shape[0])
        image._pixels = pixels
        return image

    @property
    def pixels(self) -> np.ndarray:
        """The underlying (height, width, 3) buffer."""
        return self._pixels

    def get_dimensions(self) -> tuple[int, int]:
        return self.width, self.height

    def get_pixel(self, x: int, y: int) -> Colour:
        return Colour.from_array(self._pixels[y, x].copy())

    def set_pixel(self, x: int, y: int, colour: Colour) -> None:
        self._pixels[y, x] = colour.to_array()

    def to_uint8(self) -> np.ndarray:
        """Quantize to 8-bit channels.

        Each channel is scaled by 256, clamped to [0, 255] and rounded, so
        1.0 maps to 255 and values just below 1.0 do not collapse to 254.
        NaN pixels quantize to 0.
        """
        scaled = np.nan_to_num(self._pixels * 256.0, nan=0.0)
        return np.rint(np.clip(scaled, 0.0, 255.0)).astype(np.uint8)

    def save(self, filename: Union[str, Path]) -> None:
        """Save the image; `.ppm` uses the plain-text writer, anything else Pillow."""
        from PIL import Image as PILImage

        path = Path(filename)
        if path.suffix.lower() == '.ppm':
            from .ppm import write_ppm
            write_ppm(self, path)
        else:
            PILImage.fromarray(self.to_uint8(), 'RGB').save(path)
        logger.info("Saved %dx%d image to %s", self.width, self.height, path)

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height})"
