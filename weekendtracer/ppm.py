"""
Plain-text PPM (P3) serialisation.
"""

from __future__ import annotations
from pathlib import Path
from typing import Union

from .image import Image
from .vec3 import Colour


def _quantize(channel: float) -> int:
    if channel != channel:  # nan
        return 0
    return round(min(max(channel * 256.0, 0.0), 255.0))


def format_pixel(pixel: Colour) -> str:
    """Format one colour as an `R G B` triplet of 0-255 integers."""
    return f"{_quantize(pixel.r)} {_quantize(pixel.g)} {_quantize(pixel.b)}"


def image_to_ppm(image: Image) -> str:
    """Serialise an image as a P3 PPM document, one pixel per line."""
    width, height = image.get_dimensions()
    lines = [f"P3\n{width} {height}\n255"]
    quantized = image.to_uint8()
    for row in quantized:
        for r, g, b in row:
            lines.append(f"{r} {g} {b}")
    return "\n".join(lines)


def write_ppm(image: Image, filename: Union[str, Path]) -> None:
    """Write an image to disk in PPM format."""
    Path(filename).write_text(image_to_ppm(image), encoding='ascii')
