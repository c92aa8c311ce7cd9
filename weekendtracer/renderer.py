"""
Renderer module - tile-based, optionally multi-threaded driver around Camera.

Camera.capture_image is the sequential reference loop; Renderer produces the
same per-pixel result but splits the sensor into tiles that can be rendered
on a thread pool. Every pixel is written by exactly one tile, so no locking
is needed beyond the final gather.
"""

from __future__ import annotations
import logging
import os
import platform
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

import numpy as np

from .camera import Camera
from .image import Image
from .scene import Scene

logger = logging.getLogger(__name__)

Tile = Tuple[int, int, int, int]


@dataclass
class RenderSettings:
    """Configuration for the renderer."""
    tile_size: int = 32
    num_threads: int = 0  # 0 = auto-detect
    seed: Optional[int] = None

    def __post_init__(self):
        if self.tile_size <= 0:
            raise ValueError(f"tile_size must be positive, got {self.tile_size}")
        if self.num_threads < 0:
            raise ValueError(f"num_threads must be >= 0, got {self.num_threads}")
        if self.num_threads == 0:
            self.num_threads = os.cpu_count() or 4


class Renderer:
    """Tile renderer with multi-threading support."""

    def __init__(self, settings: RenderSettings = None):
        """Create a renderer with the given settings.

        Args:
            settings: Render configuration (uses defaults if None)
        """
        self.settings = settings if settings else RenderSettings()
        self._progress_callback: Optional[Callable[[float], None]] = None

    def set_progress_callback(self, callback: Callable[[float], None]) -> None:
        """Set a callback function for progress updates.

        Args:
            callback: Function that takes progress as float (0.0 to 1.0)
        """
        self._progress_callback = callback

    def render(self, scene: Scene, camera: Camera) -> Image:
        """Render the scene through the camera.

        Args:
            scene: The scene to render
            camera: The camera to render from

        Returns:
            Gamma-corrected image of the camera's sensor size
        """
        width = camera.sensor_width
        height = camera.sensor_height

        if self.settings.seed is not None:
            np.random.seed(self.settings.seed)

        image = Image(width, height)
        tiles = self._generate_tiles(width, height)
        total_tiles = len(tiles)
        completed_tiles = [0]  # Use list for mutable in closure
        progress_lock = threading.Lock()

        logger.info(
            "Rendering %dx%d with %d tiles on %d thread(s), %d samples/pixel, depth %d",
            width, height, total_tiles, self.settings.num_threads,
            camera.shutter_length, camera.max_ray_depth,
        )
        start_time = time.perf_counter()

        def render_tile(tile: Tile) -> Tuple[Tile, np.ndarray]:
            """Render a single tile."""
            x0, y0, x1, y1 = tile
            tile_image = np.zeros((y1 - y0, x1 - x0, 3), dtype=np.float64)

            for j in range(y1 - y0):
                for i in range(x1 - x0):
                    tile_image[j, i] = camera.render_pixel(x0 + i, y0 + j, scene).to_array()

            with progress_lock:
                completed_tiles[0] += 1
                progress = completed_tiles[0] / total_tiles
            if self._progress_callback:
                self._progress_callback(progress)

            return tile, tile_image

        if self.settings.num_threads > 1 and total_tiles > 1:
            with ThreadPoolExecutor(max_workers=self.settings.num_threads) as executor:
                results = list(executor.map(render_tile, tiles))
        else:
            results = [render_tile(tile) for tile in tiles]

        # Combine tiles into final image
        for (x0, y0, x1, y1), tile_image in results:
            image.pixels[y0:y1, x0:x1] = tile_image

        logger.info("Render finished in %.2fs", time.perf_counter() - start_time)
        return image

    def _generate_tiles(self, width: int, height: int) -> list[Tile]:
        """Generate tiles for parallel rendering.

        Args:
            width: Image width
            height: Image height

        Returns:
            List of tiles as (x0, y0, x1, y1) tuples
        """
        tile_size = self.settings.tile_size
        tiles = []

        for y in range(0, height, tile_size):
            for x in range(0, width, tile_size):
                x1 = min(x + tile_size, width)
                y1 = min(y + tile_size, height)
                tiles.append((x, y, x1, y1))

        return tiles


def get_platform_info() -> dict:
    """Get information about the current platform.

    Returns:
        Dictionary with platform details
    """
    return {
        'system': platform.system(),
        'machine': platform.machine(),
        'python_version': platform.python_version(),
        'numpy_version': np.__version__,
        'cpu_count': os.cpu_count(),
    }
