"""
Camera module for generating primary rays and tracing them.

Supports:
- Perspective projection with a configurable vertical field of view
- Depth of field (aperture jitter around the lens center)
- Anti-aliasing (sub-pixel jitter)
- Depth-bounded recursive path tracing against a Scene

A Camera is configured through a staged builder:

    camera = (
        Camera.builder()
        .input_position(center, forward, up)
        .input_sensor(width, height, shutter_length, max_ray_depth)
        .input_lens(focal_distance, aperture, field_of_view)
        .build()
    )

Each stage object only exposes the next step, so a partially configured
camera cannot be built.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import math

import numpy as np

from .vec3 import Colour, Direction, Point
from .ray import Ray
from .scene import Scene
from .image import Image

logger = logging.getLogger(__name__)

SHADOW_ACNE_EPSILON = 0.001

_BLACK = Colour(0.0, 0.0, 0.0)
_WHITE = Colour(1.0, 1.0, 1.0)
_SKY_BLUE = Colour(0.5, 0.7, 1.0)


@dataclass(frozen=True)
class Camera:
    """A camera defined by its pose, sensor and lens.

    Attributes:
        center: Position of the lens center in world space
        forward: Unit direction the camera looks towards
        up: Unit direction of the top of the sensor
        left: Unit direction of the left of the sensor (up x forward)
        sensor_width, sensor_height: Image resolution in pixels
        shutter_length: Samples collected per pixel
        max_ray_depth: Number of bounces a ray may do
        focal_distance: Distance of the plane in perfect focus
        aperture: Lens radius used to jitter ray origins (0 = pinhole)
        field_of_view: Vertical view angle in degrees
        anti_aliasing: Jitter sample positions inside each pixel
    """
    center: Point
    forward: Direction
    up: Direction
    left: Direction
    sensor_width: int
    sensor_height: int
    shutter_length: int
    max_ray_depth: int
    focal_distance: float
    aperture: float
    field_of_view: float
    anti_aliasing: bool = True

    @staticmethod
    def builder() -> PositionStage:
        """Start configuring a camera."""
        return PositionStage()

    @staticmethod
    def _generate_jitter() -> tuple[float, float]:
        jitter_x, jitter_y = np.random.random(2) * 2.0 - 1.0
        return float(jitter_x), float(jitter_y)

    def get_ray_for_pixel(self, x: int, y: int) -> Ray:
        """Generate a sample ray through pixel (x, y); (0, 0) is the top-left pixel."""
        aspect_ratio = self.sensor_width / self.sensor_height

        vertical_extent = math.tan(math.radians(self.field_of_view) / 2.0) * self.focal_distance
        horizontal_extent = vertical_extent * aspect_ratio

        if self.anti_aliasing:
            jitter_x, jitter_y = self._generate_jitter()
        else:
            jitter_x, jitter_y = 0.0, 0.0
        horizontal_offset = ((x + 0.5 + jitter_x) / self.sensor_width) * 2.0 - 1.0
        vertical_offset = ((y + 0.5 + jitter_y) / self.sensor_height) * 2.0 - 1.0

        jitter_x, jitter_y = self._generate_jitter()
        aperture_source = (
            self.center
            + self.up * (self.aperture * jitter_y)
            + self.left * (self.aperture * jitter_x)
        )

        # up and left point towards the top-left pixel, so the offsets are
        # negated to walk from top-left to bottom-right
        viewport_target = (
            self.center
            + self.forward * self.focal_distance
            + self.up * (vertical_extent * -vertical_offset)
            + self.left * (horizontal_extent * -horizontal_offset)
        )

        return Ray(aperture_source, aperture_source.point_towards(viewport_target).unit_vector())

    @staticmethod
    def trace_ray(ray: Ray, scene: Scene, depth: int) -> Colour:
        """Compute the colour carried back along a ray.

        Args:
            ray: The ray to trace (expected to have a unit direction)
            scene: The scene to trace against
            depth: Remaining bounces; 0 returns black

        Returns:
            The linear-light colour for this ray
        """
        if depth <= 0:
            return _BLACK

        hit = scene.find_intersection(ray, SHADOW_ACNE_EPSILON, math.inf)
        if hit is None:
            return Camera.background(ray)

        scatter = hit.scatter()
        if scatter is None:
            return _BLACK
        return scatter.attenuation * Camera.trace_ray(scatter.scattered, scene, depth - 1)

    @staticmethod
    def background(ray: Ray) -> Colour:
        """Vertical white-to-sky-blue gradient, the only light in a scene."""
        a = 0.5 * (ray.direction.unit_vector().y + 1.0)
        return (1.0 - a) * _WHITE + a * _SKY_BLUE

    def render_pixel(self, x: int, y: int, scene: Scene) -> Colour:
        """Average shutter_length samples of a pixel and gamma-correct the result."""
        total = _BLACK
        for _ in range(self.shutter_length):
            ray = self.get_ray_for_pixel(x, y).unit_ray()
            total = total + self.trace_ray(ray, scene, self.max_ray_depth)
        return (total / self.shutter_length).linear_to_gamma()

    def capture_image(self, scene: Scene) -> Image:
        """Render every pixel of the sensor sequentially.

        Args:
            scene: The (read-only) scene to render

        Returns:
            The gamma-corrected image
        """
        logger.info(
            "Capturing %dx%d image, %d samples/pixel, depth %d, %d objects",
            self.sensor_width, self.sensor_height,
            self.shutter_length, self.max_ray_depth, len(scene),
        )
        image = Image(self.sensor_width, self.sensor_height)
        for idx in range(self.sensor_width * self.sensor_height):
            x = idx % self.sensor_width
            y = idx // self.sensor_width
            image.set_pixel(x, y, self.render_pixel(x, y, scene))
        return image


class PositionStage:
    """First builder stage: where the camera is and where it points."""

    def input_position(self, center: Point, forward: Direction, up: Direction) -> SensorStage:
        """Set the camera pose.

        Args:
            center: Point in space where the camera is
            forward: Direction the camera is pointing towards
            up: Direction the top of the camera is pointing towards

        When `up` is not perpendicular to `forward` the image gets a
        tilt-shift-like shear; the basis is not re-orthogonalised.
        """
        return SensorStage(
            center=center,
            forward=forward.unit_vector(),
            up=up.unit_vector(),
            left=up.cross(forward).unit_vector(),
        )


class SensorStage:
    """Second builder stage: resolution and sampling."""

    def __init__(self, **fields):
        self._fields = fields

    def input_sensor(
        self,
        sensor_width: int,
        sensor_height: int,
        shutter_length: int,
        max_ray_depth: int,
        anti_aliasing: bool = True,
    ) -> LensStage:
        """Set the sensor.

        Args:
            sensor_width: Width in pixels
            sensor_height: Height in pixels
            shutter_length: Number of samples taken per pixel
            max_ray_depth: Number of bounces a ray can do
            anti_aliasing: Jitter samples inside each pixel
        """
        return LensStage(
            **self._fields,
            sensor_width=sensor_width,
            sensor_height=sensor_height,
            shutter_length=shutter_length,
            max_ray_depth=max_ray_depth,
            anti_aliasing=anti_aliasing,
        )


class LensStage:
    """Third builder stage: focus, aperture and field of view."""

    def __init__(self, **fields):
        self._fields = fields

    def input_lens(self, focal_distance: float, aperture: float, field_of_view: float) -> CompleteStage:
        """Set the lens.

        Args:
            focal_distance: Distance in focus; closer or farther objects blur
            aperture: Size of the aperture, larger values blur out-of-focus
                objects more (it does not darken the image)
            field_of_view: Vertical view angle in degrees, clamped to [0.1, 179.9]
        """
        return CompleteStage(
            **self._fields,
            focal_distance=max(float(focal_distance), 0.0),
            aperture=max(float(aperture), 0.0),
            field_of_view=min(max(float(field_of_view), 0.1), 179.9),
        )


class CompleteStage:
    """Final builder stage: every field is known."""

    def __init__(self, **fields):
        self._fields = fields

    def build(self) -> Camera:
        return Camera(**self._fields)
