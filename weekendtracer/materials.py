"""
Materials for the path tracer.

Implements:
- Lambert diffuse
- Metal (specular reflection with fuzz)
- Dielectric (glass, water - with refraction and Schlick reflectance)
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING
import math

import numpy as np

from .vec3 import Colour, Direction
from .ray import Ray

if TYPE_CHECKING:
    from .hit import HitRecord


@dataclass(frozen=True)
class ScatterResult:
    """Result of a material scatter operation."""
    attenuation: Colour
    scattered: Ray


class Material(ABC):
    """Abstract base class for materials."""

    @abstractmethod
    def scatter(self, hit: HitRecord) -> Optional[ScatterResult]:
        """Compute the scattered ray and attenuation.

        Args:
            hit: The intersection, with its normal facing the incoming ray

        Returns:
            ScatterResult if the ray scatters, None if it is absorbed
        """


@dataclass(frozen=True)
class Lambert(Material):
    """Diffuse material with Lambertian (ideal matte) scattering."""
    albedo: Colour

    def scatter(self, hit: HitRecord) -> Optional[ScatterResult]:
        scatter_direction = hit.normal + hit.normal.random_direction_in_hemisphere().unit_vector()

        # Catch degenerate scatter direction
        if scatter_direction.is_zero():
            scatter_direction = hit.normal

        return ScatterResult(
            attenuation=self.albedo,
            scattered=Ray(hit.point, scatter_direction),
        )


@dataclass(frozen=True)
class Metal(Material):
    """Metallic material with specular reflection.

    fuzzy_scatter is 0 for a perfect mirror; values around 1 are very rough.
    Fuzzed rays that end up below the surface are not rejected here, the next
    intersection test simply finds nothing in front of them.
    """
    albedo: Colour
    fuzzy_scatter: float = 0.0

    def scatter(self, hit: HitRecord) -> Optional[ScatterResult]:
        reflected = (
            hit.ray.direction.reflect(hit.normal)
            + self.fuzzy_scatter * Direction.new_random_in_unit_sphere().unit_vector()
        )
        return ScatterResult(
            attenuation=self.albedo,
            scattered=Ray(hit.point, reflected),
        )


@dataclass(frozen=True)
class Dielectric(Material):
    """Dielectric (glass-like) material with refraction.

    refraction_index: 1.0 = air, 1.33 = water, 1.5 = glass, 2.4 = diamond
    """
    refraction_index: float = 1.5

    def scatter(self, hit: HitRecord) -> Optional[ScatterResult]:
        # Determine refraction ratio based on whether we're entering or exiting
        refraction_ratio = 1.0 / self.refraction_index if hit.front_face else self.refraction_index

        unit_direction = hit.ray.direction.unit_vector()
        cos_theta = min(-unit_direction.dot(hit.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = refraction_ratio * sin_theta > 1.0

        if cannot_refract or self.reflectance(cos_theta, refraction_ratio) > np.random.random():
            direction = unit_direction.reflect(hit.normal)
        else:
            direction = unit_direction.refract(hit.normal, refraction_ratio)

        return ScatterResult(
            attenuation=Colour(1.0, 1.0, 1.0),
            scattered=Ray(hit.point, direction),
        )

    @staticmethod
    def reflectance(cosine: float, refraction_ratio: float) -> float:
        """Schlick's approximation for reflectance."""
        r0 = (1 - refraction_ratio) / (1 + refraction_ratio)
        r0 = r0 * r0
        return r0 + (1 - r0) * pow(1 - cosine, 5)
