"""
Hit records binding a ray, an intersection and a material.

A HitRecord lives for exactly one trace step: it is built when the nearest
intersection is found, handed to the material's scatter and then dropped.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from .vec3 import Direction, Point
from .ray import Ray

if TYPE_CHECKING:
    from .materials import Material, ScatterResult


@dataclass(frozen=True)
class HitRecord:
    """Stores information about a ray-object intersection.

    Attributes:
        ray: The intersecting ray
        distance: The ray parameter at intersection
        point: The intersection point in world space
        normal: The surface normal, always pointing against the ray
        material: The material of the object that was hit
        front_face: True if the ray hit the outside of the surface
    """
    ray: Ray
    distance: float
    point: Point
    normal: Direction
    material: Material
    front_face: bool

    @classmethod
    def from_outward_normal(
        cls,
        ray: Ray,
        distance: float,
        point: Point,
        outward_normal: Direction,
        material: Material,
    ) -> HitRecord:
        """Build a record whose normal opposes the incoming ray.

        Args:
            ray: The incoming ray
            distance: Hit distance along the ray
            point: Intersection point
            outward_normal: The geometric normal pointing out of the surface
            material: Material at the hit point
        """
        front_face = ray.direction.dot(outward_normal) < 0
        return cls(
            ray=ray,
            distance=distance,
            point=point,
            normal=outward_normal if front_face else -outward_normal,
            material=material,
            front_face=front_face,
        )

    def scatter(self) -> Optional[ScatterResult]:
        """Let the material decide what happens to the ray at this hit."""
        return self.material.scatter(self)
