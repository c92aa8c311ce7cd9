"""
Scene objects: one geometry paired with one material.
"""

from __future__ import annotations
from typing import Optional

from .vec3 import Point
from .ray import Ray
from .geometry import Geometry, Sphere
from .materials import Material
from .hit import HitRecord


class Object:
    """A renderable object owning its geometry and material."""

    __slots__ = ('geometry', 'material')

    def __init__(self, geometry: Geometry, material: Material):
        self.geometry = geometry
        self.material = material

    @classmethod
    def new_sphere(cls, center: Point, radius: float, material: Material) -> Object:
        """Create a spherical object."""
        return cls(Sphere(center, radius), material)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Intersect the geometry and bind the result to this object's material."""
        geometry_hit = self.geometry.hit(ray, t_min, t_max)
        if geometry_hit is None:
            return None
        return HitRecord.from_outward_normal(
            ray,
            geometry_hit.distance,
            geometry_hit.point,
            geometry_hit.outward_normal,
            self.material,
        )

    def __repr__(self) -> str:
        return f"Object(geometry={self.geometry}, material={self.material})"
