"""
Geometric primitives for the path tracer.

Each shape implements `hit`, returning the raw intersection (distance,
point and outward normal). Orienting the normal against the incoming ray is
left to HitRecord, which also knows about the material.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
import math
from typing import NamedTuple, Optional
import numpy as np

from .vec3 import Direction, Point
from .ray import Ray


class GeometryHit(NamedTuple):
    """Raw ray-geometry intersection."""
    distance: float
    point: Point
    outward_normal: Direction


class Geometry(ABC):
    """Abstract base class for all shapes that can be hit by rays."""

    @abstractmethod
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[GeometryHit]:
        """Test if ray intersects this shape.

        Args:
            ray: The ray to test
            t_min: Minimum t value to consider (inclusive)
            t_max: Maximum t value to consider (inclusive)

        Returns:
            GeometryHit if intersection found, None otherwise
        """


class Sphere(Geometry):
    """A sphere defined by center and radius."""

    __slots__ = ('center', 'radius')

    def __init__(self, center: Point, radius: float):
        """Create a sphere.

        Args:
            center: Center point of the sphere
            radius: Radius of the sphere (can be negative for inward normals)

        Raises:
            ValueError: If radius is zero
        """
        if radius == 0:
            raise ValueError("Sphere radius must be non-zero")
        self.center = center
        self.radius = float(radius)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[GeometryHit]:
        """Test ray-sphere intersection using the quadratic formula.

        The equation (P-C)·(P-C) = r² where P = ray.at(t)
        expands to: t²(d·d) + 2t(d·(O-C)) + (O-C)·(O-C) - r² = 0
        which is the quadratic at² + bt + c = 0.
        """
        oc = self.center.point_towards(ray.origin)
        # numpy scalar so a zero-length direction yields nan instead of raising
        a = np.float64(ray.direction.length_squared())
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius

        discriminant = half_b * half_b - a * c
        if discriminant < 0:
            return None

        sqrtd = math.sqrt(discriminant)

        # Find the nearest root in the acceptable range
        with np.errstate(divide="ignore", invalid="ignore"):
            root = float((-half_b - sqrtd) / a)
            if not t_min <= root <= t_max:
                root = float((-half_b + sqrtd) / a)
                if not t_min <= root <= t_max:
                    return None

        point = ray.at(root)
        # Divide by the signed radius so a negative radius flips the normal inward
        outward_normal = self.center.point_towards(point) / self.radius
        return GeometryHit(root, point, outward_normal)

    def __repr__(self) -> str:
        return f"Sphere(center={self.center}, radius={self.radius})"
