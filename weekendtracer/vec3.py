"""
Vector types for 3D math operations.

A single numpy-backed base class carries three semantic roles:
- Point: an absolute position in space
- Direction: a displacement or orientation
- Colour: a linear-light RGB value

Arithmetic is only defined within a role (plus Point +/- Direction), so
mixing roles by accident raises TypeError instead of silently producing a
meaningless vector.
"""

from __future__ import annotations
import sys
from numbers import Real
from typing import Union
import numpy as np


_EPSILON = sys.float_info.epsilon


class Vec3:
    """Immutable 3-component float64 vector shared by Point, Direction and Colour.

    Uses numpy internally for the component storage while providing
    a clean, Pythonic API.
    """

    __slots__ = ('_data',)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._data = np.array([x, y, z], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: np.ndarray):
        """Create a vector of this role from a numpy array."""
        v = cls.__new__(cls)
        v._data = np.asarray(arr, dtype=np.float64)
        return v

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x:.4f}, {self.y:.4f}, {self.z:.4f})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return type(self) is type(other) and bool(np.allclose(self._data, other._data))

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + tuple(self._data))

    def __getitem__(self, index: int) -> float:
        if index not in (0, 1, 2):
            raise IndexError(
                f"Index out of bounds. {type(self).__name__} only has indexes 0..=2, got {index!r}"
            )
        return float(self._data[index])

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __neg__(self):
        return self.from_array(-self._data)

    def _same_role(self, other: object) -> bool:
        return type(other) is type(self)

    def to_array(self) -> np.ndarray:
        """Return the underlying numpy array (copy)."""
        return self._data.copy()

    def is_zero(self) -> bool:
        """Check whether every component is below machine epsilon in magnitude."""
        return bool(np.all(np.abs(self._data) < _EPSILON))


class _Arithmetic(Vec3):
    """Component-wise arithmetic between vectors of the same role."""

    __slots__ = ()

    def __add__(self, other: Union[Vec3, float]):
        if self._same_role(other):
            return self.from_array(self._data + other._data)
        if isinstance(other, Real):
            return self.from_array(self._data + other)
        return NotImplemented

    def __radd__(self, other: float):
        if isinstance(other, Real):
            return self.from_array(other + self._data)
        return NotImplemented

    def __sub__(self, other: Vec3):
        if self._same_role(other):
            return self.from_array(self._data - other._data)
        return NotImplemented

    def __mul__(self, other: Union[Vec3, float]):
        if self._same_role(other):
            return self.from_array(self._data * other._data)
        if isinstance(other, Real):
            return self.from_array(self._data * other)
        return NotImplemented

    def __rmul__(self, other: float):
        if isinstance(other, Real):
            return self.from_array(other * self._data)
        return NotImplemented

    def __truediv__(self, other: float):
        if isinstance(other, Real):
            with np.errstate(divide='ignore', invalid='ignore'):
                return self.from_array(self._data / np.float64(other))
        return NotImplemented

    def __rtruediv__(self, other: float):
        if isinstance(other, Real):
            with np.errstate(divide='ignore', invalid='ignore'):
                return self.from_array(np.float64(other) / self._data)
        return NotImplemented


class Direction(_Arithmetic):
    """A displacement in space. Not unit length unless produced by unit_vector."""

    __slots__ = ()

    def length(self) -> float:
        """Return the magnitude (length) of the vector."""
        return float(np.sqrt(self.length_squared()))

    def length_squared(self) -> float:
        """Return the squared magnitude (avoids sqrt for comparisons)."""
        return float(np.dot(self._data, self._data))

    def dot(self, other: Direction) -> float:
        """Compute dot product with another direction."""
        return float(np.dot(self._data, other._data))

    def cross(self, other: Direction) -> Direction:
        """Compute cross product with another direction."""
        a, b = self._data, other._data
        return Direction(
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
        )

    def unit_vector(self) -> Direction:
        """Return this direction scaled to length 1.

        A zero-length direction yields nan components.
        """
        return self / self.length()

    def reflect(self, normal: Direction) -> Direction:
        """Reflect this vector around the given normal."""
        return self - 2.0 * self.dot(normal) * normal

    def refract(self, normal: Direction, eta_ratio: float) -> Direction:
        """Refract this (unit) vector through a surface using Snell's law.

        Args:
            normal: Unit surface normal on the same side as the incoming ray
            eta_ratio: Ratio of refractive indices (n1/n2)

        The caller is responsible for ruling out total internal reflection
        first; otherwise the result is not physically meaningful.
        """
        cos_theta = min(-self.dot(normal), 1.0)
        r_out_perp = (self + normal * cos_theta) * eta_ratio
        r_out_parallel = normal * -float(np.sqrt(abs(1.0 - r_out_perp.length_squared())))
        return r_out_perp + r_out_parallel

    def random_direction_in_hemisphere(self) -> Direction:
        """Random unit direction in the hemisphere around this vector."""
        on_unit_sphere = Direction.new_random_in_unit_sphere().unit_vector()
        if on_unit_sphere.dot(self) > 0.0:
            return on_unit_sphere
        return -on_unit_sphere

    @staticmethod
    def new_random() -> Direction:
        """Generate a direction with each component uniform in [-1, 1)."""
        return Direction.from_array(np.random.random(3) * 2.0 - 1.0)

    @staticmethod
    def new_random_in_unit_sphere() -> Direction:
        """Generate a random point strictly inside the unit sphere."""
        while True:
            p = Direction.new_random()
            if p.length_squared() < 1:
                return p


class Point(Vec3):
    """An absolute position in space."""

    __slots__ = ()

    def __add__(self, other: Direction) -> Point:
        if isinstance(other, Direction):
            return Point.from_array(self._data + other._data)
        return NotImplemented

    def __sub__(self, other: Direction) -> Point:
        if isinstance(other, Direction):
            return Point.from_array(self._data - other._data)
        return NotImplemented

    def point_towards(self, other: Point) -> Direction:
        """Return the direction from this point to `other` (other - self)."""
        if not isinstance(other, Point):
            raise TypeError(f"point_towards expects a Point, got {type(other).__name__}")
        return Direction.from_array(other._data - self._data)


class Colour(_Arithmetic):
    """Linear-light RGB. Components may exceed 1 while accumulating samples."""

    __slots__ = ()

    # Aliases for color operations
    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    def linear_to_gamma(self) -> Colour:
        """Gamma 2 approximation: component-wise square root."""
        with np.errstate(invalid='ignore'):
            return Colour.from_array(np.sqrt(self._data))

    @staticmethod
    def new_random() -> Colour:
        """Generate a colour with each component uniform in [0, 1)."""
        return Colour.from_array(np.random.random(3))
