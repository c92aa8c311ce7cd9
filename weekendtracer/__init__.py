"""
weekendtracer - A small Python path tracer

Renders spheres with diffuse, metal and glass materials under a sky
gradient, with:
- Depth of field and anti-aliasing
- Depth-bounded recursive path tracing
- Tile-based multi-threaded rendering
- PPM and PNG output
"""

__version__ = "0.1.0"

from .vec3 import Vec3, Point, Direction, Colour
from .ray import Ray
from .geometry import Geometry, GeometryHit, Sphere
from .hit import HitRecord
from .materials import Material, ScatterResult, Lambert, Metal, Dielectric
from .objects import Object
from .scene import Scene
from .camera import Camera, PositionStage, SensorStage, LensStage, CompleteStage
from .image import Image
from .ppm import image_to_ppm, write_ppm
from .renderer import Renderer, RenderSettings, get_platform_info
from .scenes import make_book_scene, make_single_sphere_scene, book_camera, single_sphere_camera
