# geometry/sphere.py
import math
from typing import Optional

from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, Intersection, SurfaceProperties
from pathtracer.materials.textures import SolidTexture, Texture

# Intersections closer than this are treated as the surface the ray left from.
T_MIN = 1e-8


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, material and an
    optional texture supplying its base color (white when omitted).
    """
    def __init__(self, center: Vector3, radius: float, material, texture: Optional[Texture] = None):
        if radius <= 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = radius
        self.material = material
        self.texture = texture if texture is not None else SolidTexture(Vector3(1, 1, 1))

    def intersect(self, origin: Vector3, direction: Vector3,
                  t_max: float = float("inf")) -> Optional[Intersection]:
        oc = origin - self.center
        a = direction.dot(direction)
        if a == 0:
            return None
        half_b = oc.dot(direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_disc) / a
        if root <= T_MIN or root >= t_max:
            root = (-half_b + sqrt_disc) / a
            if root <= T_MIN or root >= t_max:
                return None
        return Intersection(root, 0, UV(0, 0), self)

    def get_surface_properties(self, point: Vector3, direction: Vector3,
                               index: int, uv: UV) -> SurfaceProperties:
        normal = ((point - self.center) / self.radius).normalize()
        # Spherical mapping: u follows the azimuth, v the polar angle.
        tex = UV(
            (1 + math.atan2(normal.z, normal.x) / math.pi) * 0.5,
            math.acos(min(1.0, max(-1.0, normal.y))) / math.pi,
        )
        return SurfaceProperties(normal, tex, self.texture.sample(tex), self.material)

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius}, {self.material!r})"
