# geometry/mesh.py
from typing import List, Optional

from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, Intersection, SurfaceProperties
from pathtracer.materials.textures import SolidTexture, Texture

PARALLEL_EPSILON = 1e-8
T_MIN = 1e-8


class Triangle:
    """Represents a single triangle in 3D space with texture coordinates."""
    def __init__(self,
                 v0: Vector3, v1: Vector3, v2: Vector3,
                 uv0: Optional[UV] = None, uv1: Optional[UV] = None, uv2: Optional[UV] = None,
                 n0: Optional[Vector3] = None, n1: Optional[Vector3] = None, n2: Optional[Vector3] = None):
        # Vertices
        self.v0 = v0
        self.v1 = v1
        self.v2 = v2

        # UV coordinates (default to basic mapping if not provided)
        self.uv0 = uv0 if uv0 is not None else UV(0.0, 0.0)
        self.uv1 = uv1 if uv1 is not None else UV(1.0, 0.0)
        self.uv2 = uv2 if uv2 is not None else UV(0.5, 1.0)

        # Normals
        if n0 is None or n1 is None or n2 is None:
            edge1 = v1 - v0
            edge2 = v2 - v0
            face_normal = edge1.cross(edge2).normalize()
            self.n0 = self.n1 = self.n2 = face_normal
        else:
            self.n0 = n0
            self.n1 = n1
            self.n2 = n2

    def intersect(self, origin: Vector3, direction: Vector3):
        """
        Möller–Trumbore test. Returns (t, u, v) with barycentric (u, v),
        or None when the ray misses or is parallel to the triangle.
        """
        edge1 = self.v1 - self.v0
        edge2 = self.v2 - self.v0
        h = direction.cross(edge2)
        a = edge1.dot(h)
        if abs(a) < PARALLEL_EPSILON:
            return None

        f = 1.0 / a
        s = origin - self.v0
        u = f * s.dot(h)
        if u < 0.0 or u > 1.0:
            return None

        q = s.cross(edge1)
        v = f * direction.dot(q)
        if v < 0.0 or u + v > 1.0:
            return None

        t = f * edge2.dot(q)
        return t, u, v

    def interpolate_uv(self, u: float, v: float) -> UV:
        """Interpolate UV coordinates at the given barycentric coordinates."""
        w = 1.0 - u - v
        return UV(
            w * self.uv0.u + u * self.uv1.u + v * self.uv2.u,
            w * self.uv0.v + u * self.uv1.v + v * self.uv2.v
        )

    def get_normal(self, u: float, v: float) -> Vector3:
        """Interpolate normal at the given barycentric coordinates."""
        w = 1.0 - u - v
        return (self.n0 * w + self.n1 * u + self.n2 * v).normalize()


class TriangleMesh(Hittable):
    """
    Represents a 3D mesh composed of triangles. The primitive index of an
    intersection is the index of the triangle that was hit.
    """
    def __init__(self, triangles: List[Triangle], material, texture: Optional[Texture] = None):
        self.triangles = triangles
        self.material = material
        self.texture = texture if texture is not None else SolidTexture(Vector3(1, 1, 1))

    def intersect(self, origin: Vector3, direction: Vector3,
                  t_max: float = float("inf")) -> Optional[Intersection]:
        closest = None
        closest_t = t_max

        for index, triangle in enumerate(self.triangles):
            result = triangle.intersect(origin, direction)
            if result is None:
                continue
            t, u, v = result
            if t <= T_MIN or t >= closest_t:
                continue
            closest_t = t
            closest = Intersection(t, index, UV(u, v), self)

        return closest

    def get_surface_properties(self, point: Vector3, direction: Vector3,
                               index: int, uv: UV) -> SurfaceProperties:
        triangle = self.triangles[index]
        normal = triangle.get_normal(uv.u, uv.v)
        tex = triangle.interpolate_uv(uv.u, uv.v)
        return SurfaceProperties(normal, tex, self.texture.sample(tex), self.material)

    def __len__(self) -> int:
        return len(self.triangles)


def make_quad(p0: Vector3, p1: Vector3, p2: Vector3, p3: Vector3, material,
              texture: Optional[Texture] = None) -> TriangleMesh:
    """
    Two-triangle mesh for the planar quad p0 p1 p2 p3 (counter-clockwise
    when seen from the side its normal faces).
    """
    triangles = [
        Triangle(p0, p1, p2, UV(0, 0), UV(1, 0), UV(1, 1)),
        Triangle(p0, p2, p3, UV(0, 0), UV(1, 1), UV(0, 1)),
    ]
    return TriangleMesh(triangles, material, texture)
