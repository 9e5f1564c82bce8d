# geometry/hittable.py
from typing import Optional

from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3


class Intersection:
    """
    Result of a successful scene query: nearest distance, the primitive
    index inside the hit object, its barycentric/UV data and the object.
    """
    __slots__ = ("t", "index", "uv", "obj")

    def __init__(self, t: float, index: int, uv: UV, obj: "Hittable"):
        self.t = t
        self.index = index
        self.uv = uv
        self.obj = obj

    def __repr__(self) -> str:
        return f"Intersection(t={self.t}, index={self.index}, uv={self.uv!r}, obj={self.obj!r})"


class SurfaceProperties:
    """
    Shading data resolved by an object at a hit point. material is None
    when the object could not resolve one.
    """
    __slots__ = ("normal", "tex_coordinates", "color", "material")

    def __init__(self, normal: Vector3, tex_coordinates: UV, color: Vector3, material=None):
        self.normal = normal
        self.tex_coordinates = tex_coordinates
        self.color = color
        self.material = material


class HitRecord:
    """
    Records details of a ray-object intersection for one integrator call.
    """
    def __init__(self, t: float = 0, uv: UV = None, index: int = 0,
                 point: Vector3 = None, normal: Vector3 = None,
                 tex_coordinates: UV = None, color: Vector3 = None, material=None):
        self.t = t                              # Ray parameter at intersection
        self.uv = uv                            # Barycentric / parametric coordinates
        self.index = index                      # Primitive index inside the object
        self.point = point                      # Intersection point
        self.normal = normal                    # Unit surface normal
        self.tex_coordinates = tex_coordinates  # Texture coordinates
        self.color = color                      # Surface base color
        self.material = material

    @classmethod
    def from_surface(cls, hit: Intersection, point: Vector3,
                     props: SurfaceProperties) -> "HitRecord":
        return cls(t=hit.t, uv=hit.uv, index=hit.index, point=point,
                   normal=props.normal, tex_coordinates=props.tex_coordinates,
                   color=props.color, material=props.material)

    def __repr__(self) -> str:
        return (f"HitRecord(t={self.t}, index={self.index}, point={self.point!r}, "
                f"normal={self.normal!r})")


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def intersect(self, origin: Vector3, direction: Vector3,
                  t_max: float = float("inf")) -> Optional[Intersection]:
        """
        Returns the nearest intersection in (0, t_max), or None.
        """
        raise NotImplementedError("intersect() must be implemented by subclasses.")

    def get_surface_properties(self, point: Vector3, direction: Vector3,
                               index: int, uv: UV) -> SurfaceProperties:
        raise NotImplementedError("get_surface_properties() must be implemented by subclasses.")
