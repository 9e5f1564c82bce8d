# materials/material.py
from typing import Optional

from pathtracer.core.errors import InvalidMaterial
from pathtracer.core.vector import Vector3


class Material:
    """
    Reflectance record for a surface.

    The four flags are a capability set, not a variant: a surface may be any
    combination of self-luminous, diffuse, specular and transparent, and the
    integrator adds up the contribution of every aspect that is enabled.
    Self-luminous surfaces short-circuit and only emit ka * color.

    Attributes:
        ka: Emissive intensity.
        kd: Diffuse albedo.
        ks: Specular coefficient.
        shininess: Exponent applied to the specular lobe.
        kr: Reflection share of a transparent surface, the rest is transmitted.
        ior: Refractive index behind the surface (air is 1.0).
    """
    def __init__(self,
                 self_luminous: bool = False,
                 diffuse: bool = False,
                 specular: bool = False,
                 transparent: bool = False,
                 ka: Optional[Vector3] = None,
                 kd: Optional[Vector3] = None,
                 ks: Optional[Vector3] = None,
                 shininess: float = 1.0,
                 kr: float = 0.0,
                 ior: float = 1.0,
                 name: str = ""):
        self.self_luminous = bool(self_luminous)
        self.diffuse = bool(diffuse)
        self.specular = bool(specular)
        self.transparent = bool(transparent)
        self.ka = ka if ka is not None else Vector3(0, 0, 0)
        self.kd = kd if kd is not None else Vector3(0, 0, 0)
        self.ks = ks if ks is not None else Vector3(0, 0, 0)
        self.shininess = float(shininess)
        self.kr = float(kr)
        self.ior = float(ior)
        self.name = name
        self.validate()

    def validate(self) -> None:
        for field in ("ka", "kd", "ks"):
            value = getattr(self, field)
            if not isinstance(value, Vector3):
                raise InvalidMaterial(f"{field} must be a Vector3, got {type(value).__name__}")
            if min(value) < 0:
                raise InvalidMaterial(f"{field} = {value} has a negative component")
        if self.shininess < 0:
            raise InvalidMaterial(f"shininess = {self.shininess} is negative")
        if not 0.0 <= self.kr <= 1.0:
            raise InvalidMaterial(f"kr = {self.kr} must lie in [0, 1]")
        if self.ior <= 0:
            raise InvalidMaterial(f"ior = {self.ior} must be positive")

    def __repr__(self) -> str:
        flags = [flag for flag in ("self_luminous", "diffuse", "specular", "transparent")
                 if getattr(self, flag)]
        label = f"{self.name!r}, " if self.name else ""
        return f"Material({label}{'|'.join(flags) or 'none'})"
