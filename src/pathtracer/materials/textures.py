# materials/textures.py
import math

from pathtracer.core.uv import UV
from pathtracer.core.vector import Vector3


class Texture:
    """Base class for all textures. Supplies the base color of a surface."""
    def sample(self, uv: UV) -> Vector3:
        """Sample the texture at given texture coordinates."""
        raise NotImplementedError("sample() must be implemented by texture subclasses.")


class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def sample(self, uv: UV) -> Vector3:
        return self.color

    def __repr__(self) -> str:
        return f"SolidTexture({self.color!r})"


class CheckerTexture(Texture):
    """A checker pattern texture with `scale` squares per unit of u and v."""
    def __init__(self, color1: Vector3, color2: Vector3, scale: float = 1.0):
        self.color1 = color1
        self.color2 = color2
        self.scale = scale

    def sample(self, uv: UV) -> Vector3:
        x = math.floor(uv.u * self.scale)
        y = math.floor(uv.v * self.scale)
        is_even = (x + y) % 2 == 0
        return self.color1 if is_even else self.color2
