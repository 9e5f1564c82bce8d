# core/uv.py
class UV:
    """
    Represents a 2D coordinate pair: barycentric coordinates on a triangle,
    or texture coordinates on a surface.
    """
    __slots__ = ("u", "v")

    def __init__(self, u: float = 0.0, v: float = 0.0):
        self.u = float(u)
        self.v = float(v)

    def __add__(self, other: "UV") -> "UV":
        return UV(self.u + other.u, self.v + other.v)

    def __sub__(self, other: "UV") -> "UV":
        return UV(self.u - other.u, self.v - other.v)

    def __mul__(self, t: float) -> "UV":
        return UV(self.u * t, self.v * t)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UV):
            return NotImplemented
        return self.u == other.u and self.v == other.v

    __hash__ = None

    def __repr__(self) -> str:
        return f"UV({self.u}, {self.v})"
