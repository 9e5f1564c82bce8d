# core/matrix.py
from typing import Optional, Sequence

import numpy as np

from pathtracer.core.vector import Vector3


class Matrix44:
    """
    A 4x4 affine transform stored row-major in a NumPy array.

    Points and directions are treated as row vectors multiplied on the left,
    so the translation lives in the last row.
    """
    def __init__(self, values: Optional[Sequence[Sequence[float]]] = None):
        if values is None:
            self.m = np.identity(4, dtype=np.float64)
        else:
            self.m = np.array(values, dtype=np.float64)
            if self.m.shape != (4, 4):
                raise ValueError(f"Matrix44 expects a 4x4 array, got shape {self.m.shape}")

    @classmethod
    def identity(cls) -> "Matrix44":
        return cls()

    @classmethod
    def translation(cls, offset: Vector3) -> "Matrix44":
        mat = cls()
        mat.m[3, :3] = (offset.x, offset.y, offset.z)
        return mat

    @classmethod
    def look_at(cls, origin: Vector3, target: Vector3, up: Optional[Vector3] = None) -> "Matrix44":
        """
        Camera-to-world transform placing the camera at origin, looking at
        target down its local -Z axis. up defaults to +Y.

        Raises:
            ValueError: If origin equals target or the view is parallel to up.
        """
        if up is None:
            up = Vector3(0, 1, 0)
        forward = (origin - target).normalize()
        if forward.is_zero():
            raise ValueError(f"look_at origin and target coincide at {origin!r}")
        right = up.normalize().cross(forward)
        if right.length() < 1e-9:
            raise ValueError(f"look_at view direction {(-forward)!r} is parallel to up {up!r}")
        right = right.normalize()
        true_up = forward.cross(right)
        return cls([
            [right.x, right.y, right.z, 0.0],
            [true_up.x, true_up.y, true_up.z, 0.0],
            [forward.x, forward.y, forward.z, 0.0],
            [origin.x, origin.y, origin.z, 1.0],
        ])

    def __matmul__(self, other: "Matrix44") -> "Matrix44":
        return Matrix44(self.m @ other.m)

    def mult_vec_matrix(self, src: Vector3) -> Vector3:
        """
        Transforms a point, including translation and the homogeneous divide.
        """
        row = np.array([src.x, src.y, src.z, 1.0]) @ self.m
        w = row[3]
        if w != 1.0 and w != 0.0:
            row = row / w
        return Vector3(row[0], row[1], row[2])

    def mult_dir_matrix(self, src: Vector3) -> Vector3:
        """
        Transforms a direction: rotation and scale only, no translation.
        """
        row = np.array([src.x, src.y, src.z]) @ self.m[:3, :3]
        return Vector3(row[0], row[1], row[2])

    def inverse(self) -> "Matrix44":
        return Matrix44(np.linalg.inv(self.m))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix44):
            return NotImplemented
        return bool(np.array_equal(self.m, other.m))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix44({self.m.tolist()})"
