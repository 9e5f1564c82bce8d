# core/sampling.py
"""
Monte Carlo sampling helpers: the local shading frame around a normal,
hemisphere directions in that frame, and explicit random sources.

Local frame convention: the normal N is the local Y axis, Nt the local Z
axis and Nb the local X axis, so a local sample (x, y, z) maps to world
space as x * Nb + y * N + z * Nt.
"""
import math
from typing import List, Optional, Tuple

import numpy as np

from pathtracer.core.vector import Vector3

# Constant pdf of the hemisphere estimator used by the diffuse branch.
HEMISPHERE_PDF = 1.0 / (2.0 * math.pi)


def create_coordinate_system(n: Vector3) -> Tuple[Vector3, Vector3]:
    """
    Builds two unit vectors (nt, nb) that form an orthonormal basis with the
    unit normal n.

    The tangent is taken in whichever plane keeps its length away from
    zero: dividing by sqrt(x^2 + z^2) is only safe when |x| dominates |y|.
    """
    if abs(n.x) > abs(n.y):
        inv_len = 1.0 / math.sqrt(n.x * n.x + n.z * n.z)
        nt = Vector3(n.z * inv_len, 0.0, -n.x * inv_len)
    else:
        inv_len = 1.0 / math.sqrt(n.y * n.y + n.z * n.z)
        nt = Vector3(0.0, -n.z * inv_len, n.y * inv_len)
    nb = n.cross(nt)
    return nt, nb


def uniform_sample_hemisphere(r1: float, r2: float) -> Vector3:
    """
    Maps two uniform numbers in [0, 1) to a unit direction in the local frame.

    cos(theta) is r1 itself, so the local y component equals r1 and is
    never negative. phi = 2 * pi * r2 is the azimuth.
    """
    sin_theta = math.sqrt(max(0.0, 1.0 - r1 * r1))
    phi = 2.0 * math.pi * r2
    x = sin_theta * math.cos(phi)
    z = sin_theta * math.sin(phi)
    return Vector3(x, r1, z)


def local_to_world(sample: Vector3, n: Vector3, nt: Vector3, nb: Vector3) -> Vector3:
    return Vector3(
        sample.x * nb.x + sample.y * n.x + sample.z * nt.x,
        sample.x * nb.y + sample.y * n.y + sample.z * nt.y,
        sample.x * nb.z + sample.y * n.z + sample.z * nt.z,
    )


class RandomSource:
    """
    A uniform [0, 1) random source owned by one rendering task.

    Wraps a numpy Generator. Instances are not shared between threads;
    use spawn() to derive independent, reproducible children.
    """
    def __init__(self, seed: Optional[int] = None,
                 seed_sequence: Optional[np.random.SeedSequence] = None):
        if seed_sequence is None:
            seed_sequence = np.random.SeedSequence(seed)
        self.seed_sequence = seed_sequence
        self.generator = np.random.default_rng(seed_sequence)

    def uniform(self, low: float = 0.0, high: float = 1.0) -> float:
        return float(self.generator.uniform(low, high))

    def random(self) -> float:
        return float(self.generator.random())

    def spawn(self, count: int) -> List["RandomSource"]:
        return [RandomSource(seed_sequence=child) for child in self.seed_sequence.spawn(count)]

    def __repr__(self) -> str:
        return f"RandomSource(entropy={self.seed_sequence.entropy})"
