# core/utils.py
import math

from pathtracer.core.vector import Vector3


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n. n must be unit length.
    """
    return v - n * 2 * v.dot(n)


def refract(v: Vector3, n: Vector3, ior: float) -> Vector3:
    """
    Refracts v through a surface with normal n using Snell's law.

    ior is the refractive index on the far side of the surface, the
    surrounding medium being air (1.0). When v leaves the material
    (v . n > 0) the indices are swapped and the normal flipped.

    Returns the zero vector on total internal reflection. The result is
    not normalized.
    """
    cosi = min(max(-1.0, v.dot(n)), 1.0)
    etai, etat = 1.0, ior
    normal = n
    if cosi < 0:
        cosi = -cosi
    else:
        etai, etat = etat, etai
        normal = -n
    eta = etai / etat
    k = 1 - eta * eta * (1 - cosi * cosi)
    if k < 0:
        return Vector3(0, 0, 0)
    return v * eta + normal * (eta * cosi - math.sqrt(k))
