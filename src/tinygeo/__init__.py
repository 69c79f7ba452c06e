"""
Small generic fixed-size numeric vectors for geometry and linear algebra.

``Vector[T, N]`` is a stack-like value of N elements of type T with
element-wise arithmetic, dot/cross products, norms and normalisation.
"""
import logging

from tinygeo.geometry import (
    Vector,
    Vector2d,
    Vector2f,
    Vector2i,
    Vector3d,
    Vector3f,
    Vector3i,
    Vector4d,
    Vector4f,
    Vector4i,
    angle_between,
    cross,
    distance,
    distance_sq,
    dot,
    isclose,
)

__all__ = [
    'Vector',
    'Vector2f', 'Vector3f', 'Vector4f',
    'Vector2d', 'Vector3d', 'Vector4d',
    'Vector2i', 'Vector3i', 'Vector4i',
    'dot',
    'cross',
    'distance',
    'distance_sq',
    'angle_between',
    'isclose',
]

# Library default: stay silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())
