"""
The GEOMETRY layer contains the vector value type and the free functions
that operate on it. It has no knowledge of I/O or of the demo program.
"""
from tinygeo.geometry.vector import (
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
)
from tinygeo.geometry.vector_utils import (
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
