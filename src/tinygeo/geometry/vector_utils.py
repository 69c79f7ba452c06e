from __future__ import annotations

import math
from typing import Any

import numpy as np

from tinygeo.config import DEFAULT_TOLERANCE
from tinygeo.geometry.vector import Vector


def dot(a: Vector, b: Vector) -> Any:
    """Free-function form of ``a.dot(b)``."""
    return a.dot(b)


def cross(a: Vector, b: Vector) -> Vector:
    """
    Free-function form of ``a.cross(b)``.

    Only 3D vectors carry a ``cross`` method; any other dimension fails with
    AttributeError.
    """
    return a.cross(b)


def distance_sq(a: Vector, b: Vector) -> Any:
    """Squared distance between two points given as position vectors."""
    return (a - b).norm_sq()


def distance(a: Vector, b: Vector) -> Any:
    return (a - b).norm()


def angle_between(a: Vector, b: Vector) -> float:
    """
    Returns the angle in radians between two vectors of any dimension.

    Uses atan2(|a||b|sin, |a||b|cos), which stays accurate for nearly
    parallel vectors where acos() loses precision.

    Args:
        a: First vector.
        b: Second vector of the same type.

    Returns:
        The angle in [0, pi]. 0.0 if either vector has zero length.
    """
    aa = float(a.norm_sq())
    bb = float(b.norm_sq())
    if aa == 0.0 or bb == 0.0:
        return 0.0
    ab = float(a.dot(b))
    sin_part = math.sqrt(max(aa * bb - ab * ab, 0.0))
    return math.atan2(sin_part, ab)


def isclose(a: Vector, b: Vector, tol: float = DEFAULT_TOLERANCE) -> bool:
    """
    Element-wise comparison with an absolute tolerance.

    Args:
        a: First vector.
        b: Second vector of the same type.
        tol: Maximum allowed absolute difference per element.

    Raises:
        TypeError: If `a` and `b` are not the same vector type.
    """
    if type(a) is not type(b):
        raise TypeError(f"Cannot compare {type(a).__name__} with {type(b).__name__}.")
    return bool(np.allclose(a.to_array(), b.to_array(), rtol=0.0, atol=tol))
