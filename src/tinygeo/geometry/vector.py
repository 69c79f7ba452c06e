"""
Fixed-Size Numeric Vectors
==========================
This module defines the generic vector value type used for geometry and
linear-algebra computations.

Why is this file needed?
------------------------
1. Generic: ``Vector[T, N]`` produces a concrete class for a scalar type T
   and a fixed dimension N (e.g. ``Vector[np.float32, 3]`` is ``Vector3f``).
2. Shape safety: named accessors (x, y, z, w), the cross product and
   normalisation are only attached to the specialisations that support them,
   so misuse fails on attribute lookup instead of deep inside a computation.
3. Performance: value-level preconditions (index range, zero divisor,
   initializer length) are plain ``assert`` statements. They are checked in
   a normal run and stripped under ``python -O``.

Classes:
    Vector: The generic base. Subscript it to obtain a usable class.
"""
from __future__ import annotations

import logging
import numbers
from typing import Any, ClassVar, Dict, Iterable, Iterator, Tuple, TYPE_CHECKING

import numpy as np

from tinygeo.config import NORMALIZE_EPSILON

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

COORDINATE_NAMES = ("x", "y", "z", "w")

# Suffixes used to name the specialised classes (Vector3f, Vector3d, ...)
_DTYPE_SUFFIXES: Dict[str, str] = {
    "float32": "f",
    "float64": "d",
    "int64": "i",
}

_SPECIALISATIONS: Dict[Tuple[np.dtype, int], type] = {}


class Vector:
    """
    A fixed-size numeric tuple of ``size`` elements of type ``dtype``.

    Do not instantiate this class directly; use ``Vector[T, N]`` or one of
    the aliases (``Vector3f``, ``Vector2d``, ...).
    """
    __slots__ = ("_data",)

    # Make numpy scalars defer to __rmul__ instead of broadcasting over us
    __array_ufunc__ = None

    dtype: ClassVar[np.dtype]
    size: ClassVar[int]

    def __class_getitem__(cls, params: Tuple[Any, int]) -> type:
        if cls is not Vector:
            raise TypeError(f"{cls.__name__} is already specialised.")
        if not isinstance(params, tuple) or len(params) != 2:
            raise TypeError("Vector takes exactly two parameters: Vector[T, N].")
        scalar_type, dim = params
        return _specialise(scalar_type, dim)

    def __init__(self, *values: Any) -> None:
        """
        Initialize the vector.

        Args:
            values: Either nothing (all elements zero) or exactly ``size``
                values, converted to ``dtype`` in order.
        """
        cls = type(self)
        if not hasattr(cls, "size"):
            raise TypeError("Vector is generic; use Vector[T, N] to get a concrete type.")
        if not values:
            self._data = np.zeros(cls.size, dtype=cls.dtype)
            return
        assert len(values) == cls.size, "Initializer list size mismatch"
        self._data = np.array(values, dtype=cls.dtype)

    @classmethod
    def from_iterable(cls, values: Iterable[Any]) -> Vector:
        """Build a vector from any iterable of exactly ``size`` values."""
        return cls(*values)

    @classmethod
    def as_scalar(cls, value: Any) -> Any:
        """Convert ``value`` to the element type T."""
        return cls.dtype.type(value)

    # --- Element access ---

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __getitem__(self, index: int) -> Any:
        assert 0 <= index < self.size, "Index out of bounds"
        return self._data[index]

    def __setitem__(self, index: int, value: Any) -> None:
        assert 0 <= index < self.size, "Index out of bounds"
        self._data[index] = value

    def to_array(self) -> npt.NDArray[Any]:
        """Return an independent numpy copy of the elements."""
        return self._data.copy()

    def copy(self) -> Vector:
        result = type(self).__new__(type(self))
        result._data = self._data.copy()
        return result

    __copy__ = copy

    def __deepcopy__(self, memo: Dict[int, Any]) -> Vector:
        return self.copy()

    # --- Compound arithmetic (in place) ---

    def __iadd__(self, other: Vector) -> Vector:
        if type(other) is not type(self):
            return NotImplemented
        self._data += other._data
        return self

    def __isub__(self, other: Vector) -> Vector:
        if type(other) is not type(self):
            return NotImplemented
        self._data -= other._data
        return self

    def __imul__(self, scalar: Any) -> Vector:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        self._data *= self.as_scalar(scalar)
        return self

    def __itruediv__(self, scalar: Any) -> Vector:
        """
        Divide every element by ``scalar`` in place.

        Floating vectors multiply by the reciprocal. Integer vectors use
        Python floor division (``-7 / 2 -> -4``), not truncation toward zero.
        """
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        scalar = self.as_scalar(scalar)
        assert scalar != 0, "Division by zero"
        if self.dtype.kind == "f":
            # One division, N multiplications
            self._data *= self.dtype.type(1) / scalar
        else:
            self._data //= scalar
        return self

    # --- Binary arithmetic (new vector) ---

    def __add__(self, other: Vector) -> Vector:
        if type(other) is not type(self):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __sub__(self, other: Vector) -> Vector:
        if type(other) is not type(self):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __mul__(self, scalar: Any) -> Vector:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        result = self.copy()
        result *= scalar
        return result

    # Scalar on the left: 2.0 * v
    __rmul__ = __mul__

    def __truediv__(self, scalar: Any) -> Vector:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        result = self.copy()
        result /= scalar
        return result

    def __neg__(self) -> Vector:
        result = self.copy()
        result *= -1
        return result

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None  # mutable value type

    # --- Geometry ---

    def dot(self, other: Vector) -> Any:
        """
        Dot product. Measures alignment between two vectors.

        Args:
            other: A vector of the same type.

        Returns:
            Sum of element-wise products, as a scalar of type T.
        """
        if type(other) is not type(self):
            raise TypeError(f"dot() needs two {type(self).__name__} operands.")
        return self.dtype.type(np.dot(self._data, other._data))

    def norm_sq(self) -> Any:
        """Squared Euclidean length. Use it for distance comparisons to avoid sqrt()."""
        return self.dot(self)

    def norm(self) -> Any:
        """Euclidean length."""
        return np.sqrt(self.norm_sq())

    # --- Formatting ---

    def __str__(self) -> str:
        return "[" + ", ".join(_format_element(v) for v in self._data) + "]"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({', '.join(_format_element(v) for v in self._data)})"


def _format_element(value: Any) -> str:
    if isinstance(value, np.floating):
        return format(float(value), "g")
    return str(value)


def _coordinate(index: int) -> property:
    """Build the named accessor property for element ``index``."""
    name = COORDINATE_NAMES[index]

    def getter(self: Vector) -> Any:
        return self._data[index]

    def setter(self: Vector, value: Any) -> None:
        self._data[index] = value

    return property(getter, setter, doc=f"{name.upper()}-coordinate (element {index}).")


def _cross(self: Vector, other: Vector) -> Vector:
    """
    Cross product (3D only).

    Returns a vector perpendicular to the plane spanned by ``self`` and
    ``other``, following the right-hand rule.
    """
    if type(other) is not type(self):
        raise TypeError(f"cross() needs two {type(self).__name__} operands.")
    x1, y1, z1 = self._data
    x2, y2, z2 = other._data
    return type(self)(
        y1 * z2 - z1 * y2,
        z1 * x2 - x1 * z2,
        x1 * y2 - y1 * x2,
    )


def _normalized(self: Vector) -> Vector:
    """
    Return a new unit vector pointing in the same direction.

    A vector shorter than ``NORMALIZE_EPSILON`` has no usable direction; the
    zero vector is returned instead of dividing by a near-zero length.
    """
    length = self.norm()
    # Compare in float64: epsilon underflows to 0 in float16
    if float(length) < NORMALIZE_EPSILON:
        return type(self)()
    return self / length


def _normalize(self: Vector) -> None:
    """Normalise this vector in place (see ``normalized``)."""
    self._data[:] = self.normalized()._data


def _specialise(scalar_type: Any, dim: Any) -> type:
    """
    Create (or fetch from cache) the concrete class for ``Vector[T, N]``.

    Raises:
        TypeError: If T is not a real numeric type or N is not a positive int.
    """
    try:
        dtype = np.dtype(scalar_type)
    except TypeError as exc:
        raise TypeError(f"Unsupported scalar type for Vector: {scalar_type!r}") from exc
    if dtype.kind not in ("i", "f"):
        raise TypeError(f"Vector elements must be signed integers or floats, got {dtype.name}.")
    if isinstance(dim, bool) or not isinstance(dim, numbers.Integral) or dim < 1:
        raise TypeError(f"Vector dimension must be a positive integer, got {dim!r}.")
    dim = int(dim)

    key = (dtype, dim)
    cls = _SPECIALISATIONS.get(key)
    if cls is not None:
        return cls

    namespace: Dict[str, Any] = {
        "__slots__": (),
        "__module__": __name__,
        "dtype": dtype,
        "size": dim,
    }
    for index in range(min(dim, len(COORDINATE_NAMES))):
        namespace[COORDINATE_NAMES[index]] = _coordinate(index)
    if dim == 3:
        namespace["cross"] = _cross
    if dtype.kind == "f":
        namespace["normalized"] = _normalized
        namespace["normalize"] = _normalize

    name = f"Vector{dim}{_DTYPE_SUFFIXES.get(dtype.name, '_' + dtype.name)}"
    cls = type(name, (Vector,), namespace)
    _SPECIALISATIONS[key] = cls
    logger.debug(f"Specialised {name} (dtype={dtype.name}, size={dim})")
    return cls


Vector2f = Vector[np.float32, 2]
Vector3f = Vector[np.float32, 3]
Vector4f = Vector[np.float32, 4]

Vector2d = Vector[np.float64, 2]
Vector3d = Vector[np.float64, 3]
Vector4d = Vector[np.float64, 4]

Vector2i = Vector[np.int64, 2]
Vector3i = Vector[np.int64, 3]
Vector4i = Vector[np.int64, 4]
