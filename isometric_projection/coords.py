"""
isometric_projection/coords.py

Coordinate value types shared by the projection.

- GridCoord: integer (x, y, z) cell index in the world grid
- ScreenCoord: floating-point (x, y) pixel position plus a depth channel

Both are plain NamedTuples, so they compare, hash and unpack like tuples.

Grid components are limited to the signed 32-bit range
[GRID_MIN, GRID_MAX]. Every value in that range is exact in float64, so the
projection round trip stays exact across the whole grid.
"""

from typing import Any, NamedTuple, Sequence, Union

import numpy as np

from isometric_projection.validation import (
    validate_finite_scalar,
    validate_integral,
    validate_range,
    validate_vector3,
)

GRID_MIN = -(2 ** 31)
GRID_MAX = 2 ** 31 - 1


class GridCoord(NamedTuple):
    """
    Discrete cell index in the 3D world grid.

    Components are ints in [GRID_MIN, GRID_MAX], i.e. the int32 range.

    Attributes
    ----------
    x, y : int
        Horizontal grid axes.
    z : int
        Vertical grid axis (elevation).
    """

    x: int
    y: int
    z: int

    def as_array(self) -> np.ndarray:
        """Return the coordinate as an int64 array of shape (3,)."""
        return np.array(self, dtype=np.int64)


class ScreenCoord(NamedTuple):
    """
    Projected screen position.

    Attributes
    ----------
    x, y : float
        Pixel position on the screen plane.
    z : float
        Depth channel derived from world z, usable for layering.
    """

    x: float
    y: float
    z: float

    def as_array(self) -> np.ndarray:
        """Return the coordinate as a float64 array of shape (3,)."""
        return np.array(self, dtype=np.float64)


GridLike = Union[GridCoord, Sequence[Any], np.ndarray]
ScreenLike = Union[ScreenCoord, Sequence[Any], np.ndarray]


def to_grid_coord(value: GridLike, name: str = "grid coordinate") -> GridCoord:
    """
    Coerce a 3-sequence of integral numbers into a GridCoord.

    Raises
    ------
    ValidationError
        If the length is not 3, or a component is not integral or lies
        outside [GRID_MIN, GRID_MAX].
    TypeError
        If the value or a component is not numeric.
    """
    components = []
    for axis, component in zip("xyz", validate_vector3(value, name)):
        component = validate_integral(component, f"{name}.{axis}")
        validate_range(component, GRID_MIN, GRID_MAX, f"{name}.{axis}")
        components.append(component)
    return GridCoord(*components)


def to_screen_coord(value: ScreenLike, name: str = "screen coordinate") -> ScreenCoord:
    """
    Coerce a 3-sequence of finite numbers into a ScreenCoord.

    Raises
    ------
    ValidationError
        If the length is not 3 or a component is inf or nan.
    TypeError
        If the value or a component is not numeric.
    """
    x, y, z = validate_vector3(value, name)
    return ScreenCoord(
        validate_finite_scalar(x, f"{name}.x"),
        validate_finite_scalar(y, f"{name}.y"),
        validate_finite_scalar(z, f"{name}.z"),
    )
