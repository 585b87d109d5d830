"""
isometric_projection/projection.py

Isometric projection between the 3D world grid and screen space.

Convention
----------
With half tile sizes ``hw = tile_width / 2`` and ``hh = tile_height / 2``:

    screen.x = hw * (x - y)
    screen.y = hh / 2 * (x + y)
    screen.z = hh * z

The (x, y) part is a 2x2 linear map with determinant ``hw * hh``, so it is
invertible for any positive tile size. World z is carried separately in the
depth channel.

screen_to_world applies the precomputed inverse and rounds each component to
the nearest integer, with ties rounded away from zero. Results beyond the grid
range [GRID_MIN, GRID_MAX] saturate at its bounds. For every grid coordinate
in range the composition screen_to_world(world_to_screen(p)) returns p.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Tuple

import numpy as np

from isometric_projection.coords import (
    GRID_MAX,
    GRID_MIN,
    GridCoord,
    GridLike,
    ScreenCoord,
    ScreenLike,
    to_grid_coord,
    to_screen_coord,
)
from isometric_projection.validation import (
    ValidationError,
    validate_finite_scalar,
    validate_points_array,
    validate_positive,
)

logger = logging.getLogger(__name__)


def _make_immutable_copy(array: np.ndarray) -> np.ndarray:
    """Create an immutable float64 copy of an array."""
    copy = np.array(array, dtype=np.float64, copy=True)
    copy.flags.writeable = False
    return copy


def round_half_away(values: np.ndarray) -> np.ndarray:
    """
    Round to the nearest integer, ties away from zero.

    numpy's own rounding is half-to-even; this matches the usual
    ``round()`` of most graphics math libraries instead.

    Parameters
    ----------
    values : np.ndarray
        Finite float values within the int64 range.

    Returns
    -------
    np.ndarray
        Rounded values as int64.
    """
    values = np.asarray(values, dtype=np.float64)
    whole = np.trunc(values)
    # exact for finite floats, so ties are detected without drift
    frac = values - whole
    rounded = whole + np.where(np.abs(frac) >= 0.5, np.sign(values), 0.0)
    return rounded.astype(np.int64)


@dataclass(frozen=True)
class IsometricProjection:
    """
    Immutable isometric projection for a fixed tile size.

    Parameters
    ----------
    tile_width : float
        Width of one isometric tile in screen pixels.
    tile_height : float
        Height of one isometric tile in screen pixels.

    Raises
    ------
    TypeError
        If a tile dimension is not numeric.
    ValidationError
        If a tile dimension is zero, negative or non-finite.

    Examples
    --------
    >>> proj = IsometricProjection(28, 28)
    >>> screen = proj.world_to_screen((10, 20, 30))
    >>> screen
    ScreenCoord(x=-140.0, y=210.0, z=420.0)
    >>> proj.screen_to_world(screen)
    GridCoord(x=10, y=20, z=30)
    """

    tile_width: float
    tile_height: float
    _matrix: np.ndarray = field(init=False, repr=False, compare=False)
    _inverse: np.ndarray = field(init=False, repr=False, compare=False)
    _z_scale: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate tile size and precompute the transform."""
        width = validate_finite_scalar(self.tile_width, "tile_width")
        height = validate_finite_scalar(self.tile_height, "tile_height")
        validate_positive(width, "tile_width")
        validate_positive(height, "tile_height")
        object.__setattr__(self, "tile_width", width)
        object.__setattr__(self, "tile_height", height)

        half_w = width / 2.0
        half_h = height / 2.0
        matrix = np.array(
            [
                [half_w, -half_w],
                [0.5 * half_h, 0.5 * half_h],
            ],
            dtype=np.float64,
        )
        object.__setattr__(self, "_matrix", _make_immutable_copy(matrix))
        object.__setattr__(self, "_inverse", _make_immutable_copy(np.linalg.inv(matrix)))
        object.__setattr__(self, "_z_scale", half_h)

        logger.debug("Created isometric projection for %gx%g tiles", width, height)

    @classmethod
    def from_half_tile(cls, half_width: float, half_height: float) -> "IsometricProjection":
        """
        Create a projection from half tile dimensions.

        ``from_half_tile(14, 14)`` is the same projection as
        ``IsometricProjection(28, 28)``.
        """
        half_width = validate_finite_scalar(half_width, "half_width")
        half_height = validate_finite_scalar(half_height, "half_height")
        return cls(2.0 * half_width, 2.0 * half_height)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def tile_size(self) -> Tuple[float, float]:
        """Tile size (width, height) in pixels."""
        return (self.tile_width, self.tile_height)

    @property
    def half_tile(self) -> Tuple[float, float]:
        """Half tile size (width / 2, height / 2) in pixels."""
        return (self.tile_width / 2.0, self.tile_height / 2.0)

    @property
    def matrix(self) -> np.ndarray:
        """Read-only 2x2 matrix mapping world (x, y) to screen (x, y)."""
        return self._matrix

    @property
    def inverse_matrix(self) -> np.ndarray:
        """Read-only inverse of ``matrix``."""
        return self._inverse

    @property
    def z_scale(self) -> float:
        """Screen depth units per world z step."""
        return self._z_scale

    # -------------------------------------------------------------------------
    # Conversions
    # -------------------------------------------------------------------------

    def _forward(self, points: np.ndarray) -> np.ndarray:
        out = np.empty(points.shape, dtype=np.float64)
        out[..., :2] = points[..., :2] @ self._matrix.T
        out[..., 2] = points[..., 2] * self._z_scale
        return out

    def _backward(self, points: np.ndarray) -> np.ndarray:
        out = np.empty(points.shape, dtype=np.float64)
        out[..., :2] = points[..., :2] @ self._inverse.T
        out[..., 2] = points[..., 2] / self._z_scale
        # saturate to the grid range, like an int32 cast
        return round_half_away(np.clip(out, GRID_MIN, GRID_MAX))

    def world_to_screen(self, world_pos: GridLike) -> ScreenCoord:
        """
        Convert a grid position to its screen position.

        Parameters
        ----------
        world_pos : GridCoord or sequence of 3 ints
            Grid cell (x, y, z).

        Returns
        -------
        ScreenCoord
            Screen position (x, y) and depth z.

        Raises
        ------
        ValidationError
            If the position does not have 3 integral components within
            [GRID_MIN, GRID_MAX].
        """
        grid = to_grid_coord(world_pos, "world_pos")
        screen = self._forward(np.array(grid, dtype=np.float64))
        return ScreenCoord(float(screen[0]), float(screen[1]), float(screen[2]))

    def screen_to_world(self, screen_pos: ScreenLike) -> GridCoord:
        """
        Convert a screen position to the nearest grid position.

        Positions that were not produced by ``world_to_screen`` resolve to
        the nearest cell per axis, ties rounded away from zero. Cells beyond
        the grid range saturate at GRID_MIN or GRID_MAX.

        Parameters
        ----------
        screen_pos : ScreenCoord or sequence of 3 floats
            Screen position (x, y) and depth z.

        Returns
        -------
        GridCoord
            Grid cell (x, y, z).

        Raises
        ------
        ValidationError
            If the position does not have 3 finite components.
        """
        screen = to_screen_coord(screen_pos, "screen_pos")
        grid = self._backward(np.array(screen, dtype=np.float64))
        return GridCoord(int(grid[0]), int(grid[1]), int(grid[2]))

    def world_to_screen_array(self, points: Any) -> np.ndarray:
        """
        Vectorized ``world_to_screen``.

        Parameters
        ----------
        points : array-like
            Grid positions with shape (3,) or (N, 3). Values must be integral.

        Returns
        -------
        np.ndarray
            float64 screen positions with the same shape.
        """
        array = validate_points_array(points, "points")
        if np.any(array != np.trunc(array)):
            raise ValidationError("points must contain integral grid coordinates")
        if np.any((array < GRID_MIN) | (array > GRID_MAX)):
            raise ValidationError(
                f"points must lie within the grid range [{GRID_MIN}, {GRID_MAX}]"
            )
        return self._forward(array)

    def screen_to_world_array(self, points: Any) -> np.ndarray:
        """
        Vectorized ``screen_to_world``.

        Parameters
        ----------
        points : array-like
            Screen positions with shape (3,) or (N, 3).

        Returns
        -------
        np.ndarray
            int64 grid positions with the same shape.
        """
        array = validate_points_array(points, "points")
        return self._backward(array)

    def axis_steps(self) -> Tuple[ScreenCoord, ScreenCoord, ScreenCoord]:
        """
        Screen offsets produced by a unit step along world x, y and z.

        The projection is linear, so moving one cell along an axis always
        shifts the screen position by the same offset.
        """
        steps = self._forward(np.eye(3, dtype=np.float64))
        return tuple(ScreenCoord(*(float(v) for v in row)) for row in steps)  # type: ignore[return-value]

    def __repr__(self) -> str:
        """Concise string representation."""
        return (
            f"IsometricProjection(tile_width={self.tile_width:g}, "
            f"tile_height={self.tile_height:g})"
        )
